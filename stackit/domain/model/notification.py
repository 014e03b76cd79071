"""Notification entity.

Notifications are created as side effects of answers and votes, and are
only ever mutated by being marked read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import (
    AnswerId,
    NotificationId,
    NotificationKind,
    QuestionId,
    UserId,
)


class Notification(DomainModel):
    """Notification addressed to a single user."""

    id: NotificationId
    recipient_id: UserId
    kind: NotificationKind
    title: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1)
    related_question_id: Optional[QuestionId] = None
    related_answer_id: Optional[AnswerId] = None
    related_user_id: Optional[UserId] = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
