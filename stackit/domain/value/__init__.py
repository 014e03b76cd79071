"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import (
    AnswerId,
    NotificationId,
    QuestionId,
    UserId,
    VoteId,
)
from stackit.domain.value.session import Session
from stackit.domain.value.types import (
    NotificationKind,
    Polarity,
    TagName,
    Username,
    VoteState,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "VoteId",
    "NotificationId",
    # Types
    "NotificationKind",
    "Polarity",
    "TagName",
    "Username",
    "VoteState",
    "Session",
]
