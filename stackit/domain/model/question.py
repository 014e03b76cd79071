"""Question aggregate root."""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import QuestionId, TagName, UserId, Username

MAX_TAGS = 5


class Question(DomainModel):
    """Question aggregate root.

    The body may contain @mention tokens and a small inline markup subset;
    it is stored and returned verbatim.
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1)
    tags: list[TagName] = Field(default_factory=list, max_length=MAX_TAGS)
    author_id: UserId
    author_username: Username
    created_at: datetime = Field(default_factory=datetime.now)
