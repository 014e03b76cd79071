"""Answer entity.

Answers are children of exactly one question.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import AnswerId, Polarity, QuestionId, UserId, Username


class Answer(DomainModel):
    """Answer to a question."""

    id: AnswerId
    question_id: QuestionId
    body: str = Field(min_length=1)
    author_id: UserId
    author_username: Username
    created_at: datetime = Field(default_factory=datetime.now)


class ScoredAnswer(DomainModel):
    """Answer annotated with its aggregate score.

    Read model only; the score is computed from vote rows on demand and
    never stored on the answer.
    """

    answer: Answer
    score: int = 0
    viewer_vote: Optional[Polarity] = None
