"""Vote entity.

Votes are up (+1) or down (-1). Each user holds at most one vote per
answer; casting again replaces or removes it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.model.notification import Notification
from stackit.domain.value import AnswerId, Polarity, UserId, VoteId, VoteState


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per answer (unique constraint, upsert on conflict)
    - Polarity is +1 or -1
    """

    id: VoteId
    voter_id: UserId
    answer_id: AnswerId
    polarity: Polarity
    created_at: datetime = Field(default_factory=datetime.now)


class VoteTally(DomainModel):
    """Aggregated votes on one answer, as seen by an optional viewer."""

    answer_id: AnswerId
    score: int = 0
    viewer_vote: Optional[Polarity] = None

    @property
    def viewer_state(self) -> VoteState:
        """The viewer's vote state on this answer."""
        return VoteState.from_polarity(self.viewer_vote)


class VoteOutcome(DomainModel):
    """Result of casting a vote: the new state and the fresh aggregate."""

    answer_id: AnswerId
    previous_state: VoteState
    state: VoteState
    tally: VoteTally
    notification: Optional[Notification] = None
