"""Cast vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import VoteService
from stackit.domain.value import AnswerId, Polarity, Session, VoteState


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    session: Session
    answer_id: str  # UUID string
    polarity: Polarity


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    answer_id: str
    previous_state: VoteState
    state: VoteState
    score: int
    viewer_vote: Optional[int]  # 1, -1 or None
    notified: bool  # Whether the answer's author was notified


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on an answer.

    Casting the same polarity twice withdraws the vote; casting the
    opposite polarity switches it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            NotFoundError: If the answer does not exist
        """
        outcome = await self.vote_service.apply_vote(
            voter_id=request.session.user_id,
            answer_id=AnswerId(UUID(request.answer_id)),
            polarity=request.polarity,
        )

        viewer_vote = outcome.tally.viewer_vote
        return CastVoteResponse(
            answer_id=str(outcome.answer_id),
            previous_state=outcome.previous_state,
            state=outcome.state,
            score=outcome.tally.score,
            viewer_vote=int(viewer_vote) if viewer_vote is not None else None,
            notified=outcome.notification is not None,
        )
