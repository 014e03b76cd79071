"""Vote domain service.

Scores are never stored: every tally is recomputed from the vote rows.
"""

from collections import defaultdict
from datetime import datetime
from typing import Iterable, Optional, Sequence
from uuid import uuid4

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model import Vote, VoteOutcome, VoteTally
from stackit.domain.repository import AnswerRepository, VoteRepository
from stackit.domain.value import AnswerId, Polarity, UserId, VoteId, VoteState

from .base import Service
from .notification_service import NotificationService


def aggregate_votes(
    answer_id: AnswerId,
    votes: Iterable[Vote],
    viewer_id: Optional[UserId] = None,
) -> VoteTally:
    """Aggregate raw vote rows for one answer.

    Rows for other answers are ignored. Duplicate rows are summed as given;
    uniqueness per voter is the store's job.

    Args:
        answer_id: Answer to aggregate
        votes: Vote rows (may include rows for other answers)
        viewer_id: User whose own vote should be reported

    Returns:
        Score and the viewer's vote (None without a viewer or vote)
    """
    score = 0
    viewer_vote: Optional[Polarity] = None
    for vote in votes:
        if vote.answer_id != answer_id:
            continue
        score += int(vote.polarity)
        if viewer_id is not None and vote.voter_id == viewer_id:
            viewer_vote = vote.polarity
    return VoteTally(answer_id=answer_id, score=score, viewer_vote=viewer_vote)


def next_vote_state(current: VoteState, polarity: Polarity) -> VoteState:
    """Vote toggle transition.

    Casting the polarity already held clears the vote; anything else moves
    straight to the cast polarity (an opposite vote is replaced, not added).
    """
    if current.polarity == polarity:
        return VoteState.NONE
    return VoteState.from_polarity(polarity)


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            answer_repository: Answer repository
            notification_service: Notification domain service
        """
        self.vote_repository = vote_repository
        self.answer_repository = answer_repository
        self.notification_service = notification_service

    async def apply_vote(
        self, voter_id: UserId, answer_id: AnswerId, polarity: Polarity
    ) -> VoteOutcome:
        """Cast, switch or withdraw a vote on an answer.

        Args:
            voter_id: Voter's user ID
            answer_id: Answer ID
            polarity: Polarity being cast

        Returns:
            Previous and resulting vote state, the fresh tally and the
            upvote notification if one was created

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span(
            "vote_service.apply_vote",
            voter_id=str(voter_id),
            answer_id=str(answer_id),
            polarity=int(polarity),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Vote on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            existing = await self.vote_repository.find_by_voter_and_answer(
                voter_id, answer_id
            )
            previous = VoteState.from_polarity(existing.polarity if existing else None)
            state = next_vote_state(previous, polarity)

            if state == VoteState.NONE:
                await self.vote_repository.delete_by_voter_and_answer(
                    voter_id, answer_id
                )
            else:
                await self.vote_repository.upsert(
                    Vote(
                        id=existing.id if existing else VoteId(uuid4()),
                        voter_id=voter_id,
                        answer_id=answer_id,
                        polarity=polarity,
                        created_at=datetime.now(),
                    )
                )

            votes = await self.vote_repository.find_by_answer(answer_id)
            tally = aggregate_votes(answer_id, votes, viewer_id=voter_id)

            notification = await self.notification_service.on_vote_cast(
                answer, voter_id, state
            )

            logfire.info(
                "Vote applied",
                answer_id=str(answer_id),
                previous_state=previous.value,
                state=state.value,
                score=tally.score,
            )

            return VoteOutcome(
                answer_id=answer_id,
                previous_state=previous,
                state=state,
                tally=tally,
                notification=notification,
            )

    async def get_tallies(
        self, answer_ids: Sequence[AnswerId], viewer_id: Optional[UserId] = None
    ) -> dict[AnswerId, VoteTally]:
        """Aggregate votes for several answers at once.

        Args:
            answer_ids: Answers to aggregate
            viewer_id: User whose own votes should be reported

        Returns:
            Dictionary mapping every requested answer ID to its tally
        """
        if not answer_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_answers(answer_ids)

        votes_by_answer: dict[AnswerId, list[Vote]] = defaultdict(list)
        for vote in votes:
            votes_by_answer[vote.answer_id].append(vote)

        return {
            answer_id: aggregate_votes(
                answer_id, votes_by_answer.get(answer_id, []), viewer_id
            )
            for answer_id in answer_ids
        }
