"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from stackit.domain.model.vote import Vote
from stackit.domain.repository.vote import VoteRepository
from stackit.domain.value import AnswerId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_voter_and_answer(
        self, voter_id: UserId, answer_id: AnswerId
    ) -> Optional[Vote]:
        """Find a voter's vote on an answer."""
        for vote in self._votes:
            if vote.voter_id == voter_id and vote.answer_id == answer_id:
                return vote
        return None

    async def find_by_answer(self, answer_id: AnswerId) -> list[Vote]:
        """Find all votes on an answer."""
        return [v for v in self._votes if v.answer_id == answer_id]

    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[Vote]:
        """Find all votes on several answers (batch query)."""
        if not answer_ids:
            return []

        wanted = set(answer_ids)
        return [v for v in self._votes if v.answer_id in wanted]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or overwrite the polarity of the existing one."""
        for i, existing in enumerate(self._votes):
            if (
                existing.voter_id == vote.voter_id
                and existing.answer_id == vote.answer_id
            ):
                updated = existing.model_copy(update={"polarity": vote.polarity})
                self._votes[i] = updated
                return updated

        self._votes.append(vote)
        return vote

    async def delete_by_voter_and_answer(
        self, voter_id: UserId, answer_id: AnswerId
    ) -> bool:
        """Delete a voter's vote on an answer."""
        for i, vote in enumerate(self._votes):
            if vote.voter_id == voter_id and vote.answer_id == answer_id:
                self._votes.pop(i)
                return True
        return False
