"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from stackit.domain.model.vote import Vote
from stackit.domain.value import AnswerId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_voter_and_answer(
        self, voter_id: UserId, answer_id: AnswerId
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific answer.

        Args:
            voter_id: The voter's user ID
            answer_id: The answer's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_answer(self, answer_id: AnswerId) -> List[Vote]:
        """Find all votes on an answer.

        Args:
            answer_id: The answer's ID

        Returns:
            List of votes on the answer
        """
        pass

    @abstractmethod
    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> List[Vote]:
        """Find all votes on several answers (batch query).

        Args:
            answer_ids: Answer IDs to fetch votes for

        Returns:
            List of votes on any of the answers
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, or replace the polarity of an existing one.

        The conflict target is (voter_id, answer_id): when a row already
        exists for the pair its polarity is overwritten, so the store never
        holds two votes from one voter on one answer.

        Args:
            vote: The vote to write

        Returns:
            The stored vote (keeps the existing row's ID on conflict)
        """
        pass

    @abstractmethod
    async def delete_by_voter_and_answer(
        self, voter_id: UserId, answer_id: AnswerId
    ) -> bool:
        """Delete a voter's vote on an answer.

        Args:
            voter_id: The voter's user ID
            answer_id: The answer's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
