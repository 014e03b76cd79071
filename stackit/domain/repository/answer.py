"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from stackit.domain.model.answer import Answer
from stackit.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, oldest first.

        Creation order is what the answer ranker relies on for its
        tie-break, so implementations must honour it.

        Args:
            question_id: The parent question ID

        Returns:
            Answers in ascending created_at order
        """
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count answers for several questions (batch query).

        Args:
            question_ids: Question IDs to count answers for

        Returns:
            Mapping of question ID to answer count (missing IDs have no answers)
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all answers."""
        pass
