"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from stackit.domain.model.question import Question
from stackit.domain.value import QuestionId


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # Sort by created_at DESC
    OLDEST = "oldest"  # Sort by created_at ASC


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with search, ordering and pagination.

        Args:
            search: Case-insensitive substring matched against title and body
            sort: Sort order (newest or oldest)
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, search: Optional[str] = None) -> int:
        """Count questions matching the search term.

        Args:
            search: Case-insensitive substring matched against title and body

        Returns:
            Total number of matching questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass
