"""In-memory question repository for testing."""

from typing import Optional

from stackit.domain.model.question import Question
from stackit.domain.repository.question import QuestionRepository, QuestionSortOrder
from stackit.domain.value import QuestionId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    def _matching(self, search: Optional[str]) -> list[Question]:
        questions = list(self._questions.values())
        if not search or not search.strip():
            return questions
        term = search.strip().lower()
        return [
            q for q in questions if term in q.title.lower() or term in q.body.lower()
        ]

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_all(
        self,
        search: Optional[str] = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with search and pagination."""
        questions = sorted(
            self._matching(search),
            key=lambda q: q.created_at,
            reverse=sort == QuestionSortOrder.NEWEST,
        )
        return questions[offset : offset + limit]

    async def count(self, search: Optional[str] = None) -> int:
        """Count questions matching the search."""
        return len(self._matching(search))

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question
