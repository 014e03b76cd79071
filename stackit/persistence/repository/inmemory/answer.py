"""In-memory answer repository for testing."""

from typing import Optional, Sequence

from stackit.domain.model.answer import Answer
from stackit.domain.repository.answer import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question, oldest first."""
        # Insertion order breaks created_at ties
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        return sorted(answers, key=lambda a: a.created_at)

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers for several questions."""
        counts = {qid: 0 for qid in question_ids}
        for answer in self._answers.values():
            if answer.question_id in counts:
                counts[answer.question_id] += 1
        return counts

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._answers[answer.id] = answer
        return answer

    async def count(self) -> int:
        """Count all answers."""
        return len(self._answers)
