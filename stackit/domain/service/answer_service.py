"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from stackit.domain.error import ValidationError
from stackit.domain.model import Answer, Question, User
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    async def create_answer(self, question: Question, author: User, body: str) -> Answer:
        """Create an answer to a question.

        Args:
            question: Question being answered
            author: Answering user
            body: Answer body (stored verbatim)

        Returns:
            The saved answer

        Raises:
            ValidationError: If the body is empty
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question.id),
            author_id=str(author.id),
        ):
            if not body.strip():
                raise ValidationError("Answer cannot be empty")

            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question.id,
                body=body,
                author_id=author.id,
                author_username=author.username,
                created_at=datetime.now(),
            )

            saved = await self.answer_repository.save(answer)
            logfire.info(
                "Answer created",
                answer_id=str(saved.id),
                question_id=str(question.id),
            )
            return saved

    async def get_answers_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Get a question's answers in creation order."""
        with logfire.span(
            "answer_service.get_answers_for_question", question_id=str(question_id)
        ):
            answers = await self.answer_repository.find_by_question(question_id)
            logfire.info(
                "Answers retrieved", question_id=str(question_id), count=len(answers)
            )
            return answers

    async def count_by_questions(
        self, question_ids: list[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers for several questions."""
        if not question_ids:
            return {}
        return await self.answer_repository.count_by_questions(question_ids)

    async def count_answers(self) -> int:
        """Count all answers."""
        return await self.answer_repository.count()
