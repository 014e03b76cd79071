"""Question domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.model import Question, User
from stackit.domain.repository import QuestionRepository, QuestionSortOrder
from stackit.domain.value import QuestionId, TagName

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self, question_repository: QuestionRepository, max_tags: int = 5
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            max_tags: Maximum number of tags per question
        """
        self.question_repository = question_repository
        self.max_tags = max_tags

    def normalize_tags(self, tags: list[str]) -> list[TagName]:
        """Trim tags, drop empty and repeated ones, and enforce the limit.

        Raises:
            ValidationError: If there are too many tags or one is too long
        """
        cleaned = list(dict.fromkeys(tag.strip() for tag in tags if tag.strip()))
        if len(cleaned) > self.max_tags:
            raise ValidationError(f"A question can have at most {self.max_tags} tags")
        try:
            return [TagName(tag) for tag in cleaned]
        except ValueError as e:
            raise ValidationError("Tags must be 1-30 characters each") from e

    async def create_question(
        self, author: User, title: str, body: str, tags: list[str]
    ) -> Question:
        """Create a question.

        Args:
            author: Asking user
            title: Question title
            body: Question body (stored verbatim)
            tags: Raw tag strings

        Returns:
            The saved question

        Raises:
            ValidationError: If title or body is empty, or tags are invalid
        """
        with logfire.span(
            "question_service.create_question",
            author_id=str(author.id),
            title=title,
            tag_count=len(tags),
        ):
            title = title.strip()
            if not title:
                raise ValidationError("Title is required")
            if len(title) > 300:
                raise ValidationError("Title must be at most 300 characters")
            if not body.strip():
                raise ValidationError("Description is required")

            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                body=body,
                tags=self.normalize_tags(tags),
                author_id=author.id,
                author_username=author.username,
                created_at=datetime.now(),
            )

            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "question_service.get_question", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def list_questions(
        self,
        search: Optional[str] = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        page: int = 1,
        page_size: int = 10,
    ) -> tuple[list[Question], int]:
        """List one page of questions.

        Args:
            search: Case-insensitive term matched against title and body
            sort: Newest or oldest first
            page: 1-based page number
            page_size: Questions per page

        Returns:
            The page of questions and the total number of matches
        """
        search = search.strip() if search else None
        with logfire.span(
            "question_service.list_questions",
            search=search,
            sort=sort.value,
            page=page,
        ):
            total = await self.question_repository.count(search=search or None)
            questions = await self.question_repository.find_all(
                search=search or None,
                sort=sort,
                limit=page_size,
                offset=(page - 1) * page_size,
            )
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def count_questions(self) -> int:
        """Count all questions."""
        return await self.question_repository.count()
