"""List questions use case."""

import math
from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel, Field

from stackit.application.usecase.base import BaseUseCase
from stackit.config import QuestionSettings
from stackit.domain.repository import QuestionSortOrder
from stackit.domain.service import AnswerService, QuestionService


class QuestionListItem(BaseModel):
    """Question list item in response."""

    question_id: str
    title: str
    body: str
    tags: list[str]
    author_id: str
    author_username: str
    created_at: datetime
    answer_count: int


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    search: Optional[str] = None
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    page: int = Field(default=1, ge=1)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionListItem]
    total: int
    page: int
    page_size: int
    total_pages: int


class ListQuestionsUseCase(BaseUseCase):
    """Use case for searching and paging through questions."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        question_settings: QuestionSettings,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            question_settings: Page size configuration
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.page_size = question_settings.page_size

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Search term, sort order and page number

        Returns:
            One page of questions with their answer counts
        """
        with logfire.span(
            "list_questions.execute",
            search=request.search,
            sort=request.sort.value,
            page=request.page,
        ):
            questions, total = await self.question_service.list_questions(
                search=request.search,
                sort=request.sort,
                page=request.page,
                page_size=self.page_size,
            )

            # Batch count to avoid N+1
            answer_counts = await self.answer_service.count_by_questions(
                [question.id for question in questions]
            )

            items = [
                QuestionListItem(
                    question_id=str(question.id),
                    title=question.title,
                    body=question.body,
                    tags=[tag.root for tag in question.tags],
                    author_id=str(question.author_id),
                    author_username=question.author_username.root,
                    created_at=question.created_at,
                    answer_count=answer_counts.get(question.id, 0),
                )
                for question in questions
            ]

            return ListQuestionsResponse(
                questions=items,
                total=total,
                page=request.page,
                page_size=self.page_size,
                total_pages=max(1, math.ceil(total / self.page_size)),
            )
