"""Ask question use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.model import Question
from stackit.domain.service import QuestionService, UserService
from stackit.domain.value import Session


class AskQuestionRequest(BaseModel):
    """Ask question request."""

    session: Session
    title: str
    body: str
    tags: list[str] = Field(default_factory=list)


class QuestionResponse(BaseModel):
    """A question as shown to clients."""

    question_id: str
    title: str
    body: str
    tags: list[str]
    author_id: str
    author_username: str
    created_at: datetime

    @classmethod
    def from_question(cls, question: Question) -> "QuestionResponse":
        """Build the response from a domain model."""
        return cls(
            question_id=str(question.id),
            title=question.title,
            body=question.body,
            tags=[tag.root for tag in question.tags],
            author_id=str(question.author_id),
            author_username=question.author_username.root,
            created_at=question.created_at,
        )


class AskQuestionUseCase(BaseUseCase):
    """Use case for asking a new question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize ask question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: AskQuestionRequest) -> QuestionResponse:
        """Execute ask question flow.

        Raises:
            ValidationError: If the title, body or tags are invalid
            NotFoundError: If the session's user no longer exists
        """
        author = await self.user_service.get_by_id(request.session.user_id)
        question = await self.question_service.create_question(
            author=author,
            title=request.title,
            body=request.body,
            tags=request.tags,
        )
        return QuestionResponse.from_question(question)
