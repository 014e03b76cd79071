"""Post answer use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.application.usecase.notification.list_notifications import (
    NotificationItem,
)
from stackit.domain.service import (
    AnswerService,
    NotificationService,
    QuestionService,
    UserService,
)
from stackit.domain.value import QuestionId, Session


class PostAnswerRequest(BaseModel):
    """Post answer request."""

    session: Session
    question_id: str  # UUID string
    body: str


class PostAnswerResponse(BaseModel):
    """Post answer response."""

    answer_id: str
    question_id: str
    body: str
    author_id: str
    author_username: str
    created_at: datetime
    notifications: list[NotificationItem]


class PostAnswerUseCase(BaseUseCase):
    """Use case for answering a question.

    Notifies the question author and every mentioned user. Notification
    failures never fail the answer.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize post answer use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_service: User domain service
            notification_service: Notification domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service
        self.notification_service = notification_service

    async def execute(self, request: PostAnswerRequest) -> PostAnswerResponse:
        """Execute post answer flow.

        Raises:
            NotFoundError: If the question does not exist
            ValidationError: If the answer body is empty
        """
        with logfire.span(
            "post_answer.execute",
            question_id=request.question_id,
            author_id=str(request.session.user_id),
        ):
            question = await self.question_service.get_question(
                QuestionId(UUID(request.question_id))
            )
            author = await self.user_service.get_by_id(request.session.user_id)
            answer = await self.answer_service.create_answer(
                question=question, author=author, body=request.body
            )

            notifications = await self.notification_service.on_answer_posted(
                question, answer, author
            )

            return PostAnswerResponse(
                answer_id=str(answer.id),
                question_id=str(answer.question_id),
                body=answer.body,
                author_id=str(answer.author_id),
                author_username=answer.author_username.root,
                created_at=answer.created_at,
                notifications=[
                    NotificationItem.from_notification(n) for n in notifications
                ],
            )
