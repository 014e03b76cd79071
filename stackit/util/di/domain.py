"""Domain layer DI providers."""

from dishka import Scope, provide

from stackit.config import AuthSettings, QuestionSettings
from stackit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from stackit.domain.service import (
    AnswerService,
    JWTService,
    NotificationPublisher,
    NotificationService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        question_settings: QuestionSettings,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            max_tags=question_settings.max_tags,
        )

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
        publisher: NotificationPublisher,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            user_repository=user_repository,
            publisher=publisher,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            answer_repository=answer_repository,
            notification_service=notification_service,
        )
