"""Application layer DI providers."""

from dishka import Scope, provide

from stackit.application.usecase.answer import PostAnswerUseCase
from stackit.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    SignUpUseCase,
)
from stackit.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from stackit.application.usecase.question import (
    AskQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from stackit.application.usecase.stats import GetCommunityStatsUseCase
from stackit.application.usecase.vote import CastVoteUseCase
from stackit.config import NotificationSettings, QuestionSettings
from stackit.domain.service import (
    AnswerService,
    JWTService,
    NotificationService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SignUpUseCase:
        """Provide sign up use case."""
        return SignUpUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService, notification_service: NotificationService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            user_service=user_service, notification_service=notification_service
        )

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_ask_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> AskQuestionUseCase:
        """Provide ask question use case."""
        return AskQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        question_settings: QuestionSettings,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            answer_service=answer_service,
            question_settings=question_settings,
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_post_answer_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> PostAnswerUseCase:
        """Provide post answer use case."""
        return PostAnswerUseCase(
            question_service=question_service,
            answer_service=answer_service,
            user_service=user_service,
            notification_service=notification_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self,
        notification_service: NotificationService,
        notification_settings: NotificationSettings,
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service,
            notification_settings=notification_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    # Stats use cases
    @provide(scope=Scope.REQUEST)
    def get_community_stats_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> GetCommunityStatsUseCase:
        """Provide community stats use case."""
        return GetCommunityStatsUseCase(
            question_service=question_service,
            answer_service=answer_service,
            user_service=user_service,
        )
