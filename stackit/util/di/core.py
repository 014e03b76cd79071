"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from stackit.config import (
    AuthSettings,
    NotificationSettings,
    QuestionSettings,
    Settings,
)
from stackit.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_question_settings(self, settings: Settings) -> QuestionSettings:
        """Provide question settings."""
        return settings.questions

    @provide(scope=Scope.APP)
    def provide_notification_settings(
        self, settings: Settings
    ) -> NotificationSettings:
        """Provide notification settings."""
        return settings.notifications
