"""Real-time infrastructure providers."""

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.adapter.realtime import PostgresNotificationPublisher
from stackit.config import NotificationSettings
from stackit.domain.service import NotificationPublisher
from stackit.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Real-time component base."""

    __mock_component__ = "realtime"


class ProdRealtimeProvider(RealtimeProvider):
    """Production real-time provider using PostgreSQL LISTEN/NOTIFY."""

    __is_mock__ = False

    @provide(scope=Scope.REQUEST)
    def get_notification_publisher(
        self, session: AsyncSession, notification_settings: NotificationSettings
    ) -> NotificationPublisher:
        """Provide notification change publisher.

        Shares the request session so NOTIFY is sent on commit only.
        """
        return PostgresNotificationPublisher(
            session=session, channel=notification_settings.channel
        )
