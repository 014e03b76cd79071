"""Mock real-time providers for testing."""

from dishka import Scope, provide

from stackit.adapter.realtime import InMemoryNotificationPublisher
from stackit.domain.service import NotificationPublisher
from stackit.util.di.infrastructure.realtime import RealtimeProvider


class MockRealtimeProvider(RealtimeProvider):
    """Mock real-time provider recording published changes in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_in_memory_publisher(self) -> InMemoryNotificationPublisher:
        """Provide the recording publisher (tests inspect it directly)."""
        return InMemoryNotificationPublisher()

    @provide(scope=Scope.APP)
    def get_notification_publisher(
        self, publisher: InMemoryNotificationPublisher
    ) -> NotificationPublisher:
        """Expose the recording publisher as the domain collaborator."""
        return publisher
