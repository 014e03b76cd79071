"""In-memory publisher for testing."""

from stackit.domain.service.notification_service import NotificationPublisher
from stackit.domain.value import UserId


class InMemoryNotificationPublisher(NotificationPublisher):
    """Records every published change in order."""

    def __init__(self) -> None:
        self.published: list[UserId] = []

    async def notifications_changed(self, user_id: UserId) -> None:
        """Record the change."""
        self.published.append(user_id)
