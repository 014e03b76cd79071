"""In-memory notification repository for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from stackit.domain.model.notification import Notification
from stackit.domain.repository.notification import NotificationRepository
from stackit.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a recipient's notifications, newest first."""
        # Reversed insertion order breaks created_at ties newest first
        notifications = [
            n
            for n in reversed(list(self._notifications.values()))
            if n.recipient_id == recipient_id and not (unread_only and n.is_read)
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not n.is_read
        )

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_read(self, notification_id: NotificationId) -> bool:
        """Mark one notification read."""
        notification = self._notifications.get(notification_id)
        if not notification or notification.is_read:
            return False
        self._notifications[notification_id] = notification.model_copy(
            update={"is_read": True}
        )
        return True

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of a recipient's notifications read."""
        updated = 0
        for notification_id, n in list(self._notifications.items()):
            if n.recipient_id == recipient_id and not n.is_read:
                self._notifications[notification_id] = n.model_copy(
                    update={"is_read": True}
                )
                updated += 1
        return updated

    @asynccontextmanager
    async def isolated(self) -> AsyncIterator[None]:
        """Nothing to undo in memory; exceptions propagate unchanged."""
        yield
