"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, List, Optional

from stackit.domain.model.notification import Notification
from stackit.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Defines the contract for notification persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a user's notifications, newest first.

        Args:
            recipient_id: The recipient's user ID
            unread_only: Only return notifications not yet read
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            Notifications in descending created_at order
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a new notification.

        A failed insert must leave the surrounding unit of work usable,
        since notification delivery is best-effort.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> bool:
        """Mark one notification read.

        Args:
            notification_id: The notification to update

        Returns:
            True if the notification changed, False if it was already read
            or does not exist
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a user read in one statement.

        Args:
            recipient_id: The recipient's user ID

        Returns:
            Number of notifications that changed
        """
        pass

    @abstractmethod
    def isolated(self) -> AsyncContextManager[None]:
        """Scope whose store failures leave the surrounding unit of work usable.

        Notification side work (mention and actor lookups) runs inside it,
        so a failed read never spoils the write that triggered it.

        Returns:
            Async context manager; an exception raised inside propagates
            after the scope's own work has been undone
        """
        pass
