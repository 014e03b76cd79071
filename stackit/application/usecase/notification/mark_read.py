"""Mark notification read use cases."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.application.usecase.notification.list_notifications import (
    NotificationItem,
)
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, Session


class MarkNotificationReadRequest(BaseModel):
    """Mark one notification read request."""

    session: Session
    notification_id: str  # UUID string


class MarkNotificationReadUseCase(BaseUseCase):
    """Use case for marking a single notification read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark notification read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: MarkNotificationReadRequest) -> NotificationItem:
        """Execute mark read flow.

        Raises:
            NotFoundError: If the notification does not exist or belongs
                to another user
        """
        notification = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)), request.session.user_id
        )
        return NotificationItem.from_notification(notification)


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark all notifications read request."""

    session: Session


class MarkAllNotificationsReadResponse(BaseModel):
    """Mark all notifications read response."""

    updated: int
    unread_count: int


class MarkAllNotificationsReadUseCase(BaseUseCase):
    """Use case for clearing the current user's unread notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark all notifications read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        """Execute mark all read flow."""
        user_id = request.session.user_id
        updated = await self.notification_service.mark_all_read(user_id)
        unread = await self.notification_service.count_unread(user_id)
        return MarkAllNotificationsReadResponse(updated=updated, unread_count=unread)
