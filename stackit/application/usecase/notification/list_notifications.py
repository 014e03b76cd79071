"""List notifications use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.config import NotificationSettings
from stackit.domain.model import Notification
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationKind, Session


class NotificationItem(BaseModel):
    """A notification as shown in the bell dropdown."""

    notification_id: str
    kind: NotificationKind
    title: str
    message: str
    related_question_id: Optional[str]
    related_answer_id: Optional[str]
    related_user_id: Optional[str]
    is_read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationItem":
        """Build the item from a domain model."""

        def _str(value) -> Optional[str]:
            return str(value) if value is not None else None

        return cls(
            notification_id=str(notification.id),
            kind=notification.kind,
            title=notification.title,
            message=notification.message,
            related_question_id=_str(notification.related_question_id),
            related_answer_id=_str(notification.related_answer_id),
            related_user_id=_str(notification.related_user_id),
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    session: Session
    unread_only: bool = False


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    unread_count: int


class ListNotificationsUseCase(BaseUseCase):
    """Use case for reading the current user's notification feed."""

    def __init__(
        self,
        notification_service: NotificationService,
        notification_settings: NotificationSettings,
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
            notification_settings: Feed size configuration
        """
        self.notification_service = notification_service
        self.feed_limit = notification_settings.feed_limit

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        user_id = request.session.user_id
        notifications = await self.notification_service.list_for_user(
            user_id, limit=self.feed_limit, unread_only=request.unread_only
        )
        unread = await self.notification_service.count_unread(user_id)

        return ListNotificationsResponse(
            notifications=[NotificationItem.from_notification(n) for n in notifications],
            unread_count=unread,
        )
