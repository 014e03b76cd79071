"""Notification use cases."""

from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .mark_read import (
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)

__all__ = [
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadRequest",
    "MarkAllNotificationsReadResponse",
    "MarkAllNotificationsReadUseCase",
    "MarkNotificationReadRequest",
    "MarkNotificationReadUseCase",
    "NotificationItem",
]
