"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from stackit.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    NotificationItem,
)
from stackit.domain.error import NotFoundError
from stackit.domain.service import JWTService
from stackit.interface.api.session import require_session

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    unread_only: bool = Query(default=False),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the current user's most recent notifications, newest first."""
    session = require_session(jwt_service, auth_token, "view notifications")
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(session=session, unread_only=unread_only)
    )


@router.post("/read-all", response_model=MarkAllNotificationsReadResponse)
async def mark_all_notifications_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkAllNotificationsReadResponse:
    """Mark every notification of the current user read."""
    session = require_session(jwt_service, auth_token, "update notifications")
    return await mark_all_read_use_case.execute(
        MarkAllNotificationsReadRequest(session=session)
    )


@router.post("/{notification_id}/read", response_model=NotificationItem)
async def mark_notification_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotificationItem:
    """Mark one notification read.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the notification
            does not exist or belongs to someone else
    """
    session = require_session(jwt_service, auth_token, "update notifications")

    try:
        return await mark_read_use_case.execute(
            MarkNotificationReadRequest(
                session=session, notification_id=str(notification_id)
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
