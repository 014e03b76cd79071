"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import NotificationService, UserService
from stackit.domain.value import Session


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    session: Session


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    username: str
    created_at: datetime
    unread_notifications: int


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the current authenticated user."""

    def __init__(
        self, user_service: UserService, notification_service: NotificationService
    ) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
            notification_service: Notification domain service
        """
        self.user_service = user_service
        self.notification_service = notification_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            NotFoundError: If the session's user no longer exists
        """
        user = await self.user_service.get_by_id(request.session.user_id)
        unread = await self.notification_service.count_unread(user.id)

        return GetCurrentUserResponse(
            user_id=str(user.id),
            username=user.username.root,
            created_at=user.created_at,
            unread_notifications=unread,
        )
