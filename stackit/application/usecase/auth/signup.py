"""Sign up use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import JWTService, UserService


class SignUpRequest(BaseModel):
    """Sign up request."""

    username: str
    password: str


class AuthResponse(BaseModel):
    """Authenticated user with a fresh session token."""

    user_id: str
    username: str
    created_at: datetime
    token: str


class SignUpUseCase(BaseUseCase):
    """Use case for registering a new user and starting their session."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize sign up use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignUpRequest) -> AuthResponse:
        """Execute sign up flow.

        Raises:
            ValidationError: If the username or password is malformed
            ConflictError: If the username is already taken
        """
        with logfire.span("signup.execute", username=request.username):
            user = await self.user_service.sign_up(request.username, request.password)
            token = self.jwt_service.create_token(user)

            return AuthResponse(
                user_id=str(user.id),
                username=user.username.root,
                created_at=user.created_at,
                token=token,
            )
