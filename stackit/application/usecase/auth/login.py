"""Login use case."""

import logfire
from pydantic import BaseModel

from stackit.application.usecase.auth.signup import AuthResponse
from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for logging in with username and password."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If the credentials do not match a user
        """
        with logfire.span("login.execute", username=request.username):
            user = await self.user_service.authenticate(
                request.username, request.password
            )
            token = self.jwt_service.create_token(user)

            logfire.info("User logged in", user_id=str(user.id))
            return AuthResponse(
                user_id=str(user.id),
                username=user.username.root,
                created_at=user.created_at,
                token=token,
            )
