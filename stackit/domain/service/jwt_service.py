"""JWT token domain service."""

from typing import Optional
from uuid import UUID

import logfire

from stackit.config import AuthSettings
from stackit.domain.model import User
from stackit.domain.value import Session, UserId, Username
from stackit.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT session tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create a session token for a user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            token = create_token(str(user.id), user.username.root, self.auth_settings)
            logfire.info("JWT token created", user_id=str(user.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_session(self, token: str | None) -> Optional[Session]:
        """Decode a session from a token without raising.

        Convenience for routes that authenticate optionally.

        Args:
            token: JWT token string (optional)

        Returns:
            Session if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Session(
                user_id=UserId(UUID(payload.user_id)),
                username=Username(payload.username),
            )
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "Session decode failed, treating as unauthenticated", error=str(e)
            )
            return None
