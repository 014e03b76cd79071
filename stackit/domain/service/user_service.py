"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from stackit.config import AuthSettings
from stackit.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import UserId, Username
from stackit.util.password import (
    create_password_context,
    hash_password,
    verify_password,
)

from .base import Service

MIN_PASSWORD_LENGTH = 6


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (password hash cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings
        self.password_context = create_password_context(
            auth_settings.password_hash_rounds
        )

    async def sign_up(self, username: str, password: str) -> User:
        """Create a new user.

        Args:
            username: Requested username
            password: Plain-text password

        Returns:
            The created user

        Raises:
            ValidationError: If the username or password is malformed
            ConflictError: If the username is already taken
        """
        with logfire.span("user_service.sign_up", username=username):
            try:
                name = Username(username)
            except ValueError as e:
                raise ValidationError(
                    "Username must be 3-30 characters: letters, digits or underscores"
                ) from e

            if len(password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
                )

            if await self.user_repository.find_by_username(name):
                logfire.warn("Username already exists", username=username)
                raise ConflictError("Username already exists")

            user = User(
                id=UserId(uuid4()),
                username=name,
                password_hash=hash_password(password, self.password_context),
                created_at=datetime.now(),
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race with a concurrent sign-up for the same name
                logfire.warn("Duplicate username on insert", username=username)
                raise ConflictError("Username already exists")

            logfire.info("User signed up", user_id=str(saved.id), username=username)
            return saved

    async def authenticate(self, username: str, password: str) -> User:
        """Check credentials and return the matching user.

        Raises:
            AuthenticationError: If the username or password is wrong
        """
        with logfire.span("user_service.authenticate", username=username):
            try:
                name = Username(username)
            except ValueError:
                raise AuthenticationError("Invalid username or password")

            user = await self.user_repository.find_by_username(name)
            if not user or not verify_password(
                password, user.password_hash, self.password_context
            ):
                logfire.warn("Login failed", username=username)
                raise AuthenticationError("Invalid username or password")

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            logfire.warn("User not found", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
        return user

    async def count_users(self) -> int:
        """Count registered users."""
        return await self.user_repository.count()
