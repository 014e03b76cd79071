"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from stackit.domain.model.user import User
from stackit.domain.repository.user import UserRepository
from stackit.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_usernames(self, usernames: Sequence[str]) -> list[User]:
        """Find the users whose usernames appear in the given list."""
        wanted = set(usernames)
        return [u for u in self._users.values() if u.username.root in wanted]

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user already has the username
        """
        for existing in self._users.values():
            if existing.username == user.username and existing.id != user.id:
                raise IntegrityError("Duplicate username", None, Exception())

        self._users[user.id] = user
        return user

    async def count(self) -> int:
        """Count registered users."""
        return len(self._users)
