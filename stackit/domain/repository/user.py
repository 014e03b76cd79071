"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from stackit.domain.model.user import User
from stackit.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_usernames(self, usernames: Sequence[str]) -> List[User]:
        """Find every user whose username is in the given list (batch query).

        Unknown names are skipped. Raw strings are accepted so callers can
        pass unvalidated @mention tokens straight through.

        Args:
            usernames: Candidate usernames

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the username is already taken
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users."""
        pass
