"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, select

from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import UserId, Username
from stackit.persistence.database import PostgresRepository
from stackit.persistence.mappers import row_to_user, user_to_dict
from stackit.persistence.tables import users_table


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_usernames(self, usernames: Sequence[str]) -> List[User]:
        """Find the users whose usernames appear in the given list."""
        if not usernames:
            return []

        stmt = select(users_table).where(users_table.c.username.in_(list(usernames)))
        result = await self._execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            IntegrityError: If the username is already taken
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self._execute(stmt)

        await self.session.flush()
        return user

    async def count(self) -> int:
        """Count registered users."""
        stmt = select(func.count()).select_from(users_table)
        result = await self._execute(stmt)
        return result.scalar() or 0
