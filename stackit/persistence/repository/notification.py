"""PostgreSQL implementation of Notification repository."""

from typing import AsyncContextManager, List, Optional

from sqlalchemy import and_, desc, func, insert, select, update

from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, UserId
from stackit.persistence.database import PostgresRepository
from stackit.persistence.mappers import notification_to_dict, row_to_notification
from stackit.persistence.tables import notifications_table


class PostgresNotificationRepository(PostgresRepository, NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        stmt = select(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.is_read.is_(False))

        stmt = (
            stmt.order_by(
                desc(notifications_table.c.created_at), desc(notifications_table.c.id)
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                and_(
                    notifications_table.c.recipient_id == recipient_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
        )
        result = await self._execute(stmt)
        return result.scalar() or 0

    async def save(self, notification: Notification) -> Notification:
        """Save a new notification.

        The insert runs in a SAVEPOINT so a failure rolls back only the
        notification and leaves the surrounding transaction usable.
        """
        stmt = insert(notifications_table).values(**notification_to_dict(notification))
        async with self.session.begin_nested():
            await self._execute(stmt)
        return notification

    async def mark_read(self, notification_id: NotificationId) -> bool:
        """Mark one notification read."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.id == notification_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
            .values(is_read=True)
        )
        result = await self._execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of a recipient's notifications read."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.recipient_id == recipient_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
            .values(is_read=True)
        )
        result = await self._execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    def isolated(self) -> AsyncContextManager[None]:
        """Run the enclosed statements in a SAVEPOINT."""
        return self.session.begin_nested()
