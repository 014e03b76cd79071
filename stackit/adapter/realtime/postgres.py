"""PostgreSQL LISTEN/NOTIFY publisher.

Subscribers LISTEN on the configured channel and receive the recipient's
user ID as payload. NOTIFY is transactional, so the signal is delivered
only when the request's transaction commits.
"""

import logfire
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.adapter.error import PublishError
from stackit.domain.service.notification_service import NotificationPublisher
from stackit.domain.value import UserId


class PostgresNotificationPublisher(NotificationPublisher):
    """Publishes notification changes with pg_notify."""

    def __init__(self, session: AsyncSession, channel: str) -> None:
        """Initialize publisher.

        Args:
            session: Request-scoped database session
            channel: NOTIFY channel name
        """
        self.session = session
        self.channel = channel

    async def notifications_changed(self, user_id: UserId) -> None:
        """Queue a NOTIFY carrying the user's ID."""
        stmt = select(func.pg_notify(self.channel, str(user_id)))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PublishError(f"pg_notify on {self.channel} failed: {e}") from e

        logfire.debug(
            "Notification change queued", channel=self.channel, user_id=str(user_id)
        )
