"""Notification domain service.

Creates notifications for answer, mention and upvote events, and manages
their read state. Creation is best-effort: a failure is logged and the
triggering action still succeeds.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model import Answer, Notification, Question, User
from stackit.domain.repository import NotificationRepository, UserRepository
from stackit.domain.value import (
    AnswerId,
    NotificationId,
    NotificationKind,
    QuestionId,
    UserId,
    VoteState,
)

from .base import Service
from .mentions import extract_mentions


class NotificationPublisher:
    """Real-time collaborator told when a user's notifications change."""

    async def notifications_changed(self, user_id: UserId) -> None:
        """Signal that the notifications of a user changed.

        Args:
            user_id: The user whose notifications changed
        """
        raise NotImplementedError


class NotificationService(Service):
    """Domain service for notification dispatch and read state."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
        publisher: NotificationPublisher,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            user_repository: User repository (mention and actor lookup)
            publisher: Real-time change publisher
        """
        self.notification_repository = notification_repository
        self.user_repository = user_repository
        self.publisher = publisher

    async def on_answer_posted(
        self, question: Question, answer: Answer, author: User
    ) -> list[Notification]:
        """Notify the question author and every user mentioned in the answer.

        Each recipient gets at most one notification per answer, and the
        answer's author is never notified.

        Args:
            question: The answered question
            answer: The newly posted answer
            author: The user who posted the answer

        Returns:
            Notifications that were created
        """
        with logfire.span(
            "notification_service.on_answer_posted",
            question_id=str(question.id),
            answer_id=str(answer.id),
            author_id=str(author.id),
        ):
            created: list[Notification] = []
            notified: set[UserId] = {author.id}

            if question.author_id not in notified:
                notification = await self._dispatch(
                    recipient_id=question.author_id,
                    kind=NotificationKind.ANSWER,
                    title="New answer to your question",
                    message=f'{author.username} answered your question: "{question.title}"',
                    question_id=question.id,
                    answer_id=answer.id,
                    actor_id=author.id,
                )
                notified.add(question.author_id)
                if notification:
                    created.append(notification)

            mentioned = await self._resolve_mentions(answer.body)
            for user in mentioned:
                if user.id in notified:
                    continue
                notification = await self._dispatch(
                    recipient_id=user.id,
                    kind=NotificationKind.MENTION,
                    title="You were mentioned",
                    message=f'{author.username} mentioned you in an answer to: "{question.title}"',
                    question_id=question.id,
                    answer_id=answer.id,
                    actor_id=author.id,
                )
                notified.add(user.id)
                if notification:
                    created.append(notification)

            logfire.info(
                "Answer notifications dispatched",
                answer_id=str(answer.id),
                count=len(created),
            )
            return created

    async def on_vote_cast(
        self, answer: Answer, voter_id: UserId, state: VoteState
    ) -> Optional[Notification]:
        """Notify an answer's author that it was upvoted.

        Only a resulting UPVOTED state notifies; removals and downvotes
        are silent, as are votes on one's own answer.

        Args:
            answer: The answer voted on
            voter_id: The voter's user ID
            state: The voter's state after the vote

        Returns:
            The created notification, or None
        """
        if state != VoteState.UPVOTED or answer.author_id == voter_id:
            return None

        with logfire.span(
            "notification_service.on_vote_cast",
            answer_id=str(answer.id),
            voter_id=str(voter_id),
        ):
            try:
                async with self.notification_repository.isolated():
                    voter = await self.user_repository.find_by_id(voter_id)
            except Exception as e:
                logfire.error(
                    "Voter lookup for notification failed",
                    voter_id=str(voter_id),
                    error=str(e),
                )
                return None

            if not voter:
                logfire.warn("Voter not found for notification", voter_id=str(voter_id))
                return None

            return await self._dispatch(
                recipient_id=answer.author_id,
                kind=NotificationKind.VOTE,
                title="Your answer was upvoted",
                message=f"{voter.username} upvoted your answer",
                question_id=answer.question_id,
                answer_id=answer.id,
                actor_id=voter.id,
            )

    async def list_for_user(
        self, user_id: UserId, limit: int = 20, unread_only: bool = False
    ) -> list[Notification]:
        """Get a user's most recent notifications, newest first."""
        with logfire.span(
            "notification_service.list_for_user",
            user_id=str(user_id),
            limit=limit,
            unread_only=unread_only,
        ):
            return await self.notification_repository.find_by_recipient(
                recipient_id=user_id, unread_only=unread_only, limit=limit
            )

    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        return await self.notification_repository.count_unread(user_id)

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Notification:
        """Mark one notification read.

        Marking an already-read notification is a no-op.

        Args:
            notification_id: Notification ID
            recipient_id: The user marking it (must be the recipient)

        Returns:
            The notification in its read state

        Raises:
            NotFoundError: If the notification does not exist or is
                addressed to another user
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            recipient_id=str(recipient_id),
        ):
            notification = await self.notification_repository.find_by_id(
                notification_id
            )
            if not notification or notification.recipient_id != recipient_id:
                logfire.warn(
                    "Notification not found for recipient",
                    notification_id=str(notification_id),
                    recipient_id=str(recipient_id),
                )
                raise NotFoundError("Notification", str(notification_id))

            if notification.is_read:
                return notification

            if await self.notification_repository.mark_read(notification_id):
                await self._publish(recipient_id)
                logfire.info(
                    "Notification marked read", notification_id=str(notification_id)
                )

            return notification.model_copy(update={"is_read": True})

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every unread notification of a user read.

        Idempotent: a second call finds nothing unread and returns 0.

        Args:
            user_id: The recipient's user ID

        Returns:
            Number of notifications that changed
        """
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            updated = await self.notification_repository.mark_all_read(user_id)
            if updated:
                await self._publish(user_id)
            logfire.info(
                "Notifications marked read", user_id=str(user_id), count=updated
            )
            return updated

    async def _resolve_mentions(self, text: str) -> list[User]:
        """Resolve @mentions to existing users, in order of first mention."""
        usernames = extract_mentions(text)
        if not usernames:
            return []

        try:
            async with self.notification_repository.isolated():
                users = await self.user_repository.find_by_usernames(usernames)
        except Exception as e:
            logfire.error(
                "Mention resolution failed", mentions=usernames, error=str(e)
            )
            return []

        by_name = {user.username.root: user for user in users}
        return [by_name[name] for name in usernames if name in by_name]

    async def _dispatch(
        self,
        recipient_id: UserId,
        kind: NotificationKind,
        title: str,
        message: str,
        question_id: Optional[QuestionId],
        answer_id: Optional[AnswerId],
        actor_id: UserId,
    ) -> Optional[Notification]:
        """Create one notification, swallowing and logging any failure."""
        if recipient_id == actor_id:
            return None

        notification = Notification(
            id=NotificationId(uuid4()),
            recipient_id=recipient_id,
            kind=kind,
            title=title,
            message=message,
            related_question_id=question_id,
            related_answer_id=answer_id,
            related_user_id=actor_id,
            is_read=False,
            created_at=datetime.now(),
        )

        try:
            saved = await self.notification_repository.save(notification)
        except Exception as e:
            logfire.error(
                "Notification creation failed",
                recipient_id=str(recipient_id),
                kind=kind.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        logfire.info(
            "Notification created",
            notification_id=str(saved.id),
            recipient_id=str(recipient_id),
            kind=kind.value,
        )
        await self._publish(recipient_id)
        return saved

    async def _publish(self, user_id: UserId) -> None:
        """Tell the real-time collaborator, ignoring delivery failures."""
        try:
            await self.publisher.notifications_changed(user_id)
        except Exception as e:
            logfire.warn(
                "Notification change publish failed",
                user_id=str(user_id),
                error=str(e),
            )
