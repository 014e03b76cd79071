"""Unit tests for the in-memory repositories used by the test container."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from stackit.domain.model import Notification, Vote
from stackit.domain.value import (
    AnswerId,
    NotificationId,
    NotificationKind,
    Polarity,
    UserId,
    VoteId,
)
from stackit.persistence.repository.inmemory import (
    InMemoryNotificationRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_user


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_username_raises_integrity_error(self):
        repo = InMemoryUserRepository()
        await repo.save(make_user("alice"))

        with pytest.raises(IntegrityError):
            await repo.save(make_user("alice"))

    @pytest.mark.asyncio
    async def test_find_by_usernames_skips_unknown(self):
        repo = InMemoryUserRepository()
        alice = await repo.save(make_user("alice"))

        users = await repo.find_by_usernames(["alice", "ghost"])

        assert [u.id for u in users] == [alice.id]


class TestInMemoryVoteRepository:
    """Tests for InMemoryVoteRepository."""

    @pytest.mark.asyncio
    async def test_upsert_replaces_polarity_in_place(self):
        """A second upsert keeps a single row and its original ID."""
        # Arrange
        repo = InMemoryVoteRepository()
        voter_id, answer_id = UserId(uuid4()), AnswerId(uuid4())
        first = Vote(
            id=VoteId(uuid4()),
            voter_id=voter_id,
            answer_id=answer_id,
            polarity=Polarity.UP,
        )
        await repo.upsert(first)

        # Act
        updated = await repo.upsert(
            first.model_copy(update={"id": VoteId(uuid4()), "polarity": Polarity.DOWN})
        )

        # Assert
        assert updated.id == first.id
        assert updated.polarity == Polarity.DOWN
        assert len(await repo.find_by_answer(answer_id)) == 1

    @pytest.mark.asyncio
    async def test_delete_missing_vote(self):
        repo = InMemoryVoteRepository()

        deleted = await repo.delete_by_voter_and_answer(
            UserId(uuid4()), AnswerId(uuid4())
        )

        assert deleted is False


class TestInMemoryNotificationRepository:
    """Tests for InMemoryNotificationRepository."""

    def _notification(self, recipient_id: UserId, minutes: int) -> Notification:
        return Notification(
            id=NotificationId(uuid4()),
            recipient_id=recipient_id,
            kind=NotificationKind.ANSWER,
            title="New answer to your question",
            message=f"answer {minutes}",
            created_at=datetime(2024, 1, 1) + timedelta(minutes=minutes),
        )

    @pytest.mark.asyncio
    async def test_newest_first_with_offset(self):
        # Arrange
        repo = InMemoryNotificationRepository()
        recipient = UserId(uuid4())
        for minutes in (5, 1, 3):
            await repo.save(self._notification(recipient, minutes))
        await repo.save(self._notification(UserId(uuid4()), 10))

        # Act
        feed = await repo.find_by_recipient(recipient)
        tail = await repo.find_by_recipient(recipient, limit=2, offset=1)

        # Assert
        assert [n.message for n in feed] == ["answer 5", "answer 3", "answer 1"]
        assert [n.message for n in tail] == ["answer 3", "answer 1"]

    @pytest.mark.asyncio
    async def test_mark_read_reports_changes_only(self):
        repo = InMemoryNotificationRepository()
        notification = await repo.save(self._notification(UserId(uuid4()), 0))

        assert await repo.mark_read(notification.id) is True
        assert await repo.mark_read(notification.id) is False
        assert await repo.mark_read(NotificationId(uuid4())) is False
