"""End-to-end tests for notifications and store failures."""

from uuid import uuid4

import pytest
from dishka import Provider, Scope, provide

from stackit.domain.error import StoreUnavailableError
from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository, QuestionRepository
from stackit.persistence.repository.inmemory import (
    InMemoryNotificationRepository,
    InMemoryQuestionRepository,
)
from tests.e2e.helpers import act_as, answer, ask, make_client, signup


class UnreachableQuestionRepository(InMemoryQuestionRepository):
    """Question store whose reads fail as if the database were down."""

    async def count(self, search=None) -> int:
        raise StoreUnavailableError("connection refused")


class BrokenNotificationRepository(InMemoryNotificationRepository):
    """Notification store whose inserts always fail."""

    async def save(self, notification: Notification) -> Notification:
        raise StoreUnavailableError("connection refused")


class UnreachableStoreProvider(Provider):
    @provide(scope=Scope.APP)
    def get_question_repository(self) -> QuestionRepository:
        return UnreachableQuestionRepository()


class BrokenNotificationsProvider(Provider):
    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        return BrokenNotificationRepository()


@pytest.fixture
def client():
    """Create test client backed by the in-memory container."""
    with make_client() as test_client:
        yield test_client


class TestNotificationFlow:
    """End-to-end tests for the notification bell."""

    def test_answer_with_mention_notifies_two_users(self, client):
        """The asker gets an answer notification and alice a mention."""
        # Arrange
        asker = signup(client, "asker")
        question_id = ask(client)
        alice = signup(client, "alice")
        signup(client, "poster")

        # Act
        posted = client.post(
            f"/questions/{question_id}/answers",
            json={"body": "See the docs, @alice knows more. @ghost too."},
        )

        # Assert
        assert posted.status_code == 201
        assert len(posted.json()["notifications"]) == 2

        act_as(client, asker)
        asker_feed = client.get("/notifications").json()
        assert asker_feed["unread_count"] == 1
        assert asker_feed["notifications"][0]["kind"] == "answer"
        assert asker_feed["notifications"][0]["related_question_id"] == question_id

        act_as(client, alice)
        alice_feed = client.get("/notifications").json()
        assert [n["kind"] for n in alice_feed["notifications"]] == ["mention"]
        assert client.get("/auth/me").json()["user"]["unread_notifications"] == 1

    def test_upvote_notifies_answer_author(self, client):
        # Arrange
        signup(client, "asker")
        question_id = ask(client)
        helper = signup(client, "helper")
        answer_id = answer(client, question_id, "Use sorted()")
        signup(client, "voter")

        # Act
        client.post(f"/answers/{answer_id}/vote", json={"polarity": 1})

        # Assert
        act_as(client, helper)
        feed = client.get("/notifications").json()
        assert [n["kind"] for n in feed["notifications"]] == ["vote"]
        assert feed["notifications"][0]["message"] == "voter upvoted your answer"

    def test_mark_read_and_read_all(self, client):
        """Read state changes are per notification and idempotent."""
        # Arrange
        asker = signup(client, "asker")
        first = ask(client, "First question")
        second = ask(client, "Second question")
        signup(client, "helper")
        answer(client, first, "Answer one")
        answer(client, second, "Answer two")
        act_as(client, asker)
        feed = client.get("/notifications").json()
        notification_id = feed["notifications"][0]["notification_id"]

        # Act
        marked = client.post(f"/notifications/{notification_id}/read")
        unread = client.get("/notifications", params={"unread_only": True}).json()
        read_all = client.post("/notifications/read-all").json()
        read_all_again = client.post("/notifications/read-all").json()

        # Assert
        assert marked.status_code == 200
        assert marked.json()["is_read"] is True
        assert len(unread["notifications"]) == 1
        assert read_all == {"updated": 1, "unread_count": 0}
        assert read_all_again == {"updated": 0, "unread_count": 0}

    def test_cannot_mark_someone_elses_notification(self, client):
        # Arrange
        asker = signup(client, "asker")
        question_id = ask(client)
        helper = signup(client, "helper")
        answer(client, question_id, "Use sorted()")
        act_as(client, asker)
        feed = client.get("/notifications").json()
        notification_id = feed["notifications"][0]["notification_id"]

        # Act
        act_as(client, helper)
        foreign = client.post(f"/notifications/{notification_id}/read")
        missing = client.post(f"/notifications/{uuid4()}/read")

        # Assert
        assert foreign.status_code == 404
        assert missing.status_code == 404

    def test_notifications_require_login(self, client):
        assert client.get("/notifications").status_code == 401
        assert client.post("/notifications/read-all").status_code == 401


class TestStoreFailures:
    """End-to-end tests for an unreachable record store."""

    def test_unreachable_store_answers_503(self):
        with make_client(UnreachableStoreProvider()) as client:
            response = client.get("/questions")

        assert response.status_code == 503
        assert response.json() == {"detail": "Service temporarily unavailable"}

    def test_notification_failure_does_not_fail_answer(self):
        """The answer is saved even when its notifications cannot be."""
        with make_client(BrokenNotificationsProvider()) as client:
            signup(client, "asker")
            question_id = ask(client)
            signup(client, "helper")

            posted = client.post(
                f"/questions/{question_id}/answers", json={"body": "Use sorted()"}
            )
            detail = client.get(f"/questions/{question_id}").json()

        assert posted.status_code == 201
        assert posted.json()["notifications"] == []
        assert len(detail["answers"]) == 1
