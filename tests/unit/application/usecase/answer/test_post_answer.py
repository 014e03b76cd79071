"""Unit tests for PostAnswerUseCase."""

from uuid import uuid4

import pytest

from stackit.adapter.realtime import InMemoryNotificationPublisher
from stackit.application.usecase.answer import PostAnswerRequest, PostAnswerUseCase
from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.value import NotificationKind, Session
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestPostAnswerUseCase:
    """Tests for PostAnswerUseCase."""

    async def _seed(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user("asker"))
        poster = await user_repo.save(make_user("poster"))
        alice = await user_repo.save(make_user("alice"))
        question = await question_repo.save(make_question(asker))
        session = Session(user_id=poster.id, username=poster.username)
        return question, session, asker, alice

    @pytest.mark.asyncio
    async def test_answer_notifies_author_and_mentions(self, unit_env):
        """Posting an answer mentioning @alice should notify two users."""
        # Arrange
        question, session, asker, alice = await self._seed(unit_env)
        use_case = await unit_env.get(PostAnswerUseCase)
        notification_repo = await unit_env.get(NotificationRepository)
        publisher = await unit_env.get(InMemoryNotificationPublisher)

        # Act
        response = await use_case.execute(
            PostAnswerRequest(
                session=session,
                question_id=str(question.id),
                body="Try `sorted()`, right @alice?",
            )
        )

        # Assert
        assert response.author_username == "poster"
        assert response.body == "Try `sorted()`, right @alice?"
        assert {n.kind for n in response.notifications} == {
            NotificationKind.ANSWER,
            NotificationKind.MENTION,
        }
        assert await notification_repo.count_unread(asker.id) == 1
        assert await notification_repo.count_unread(alice.id) == 1
        assert set(publisher.published) == {asker.id, alice.id}

    @pytest.mark.asyncio
    async def test_answer_is_stored(self, unit_env):
        question, session, _, _ = await self._seed(unit_env)
        use_case = await unit_env.get(PostAnswerUseCase)
        answer_repo = await unit_env.get(AnswerRepository)

        response = await use_case.execute(
            PostAnswerRequest(
                session=session, question_id=str(question.id), body="Use sorted()."
            )
        )

        stored = await answer_repo.find_by_question(question.id)
        assert [str(a.id) for a in stored] == [response.answer_id]

    @pytest.mark.asyncio
    async def test_empty_answer_creates_nothing(self, unit_env):
        question, session, asker, _ = await self._seed(unit_env)
        use_case = await unit_env.get(PostAnswerUseCase)
        notification_repo = await unit_env.get(NotificationRepository)

        with pytest.raises(ValidationError):
            await use_case.execute(
                PostAnswerRequest(
                    session=session, question_id=str(question.id), body="  "
                )
            )
        assert await notification_repo.count_unread(asker.id) == 0

    @pytest.mark.asyncio
    async def test_answer_to_missing_question(self, unit_env):
        _, session, _, _ = await self._seed(unit_env)
        use_case = await unit_env.get(PostAnswerUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                PostAnswerRequest(
                    session=session, question_id=str(uuid4()), body="Answer"
                )
            )
