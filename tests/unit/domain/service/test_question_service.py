"""Unit tests for QuestionService and AnswerService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.model import Question
from stackit.domain.repository import QuestionSortOrder
from stackit.domain.service import AnswerService, QuestionService
from stackit.domain.value import QuestionId
from stackit.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
)
from tests.conftest import make_question, make_user


class TestCreateQuestion:
    """Tests for QuestionService.create_question()."""

    @pytest.mark.asyncio
    async def test_create_question(self):
        """Should trim the title, keep the body verbatim and tag it."""
        # Arrange
        service = QuestionService(InMemoryQuestionRepository())
        author = make_user("asker")
        body = "Why does **this** fail? cc @alice"

        # Act
        question = await service.create_question(
            author, "  Why?  ", body, ["python", " lists "]
        )

        # Assert
        assert question.title == "Why?"
        assert question.body == body
        assert [t.root for t in question.tags] == ["python", "lists"]
        assert question.author_id == author.id
        assert question.author_username == author.username

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,body,message",
        [
            ("", "body", "Title is required"),
            ("   ", "body", "Title is required"),
            ("x" * 301, "body", "at most 300"),
            ("Title", "  \n ", "Description is required"),
        ],
    )
    async def test_invalid_title_or_body(self, title, body, message):
        service = QuestionService(InMemoryQuestionRepository())

        with pytest.raises(ValidationError, match=message):
            await service.create_question(make_user("asker"), title, body, [])

    @pytest.mark.asyncio
    async def test_too_many_tags(self):
        service = QuestionService(InMemoryQuestionRepository(), max_tags=5)

        with pytest.raises(ValidationError, match="at most 5 tags"):
            await service.create_question(
                make_user("asker"), "Title", "Body", ["a", "b", "c", "d", "e", "f"]
            )

    def test_normalize_tags_drops_blanks_and_repeats(self):
        """Repeats do not count towards the limit."""
        service = QuestionService(InMemoryQuestionRepository(), max_tags=2)

        tags = service.normalize_tags(["python", "", "  ", "python", "sql", "sql "])

        assert [t.root for t in tags] == ["python", "sql"]

    def test_normalize_tags_rejects_long_tag(self):
        service = QuestionService(InMemoryQuestionRepository())

        with pytest.raises(ValidationError, match="1-30 characters"):
            service.normalize_tags(["x" * 31])


class TestListQuestions:
    """Tests for QuestionService.list_questions()."""

    async def _seed(self, count: int) -> tuple[QuestionService, list[Question]]:
        repo = InMemoryQuestionRepository()
        author = make_user("asker")
        base = datetime(2024, 1, 1)
        questions = []
        for i in range(count):
            question = make_question(author, title=f"Question {i}").model_copy(
                update={"created_at": base + timedelta(minutes=i)}
            )
            questions.append(await repo.save(question))
        return QuestionService(repo), questions

    @pytest.mark.asyncio
    async def test_newest_first_with_pagination(self):
        """Page 2 of size 2 holds the third and fourth newest."""
        # Arrange
        service, questions = await self._seed(5)

        # Act
        page, total = await service.list_questions(page=2, page_size=2)

        # Assert
        assert total == 5
        assert [q.title for q in page] == ["Question 2", "Question 1"]

    @pytest.mark.asyncio
    async def test_oldest_first(self):
        service, _ = await self._seed(3)

        page, _ = await service.list_questions(sort=QuestionSortOrder.OLDEST)

        assert [q.title for q in page] == ["Question 0", "Question 1", "Question 2"]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self):
        """Search matches title or body substrings regardless of case."""
        service, _ = await self._seed(12)

        page, total = await service.list_questions(search="  question 1 ")

        # "Question 1", "Question 10", "Question 11"
        assert total == 3
        assert {q.title for q in page} == {"Question 1", "Question 10", "Question 11"}

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self):
        service, _ = await self._seed(3)

        page, total = await service.list_questions(page=4, page_size=2)

        assert page == []
        assert total == 3

    @pytest.mark.asyncio
    async def test_get_missing_question(self):
        service, _ = await self._seed(1)

        with pytest.raises(NotFoundError, match="Question not found"):
            await service.get_question(QuestionId(uuid4()))


class TestAnswerService:
    """Tests for AnswerService."""

    @pytest.mark.asyncio
    async def test_answers_come_back_in_creation_order(self):
        # Arrange
        service = AnswerService(InMemoryAnswerRepository())
        question = make_question(make_user("asker"))
        first = await service.create_answer(question, make_user("one"), "First")
        second = await service.create_answer(question, make_user("two"), "Second")

        # Act
        answers = await service.get_answers_for_question(question.id)

        # Assert
        assert [a.id for a in answers] == [first.id, second.id]
        assert await service.count_answers() == 2

    @pytest.mark.asyncio
    async def test_empty_answer_rejected(self):
        service = AnswerService(InMemoryAnswerRepository())

        with pytest.raises(ValidationError, match="Answer cannot be empty"):
            await service.create_answer(
                make_question(make_user("asker")), make_user("poster"), "   "
            )

    @pytest.mark.asyncio
    async def test_count_by_questions(self):
        service = AnswerService(InMemoryAnswerRepository())
        asker = make_user("asker")
        answered = make_question(asker)
        unanswered = make_question(asker)
        await service.create_answer(answered, make_user("one"), "A")
        await service.create_answer(answered, make_user("two"), "B")

        counts = await service.count_by_questions([answered.id, unanswered.id])

        assert counts.get(answered.id) == 2
        assert counts.get(unanswered.id, 0) == 0
        assert await service.count_by_questions([]) == {}
