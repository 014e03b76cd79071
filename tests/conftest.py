"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from stackit.domain.model import Answer, Question, User
from stackit.domain.value import AnswerId, QuestionId, UserId, Username
from stackit.util.password import create_password_context, hash_password

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)

# Cheap bcrypt cost keeps hashing fast in tests
os.environ.setdefault("AUTH__PASSWORD_HASH_ROUNDS", "4")
TEST_PASSWORD_CONTEXT = create_password_context(rounds=4)


def make_user(username: str, password: str = "secret123") -> User:
    """Build a user with a hashed password."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        password_hash=hash_password(password, TEST_PASSWORD_CONTEXT),
    )


def make_question(author: User, title: str = "How do I sort a list?") -> Question:
    """Build a question asked by the given user."""
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        body="I have a list of numbers and want them ordered.",
        tags=[],
        author_id=author.id,
        author_username=author.username,
    )


def make_answer(
    question: Question,
    author: User,
    body: str = "Use sorted().",
    offset_seconds: int = 0,
) -> Answer:
    """Build an answer; offset_seconds shifts created_at to control ordering."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question.id,
        body=body,
        author_id=author.id,
        author_username=author.username,
        created_at=datetime.now() + timedelta(seconds=offset_seconds),
    )
