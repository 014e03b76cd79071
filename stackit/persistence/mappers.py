"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from stackit.domain.model import Answer, Notification, Question, User, Vote
from stackit.domain.value import (
    AnswerId,
    NotificationId,
    NotificationKind,
    Polarity,
    QuestionId,
    TagName,
    UserId,
    Username,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    """Coerce a driver value (UUID or str) to UUID."""
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
    }


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        body=row["body"],
        tags=[TagName(tag) for tag in row.get("tags") or []],
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        created_at=row["created_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict."""
    return {
        "id": question.id,
        "title": question.title,
        "body": question.body,
        "tags": [tag.root for tag in question.tags],
        "author_id": question.author_id,
        "author_username": question.author_username.root,
        "created_at": question.created_at,
    }


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        created_at=row["created_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return {
        "id": answer.id,
        "question_id": answer.question_id,
        "body": answer.body,
        "author_id": answer.author_id,
        "author_username": answer.author_username.root,
        "created_at": answer.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        voter_id=UserId(_uuid(row["voter_id"])),
        answer_id=AnswerId(_uuid(row["answer_id"])),
        polarity=Polarity(row["polarity"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "voter_id": vote.voter_id,
        "answer_id": vote.answer_id,
        "polarity": int(vote.polarity),
        "created_at": vote.created_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    related_question_id = _optional_uuid(row.get("related_question_id"))
    related_answer_id = _optional_uuid(row.get("related_answer_id"))
    related_user_id = _optional_uuid(row.get("related_user_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        kind=NotificationKind(row["kind"]),
        title=row["title"],
        message=row["message"],
        related_question_id=(
            QuestionId(related_question_id) if related_question_id else None
        ),
        related_answer_id=AnswerId(related_answer_id) if related_answer_id else None,
        related_user_id=UserId(related_user_id) if related_user_id else None,
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "kind": notification.kind.value,
        "title": notification.title,
        "message": notification.message,
        "related_question_id": notification.related_question_id,
        "related_answer_id": notification.related_answer_id,
        "related_user_id": notification.related_user_id,
        "is_read": notification.is_read,
        "created_at": notification.created_at,
    }
