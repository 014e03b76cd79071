"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .notification import InMemoryNotificationRepository
from .question import InMemoryQuestionRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryNotificationRepository",
    "InMemoryQuestionRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
