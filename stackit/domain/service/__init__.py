"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .jwt_service import JWTService
from .mentions import extract_mentions
from .notification_service import NotificationPublisher, NotificationService
from .question_service import QuestionService
from .ranking import rank_answers, top_answer
from .user_service import UserService
from .vote_service import VoteService, aggregate_votes, next_vote_state

__all__ = [
    "AnswerService",
    "JWTService",
    "NotificationPublisher",
    "NotificationService",
    "QuestionService",
    "Service",
    "UserService",
    "VoteService",
    "aggregate_votes",
    "extract_mentions",
    "next_vote_state",
    "rank_answers",
    "top_answer",
]
