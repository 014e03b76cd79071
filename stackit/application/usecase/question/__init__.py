"""Question use cases."""

from .ask_question import AskQuestionRequest, AskQuestionUseCase, QuestionResponse
from .get_question import (
    AnswerItem,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
)
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionListItem,
)

__all__ = [
    "AnswerItem",
    "AskQuestionRequest",
    "AskQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionListItem",
    "QuestionResponse",
]
