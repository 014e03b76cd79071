"""Answer use cases."""

from .post_answer import PostAnswerRequest, PostAnswerResponse, PostAnswerUseCase

__all__ = [
    "PostAnswerRequest",
    "PostAnswerResponse",
    "PostAnswerUseCase",
]
