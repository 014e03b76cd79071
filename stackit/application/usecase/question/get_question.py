"""Get question use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.application.usecase.question.ask_question import QuestionResponse
from stackit.domain.model import ScoredAnswer
from stackit.domain.service import (
    AnswerService,
    QuestionService,
    VoteService,
    rank_answers,
    top_answer,
)
from stackit.domain.value import QuestionId, Session


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string
    viewer: Optional[Session] = None  # Current user (if authenticated)


class AnswerItem(BaseModel):
    """Ranked answer in a question detail response."""

    answer_id: str
    body: str
    author_id: str
    author_username: str
    created_at: datetime
    score: int
    viewer_vote: Optional[int]  # 1, -1 or None
    is_top: bool


class GetQuestionResponse(BaseModel):
    """Question with its ranked answers."""

    question: QuestionResponse
    answers: list[AnswerItem]


class GetQuestionUseCase(BaseUseCase):
    """Use case for viewing a question and its ranked answers."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Answers are ranked by score; ties keep creation order. The first
        ranked answer is flagged as top when its score is positive.

        Raises:
            NotFoundError: If the question does not exist
        """
        viewer_id = request.viewer.user_id if request.viewer else None
        with logfire.span(
            "get_question.execute",
            question_id=request.question_id,
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            question = await self.question_service.get_question(
                QuestionId(UUID(request.question_id))
            )
            answers = await self.answer_service.get_answers_for_question(question.id)
            tallies = await self.vote_service.get_tallies(
                [answer.id for answer in answers], viewer_id=viewer_id
            )

            ranked = rank_answers(
                [
                    ScoredAnswer(
                        answer=answer,
                        score=tallies[answer.id].score,
                        viewer_vote=tallies[answer.id].viewer_vote,
                    )
                    for answer in answers
                ]
            )
            top = top_answer(ranked)

            items = [
                AnswerItem(
                    answer_id=str(scored.answer.id),
                    body=scored.answer.body,
                    author_id=str(scored.answer.author_id),
                    author_username=scored.answer.author_username.root,
                    created_at=scored.answer.created_at,
                    score=scored.score,
                    viewer_vote=(
                        int(scored.viewer_vote)
                        if scored.viewer_vote is not None
                        else None
                    ),
                    is_top=top is not None and scored.answer.id == top.answer.id,
                )
                for scored in ranked
            ]

            return GetQuestionResponse(
                question=QuestionResponse.from_question(question), answers=items
            )
