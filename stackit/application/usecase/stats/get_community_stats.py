"""Community stats use case."""

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import AnswerService, QuestionService, UserService


class CommunityStatsResponse(BaseModel):
    """Community stats response."""

    questions: int
    answers: int
    users: int


class GetCommunityStatsUseCase(BaseUseCase):
    """Use case for the home page community counters."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> None:
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: None = None) -> CommunityStatsResponse:
        """Execute community stats flow."""
        return CommunityStatsResponse(
            questions=await self.question_service.count_questions(),
            answers=await self.answer_service.count_answers(),
            users=await self.user_service.count_users(),
        )
