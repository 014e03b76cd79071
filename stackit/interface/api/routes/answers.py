"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from stackit.domain.error import NotFoundError
from stackit.domain.service import JWTService
from stackit.domain.value import Polarity
from stackit.interface.api.session import require_session

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on an answer."""

    polarity: Polarity  # 1 (up) or -1 (down)


@router.post("/{answer_id}/vote", response_model=CastVoteResponse)
async def vote_on_answer(
    answer_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Cast, switch or withdraw a vote on an answer.

    Requires authentication. Casting the polarity already held removes
    the vote.

    Args:
        answer_id: Answer UUID
        request: Vote polarity
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The resulting vote state and score

    Raises:
        HTTPException: 401 if not authenticated, 404 if the answer does not exist
    """
    session = require_session(jwt_service, auth_token, "vote")

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                session=session, answer_id=str(answer_id), polarity=request.polarity
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
