"""Community stats routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from stackit.application.usecase.stats import (
    CommunityStatsResponse,
    GetCommunityStatsUseCase,
)

router = APIRouter(tags=["stats"], route_class=DishkaRoute)


@router.get("/stats", response_model=CommunityStatsResponse)
async def get_community_stats(
    get_community_stats_use_case: FromDishka[GetCommunityStatsUseCase],
) -> CommunityStatsResponse:
    """Counts of questions, answers and users."""
    return await get_community_stats_use_case.execute()
