"""Stats use cases."""

from .get_community_stats import CommunityStatsResponse, GetCommunityStatsUseCase

__all__ = [
    "CommunityStatsResponse",
    "GetCommunityStatsUseCase",
]
