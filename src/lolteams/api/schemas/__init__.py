"""Pydantic models for API I/O."""

from .player import (
    ImportResponse,
    LeaderboardResponse,
    PlayerCreateRequest,
    PlayerResponse,
    PlayerUpdateRequest,
    RosterSummaryResponse,
)
from .team import TeamPairResponse, TeamRequest, TeamResponse

__all__ = [
    "ImportResponse",
    "LeaderboardResponse",
    "PlayerCreateRequest",
    "PlayerResponse",
    "PlayerUpdateRequest",
    "RosterSummaryResponse",
    "TeamPairResponse",
    "TeamRequest",
    "TeamResponse",
]
