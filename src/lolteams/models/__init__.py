"""Player and team models."""

from .player import PlayerRecord, compute_kda, compute_win_rate
from .team import Team, TeamMode, TeamPair

__all__ = [
    "PlayerRecord",
    "Team",
    "TeamMode",
    "TeamPair",
    "compute_kda",
    "compute_win_rate",
]
