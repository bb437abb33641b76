"""Team balancing built on player fairness scores."""

from .aggregate import TeamComparison, TeamStats, aggregate, build_team, compare_teams
from .errors import DuplicatePlayerError, TeamGenerationError, TeamSizeError
from .service import (
    balance_teams,
    fairness_score,
    generate_teams,
    randomize_teams,
)

__all__ = [
    "DuplicatePlayerError",
    "TeamComparison",
    "TeamGenerationError",
    "TeamSizeError",
    "TeamStats",
    "aggregate",
    "balance_teams",
    "build_team",
    "compare_teams",
    "fairness_score",
    "generate_teams",
    "randomize_teams",
]
