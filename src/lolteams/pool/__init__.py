"""Player pool utilities (selection, search, leaderboards)."""

from .search import (
    RosterSummary,
    hall_of_fame,
    leaderboard,
    rank_color,
    roster_summary,
    search_players,
)
from .selection import SelectionPool, ToggleResult

__all__ = [
    "RosterSummary",
    "SelectionPool",
    "ToggleResult",
    "hall_of_fame",
    "leaderboard",
    "rank_color",
    "roster_summary",
    "search_players",
]
