"""Helpers for searching and ranking the tracked roster."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean
from typing import Iterable, List, Literal, Mapping, Sequence

from lolteams.models import PlayerRecord


LeaderboardMetric = Literal["win_rate", "kda", "wins", "losses"]

RANK_COLORS: Mapping[str, str] = {
    "iron": "gray-600",
    "bronze": "amber-600",
    "silver": "gray-400",
    "gold": "yellow-400",
    "platinum": "cyan-400",
    "diamond": "blue-400",
    "master": "purple-500",
    "grandmaster": "red-500",
    "challenger": "gold",
}

_DEFAULT_RANK_COLOR = "gray-500"


@dataclass(frozen=True)
class RosterSummary:
    """Aggregate stats across the whole roster."""

    player_count: int
    average_wins: float | None
    average_kda: float | None
    average_win_rate: float | None


def rank_color(rank: str) -> str:
    return RANK_COLORS.get(rank.strip().lower(), _DEFAULT_RANK_COLOR)


def search_players(players: Iterable[PlayerRecord], term: str | None) -> List[PlayerRecord]:
    """Case-insensitive substring match on names, main champion and rank."""

    roster = list(players)
    if not term:
        return roster
    needle = term.strip().lower()
    if not needle:
        return roster
    return [
        player
        for player in roster
        if needle in player.real_name.lower()
        or needle in player.lol_name.lower()
        or needle in player.main_champion.lower()
        or needle in player.rank.lower()
    ]


def _metric(player: PlayerRecord, by: LeaderboardMetric) -> float:
    if by == "kda":
        return player.kda
    if by == "wins":
        return float(player.wins)
    if by == "losses":
        return float(player.losses)
    return player.win_rate


def leaderboard(
    players: Iterable[PlayerRecord],
    *,
    by: LeaderboardMetric = "win_rate",
    limit: int | None = 5,
) -> List[PlayerRecord]:
    if by not in ("win_rate", "kda", "wins", "losses"):
        raise ValueError(f"Unsupported leaderboard metric {by!r}")
    ranked = sorted(players, key=lambda player: _metric(player, by), reverse=True)
    if limit is not None:
        ranked = ranked[: max(0, limit)]
    return ranked


def hall_of_fame(players: Iterable[PlayerRecord], *, limit: int = 3) -> List[PlayerRecord]:
    eligible = [player for player in players if player.kda > 0 and player.games_played > 0]
    return leaderboard(eligible, by="kda", limit=limit)


def roster_summary(players: Sequence[PlayerRecord]) -> RosterSummary:
    if not players:
        return RosterSummary(player_count=0, average_wins=None, average_kda=None, average_win_rate=None)
    return RosterSummary(
        player_count=len(players),
        average_wins=fmean(player.wins for player in players),
        average_kda=fmean(player.kda for player in players),
        average_win_rate=fmean(player.win_rate for player in players),
    )
