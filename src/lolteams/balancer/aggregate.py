"""Team aggregate statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
from uuid import uuid4

from lolteams.config import MatchRules, get_rules
from lolteams.models import PlayerRecord, Team, TeamPair

from .errors import TeamSizeError


@dataclass(frozen=True)
class TeamStats:
    average_kda: float
    total_wins: int
    average_win_rate: float


@dataclass(frozen=True)
class TeamComparison:
    """Absolute gaps between the two sides of a pair."""

    kda_gap: float
    wins_gap: int
    win_rate_gap: float
    score_gap: float


def aggregate(players: Sequence[PlayerRecord]) -> TeamStats:
    """Mean KDA, total wins and mean win rate; values are not rounded."""

    if not players:
        return TeamStats(average_kda=0.0, total_wins=0, average_win_rate=0.0)
    count = len(players)
    return TeamStats(
        average_kda=sum(player.kda for player in players) / count,
        total_wins=sum(player.wins for player in players),
        average_win_rate=sum(player.win_rate for player in players) / count,
    )


def build_team(players: Sequence[PlayerRecord], name: str, rules: MatchRules | None = None) -> Team:
    """Wrap one side of a pair; the side must hold exactly ``rules.team_size`` players."""

    rules = rules or get_rules()
    if len(players) != rules.team_size:
        raise TeamSizeError(rules.team_size, len(players))
    stats = aggregate(players)
    return Team(
        team_id=uuid4().hex,
        name=name,
        players=tuple(players),
        average_kda=stats.average_kda,
        total_wins=stats.total_wins,
        average_win_rate=stats.average_win_rate,
    )


def compare_teams(pair: TeamPair, rules: MatchRules | None = None) -> TeamComparison:
    rules = rules or get_rules()

    def score_total(team: Team) -> float:
        return sum(
            rules.kda_weight * player.kda + rules.win_rate_weight * player.win_rate for player in team.players
        )

    return TeamComparison(
        kda_gap=abs(pair.blue.average_kda - pair.red.average_kda),
        wins_gap=abs(pair.blue.total_wins - pair.red.total_wins),
        win_rate_gap=abs(pair.blue.average_win_rate - pair.red.average_win_rate),
        score_gap=abs(score_total(pair.blue) - score_total(pair.red)),
    )
