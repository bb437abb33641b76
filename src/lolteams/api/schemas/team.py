from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from lolteams.balancer import TeamComparison
from lolteams.models import Team, TeamPair

from .player import PlayerResponse


class TeamRequest(BaseModel):
    player_ids: List[str] = Field(default_factory=list)
    mode: Literal["balanced", "random"] = "balanced"
    seed: int | None = None


class TeamResponse(BaseModel):
    team_id: str
    name: str
    players: List[PlayerResponse]
    average_kda: float
    total_wins: int
    average_win_rate: float

    @classmethod
    def from_team(cls, team: Team) -> "TeamResponse":
        return cls(
            team_id=team.team_id,
            name=team.name,
            players=[PlayerResponse.from_record(player) for player in team.players],
            average_kda=team.average_kda,
            total_wins=team.total_wins,
            average_win_rate=team.average_win_rate,
        )


class TeamPairResponse(BaseModel):
    mode: Literal["balanced", "random"]
    teams: List[TeamResponse]
    kda_gap: float
    wins_gap: int
    win_rate_gap: float
    score_gap: float

    @classmethod
    def from_pair(cls, pair: TeamPair, comparison: TeamComparison) -> "TeamPairResponse":
        return cls(
            mode=pair.mode,
            teams=[TeamResponse.from_team(team) for team in pair.teams],
            kda_gap=comparison.kda_gap,
            wins_gap=comparison.wins_gap,
            win_rate_gap=comparison.win_rate_gap,
            score_gap=comparison.score_gap,
        )
