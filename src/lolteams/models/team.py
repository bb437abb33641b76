"""Team value objects produced by the balancer."""

from __future__ import annotations

from typing import Literal, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .player import PlayerRecord


TeamMode = Literal["balanced", "random"]


class Team(BaseModel):
    """One side of a generated match with its aggregate statistics."""

    team_id: str = Field(..., min_length=1)
    name: str
    players: Tuple[PlayerRecord, ...]
    average_kda: float
    total_wins: int
    average_win_rate: float

    model_config = ConfigDict(frozen=True)

    @property
    def player_ids(self) -> tuple[str, ...]:
        return tuple(player.player_id for player in self.players)


class TeamPair(BaseModel):
    blue: Team
    red: Team
    mode: TeamMode

    model_config = ConfigDict(frozen=True)

    @property
    def teams(self) -> tuple[Team, Team]:
        return (self.blue, self.red)
