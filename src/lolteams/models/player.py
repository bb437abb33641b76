"""Canonical player model shared across the roster, selection and balancing layers."""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


def compute_win_rate(wins: int, losses: int) -> float:
    """Win percentage rounded half up to one decimal, ``0`` when no games were played."""

    total = wins + losses
    if total <= 0:
        return 0.0
    return math.floor(wins / total * 100 * 10 + 0.5) / 10


def compute_kda(kills: int, deaths: int, assists: int) -> float:
    """(kills + assists) / deaths, counting zero deaths as one."""

    return round((kills + assists) / max(deaths, 1), 2)


def _first_present(values: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = values.get(key)
        if value is not None:
            return value
    return None


class PlayerRecord(BaseModel):
    """Tracked player and the statistics used to rank them."""

    player_id: str = Field(..., min_length=1, alias="id")
    real_name: str = Field(..., alias="realName")
    lol_name: str = Field(default="", alias="lolName")
    main_champion: str = Field(default="", alias="mainChampion")
    kda: float = Field(default=0.0, ge=0.0)
    kills: Optional[int] = Field(default=None, ge=0)
    deaths: Optional[int] = Field(default=None, ge=0)
    assists: Optional[int] = Field(default=None, ge=0)
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    win_rate: float = Field(default=0.0, ge=0.0, le=100.0, alias="winRate")
    games_played: int = Field(default=0, ge=0, alias="gamesPlayed")
    rank: str = ""
    tier: str = ""
    lp: int = 0
    avatar_url: Optional[str] = Field(default=None, alias="avatarUrl")
    champion_image_url: Optional[str] = Field(default=None, alias="championImageUrl")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _derive_stats(cls, data: Any) -> Any:
        # Fill in derived columns that the source left out; malformed numbers
        # are left for field validation to report.
        if not isinstance(data, Mapping):
            return data
        values = dict(data)
        try:
            wins = int(values.get("wins") or 0)
            losses = int(values.get("losses") or 0)
        except (TypeError, ValueError):
            return values

        if _first_present(values, "games_played", "gamesPlayed") is None:
            values.pop("gamesPlayed", None)
            values["games_played"] = wins + losses
        # Win rate is always a function of wins and losses.
        values.pop("winRate", None)
        values["win_rate"] = compute_win_rate(wins, losses)

        if values.get("kda") is None:
            kills = values.get("kills")
            deaths = values.get("deaths")
            assists = values.get("assists")
            if kills is not None and deaths is not None and assists is not None:
                try:
                    values["kda"] = compute_kda(int(kills), int(deaths), int(assists))
                except (TypeError, ValueError):
                    return values
            else:
                values["kda"] = 0.0
        return values

    @model_validator(mode="after")
    def _check_games_played(self) -> "PlayerRecord":
        if self.games_played != self.wins + self.losses:
            raise ValueError(
                f"games_played ({self.games_played}) must equal wins + losses "
                f"({self.wins + self.losses})"
            )
        return self

    def with_updates(self, **updates: Any) -> "PlayerRecord":
        """Return a copy with ``updates`` applied and derived stats recomputed.

        Win rate is always derived again. When wins or losses change, games
        played is derived too unless the caller supplied it explicitly.
        """

        data = self.model_dump()
        data.update(updates)
        if "wins" in updates or "losses" in updates:
            if "games_played" not in updates:
                data["games_played"] = None
        return PlayerRecord.model_validate(data)

    def to_payload(self) -> dict[str, Any]:
        """Serialize using the camelCase keys of the JSON roster format."""

        return self.model_dump(by_alias=True, exclude_none=True)
