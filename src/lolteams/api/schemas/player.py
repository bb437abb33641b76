from __future__ import annotations

from typing import Any, List, Literal

from pydantic import BaseModel, Field, model_validator

from lolteams.models import PlayerRecord


class PlayerResponse(BaseModel):
    player_id: str
    real_name: str
    lol_name: str
    main_champion: str
    kda: float
    wins: int
    losses: int
    win_rate: float
    games_played: int
    rank: str
    tier: str
    lp: int
    avatar_url: str | None = None
    champion_image_url: str | None = None

    @classmethod
    def from_record(cls, record: PlayerRecord) -> "PlayerResponse":
        return cls.model_validate(record.model_dump(exclude={"kills", "deaths", "assists"}))


class PlayerCreateRequest(BaseModel):
    player_id: str | None = None
    real_name: str = Field(..., min_length=1)
    lol_name: str = ""
    main_champion: str = ""
    kda: float | None = Field(default=None, ge=0.0)
    kills: int | None = Field(default=None, ge=0)
    deaths: int | None = Field(default=None, ge=0)
    assists: int | None = Field(default=None, ge=0)
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    rank: str = ""
    tier: str = ""
    lp: int = 0
    avatar_url: str | None = None
    champion_image_url: str | None = None


_NULLABLE_UPDATES = {"avatar_url", "champion_image_url"}


class PlayerUpdateRequest(BaseModel):
    real_name: str | None = Field(default=None, min_length=1)
    lol_name: str | None = None
    main_champion: str | None = None
    kda: float | None = Field(default=None, ge=0.0)
    wins: int | None = Field(default=None, ge=0)
    losses: int | None = Field(default=None, ge=0)
    rank: str | None = None
    tier: str | None = None
    lp: int | None = None
    avatar_url: str | None = None
    champion_image_url: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _reject_null_stats(cls, data: Any) -> Any:
        # Only the image URLs can be cleared; every other field is left out to keep it.
        if isinstance(data, dict):
            nulls = sorted(key for key, value in data.items() if value is None and key not in _NULLABLE_UPDATES)
            if nulls:
                raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return data


class RosterSummaryResponse(BaseModel):
    player_count: int
    average_wins: float | None
    average_kda: float | None
    average_win_rate: float | None


class ImportResponse(BaseModel):
    imported: int


class LeaderboardResponse(BaseModel):
    by: Literal["win_rate", "kda", "wins", "losses"]
    players: List[PlayerResponse]
