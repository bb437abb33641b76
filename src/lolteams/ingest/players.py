"""Load and dump roster files in the JSON and CSV formats."""

from __future__ import annotations

import csv
import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ValidationError

from lolteams.models import PlayerRecord


logger = logging.getLogger(__name__)


class PlayerImportError(ValueError):
    """Raised when a roster file cannot be turned into player records."""


DEFAULT_CSV_MAPPING = {
    "player_id": "id",
    "real_name": "realName",
    "lol_name": "lolName",
    "main_champion": "mainChampion",
    "kda": "kda",
    "kills": "kills",
    "deaths": "deaths",
    "assists": "assists",
    "wins": "wins",
    "losses": "losses",
    "win_rate": "winRate",
    "rank": "rank",
    "tier": "tier",
    "lp": "lp",
}

_NUMERIC_FIELDS = {"kda", "kills", "deaths", "assists", "wins", "losses", "win_rate", "lp"}


class PlayerRow(BaseModel):
    """Raw CSV row projected onto player fields; empty cells are dropped."""

    values: dict[str, str]

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "PlayerRow":
        def extract(spec: str) -> Optional[str]:
            if "|" in spec:
                parts = [row.get(col.strip(), "").strip() for col in spec.split("|")]
                joined = " ".join(part for part in parts if part)
                return joined or None
            value = row.get(spec)
            if value is None:
                return None
            value = value.strip()
            return value or None

        values: dict[str, str] = {}
        for field, spec in mapping.items():
            value = extract(spec)
            if value is not None:
                values[field] = value
        return cls(values=values)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for field, value in self.values.items():
            if field in _NUMERIC_FIELDS:
                payload[field] = value.rstrip("%").strip()
            else:
                payload[field] = value
        return payload


def _read_text(source: Path | str) -> str:
    if isinstance(source, Path):
        return source.read_text(encoding="utf-8")
    return source


def records_from_payload(payload: Any) -> List[PlayerRecord]:
    if not isinstance(payload, list):
        raise PlayerImportError("Roster JSON must be an array of players")
    records: List[PlayerRecord] = []
    for idx, item in enumerate(payload):
        try:
            records.append(PlayerRecord.model_validate(item))
        except ValidationError as exc:
            raise PlayerImportError(f"Invalid player at index {idx}: {exc}") from exc
    return records


def load_players_json(source: Path | str) -> List[PlayerRecord]:
    """Parse a JSON array of players from a path or a JSON string."""

    try:
        payload = json.loads(_read_text(source))
    except json.JSONDecodeError as exc:
        raise PlayerImportError(f"Invalid roster JSON: {exc}") from exc
    records = records_from_payload(payload)
    logger.info("Loaded %d players from JSON", len(records))
    return records


def load_default_players() -> List[PlayerRecord]:
    """Built-in sample roster shipped with the package, used to restore a fresh install."""

    text = (resources.files("lolteams") / "data" / "default_players.json").read_text(encoding="utf-8")
    return load_players_json(text)


def dump_players_json(players: Iterable[PlayerRecord], path: Path | None = None) -> str:
    text = json.dumps([player.to_payload() for player in players], indent=2, ensure_ascii=False)
    if path is not None:
        path.write_text(text, encoding="utf-8")
    return text


def load_player_rows(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRow]:
    mapping = mapping or DEFAULT_CSV_MAPPING
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        return [PlayerRow.from_mapping(row, mapping) for row in reader]


def rows_to_records(rows: Sequence[PlayerRow]) -> List[PlayerRecord]:
    records: List[PlayerRecord] = []
    for line_no, row in enumerate(rows, start=2):
        try:
            records.append(PlayerRecord.model_validate(row.to_payload()))
        except ValidationError as exc:
            raise PlayerImportError(f"Invalid player on line {line_no}: {exc}") from exc
    return records


def load_players_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    records = rows_to_records(load_player_rows(path, mapping=mapping))
    logger.info("Loaded %d players from %s", len(records), path)
    return records


def load_players(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    """Dispatch on the file suffix: ``.csv`` uses the column mapping, anything else is JSON."""

    if path.suffix.lower() == ".csv":
        return load_players_csv(path, mapping=mapping)
    return load_players_json(path)
