"""Input adapters that normalize roster files."""

from .players import (
    DEFAULT_CSV_MAPPING,
    PlayerImportError,
    PlayerRow,
    dump_players_json,
    load_default_players,
    load_player_rows,
    load_players,
    load_players_csv,
    load_players_json,
    records_from_payload,
    rows_to_records,
)

__all__ = [
    "DEFAULT_CSV_MAPPING",
    "PlayerImportError",
    "PlayerRow",
    "dump_players_json",
    "load_default_players",
    "load_player_rows",
    "load_players",
    "load_players_csv",
    "load_players_json",
    "records_from_payload",
    "rows_to_records",
]
