"""Persistence layer for the tracked player roster."""

from __future__ import annotations

import json
import logging
import os
import sqlite3
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, List, Optional
from uuid import uuid4

from lolteams.ingest import load_default_players
from lolteams.models import PlayerRecord


logger = logging.getLogger(__name__)

_DB_PATH_ENV = "LOLTEAMS_DB_PATH"


class PlayerNotFoundError(KeyError):
    """Raised when an update or delete targets an unknown player id."""


class PlayerStore:
    """Simple SQLite-backed store for player records."""

    def __init__(self, db_path: Path | str | None = None):
        self._use_uri = False
        env_db = os.getenv(_DB_PATH_ENV)
        if db_path is not None:
            self.db_path = db_path if isinstance(db_path, str) and db_path.startswith("file:") else Path(db_path)
            self._use_uri = not isinstance(self.db_path, Path)
        elif env_db:
            if env_db.startswith("file:"):
                self.db_path = env_db
                self._use_uri = True
            else:
                self.db_path = Path(env_db)
        elif os.getenv("PYTEST_CURRENT_TEST"):
            test_dir = Path(tempfile.gettempdir()) / "lolteams-test"
            test_dir.mkdir(parents=True, exist_ok=True)
            self.db_path = test_dir / "lolteams.sqlite"
        else:
            self.db_path = Path("data") / "lolteams.sqlite"
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        if isinstance(self.db_path, Path):
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
        else:
            conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS players (
                    id TEXT PRIMARY KEY,
                    seq INTEGER NOT NULL,
                    payload_json TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )
            conn.commit()

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> PlayerRecord:
        return PlayerRecord.model_validate(json.loads(row["payload_json"]))

    @staticmethod
    def _next_seq(conn: sqlite3.Connection) -> int:
        row = conn.execute("SELECT COALESCE(MAX(seq), 0) + 1 AS next_seq FROM players").fetchone()
        return int(row["next_seq"])

    def add_player(self, player: PlayerRecord | dict[str, Any]) -> PlayerRecord:
        """Insert a player; a dict without an id gets a fresh one."""

        if isinstance(player, dict):
            data = dict(player)
            if not data.get("player_id") and not data.get("id"):
                data["player_id"] = uuid4().hex
            player = PlayerRecord.model_validate(data)
        now = datetime.now(timezone.utc).isoformat()
        with self._connect() as conn:
            try:
                conn.execute(
                    "INSERT INTO players (id, seq, payload_json, created_at, updated_at) VALUES (?, ?, ?, ?, ?)",
                    (
                        player.player_id,
                        self._next_seq(conn),
                        json.dumps(player.to_payload()),
                        now,
                        now,
                    ),
                )
            except sqlite3.IntegrityError as exc:
                raise ValueError(f"Player {player.player_id!r} already exists") from exc
            conn.commit()
        return player

    def get_player(self, player_id: str) -> Optional[PlayerRecord]:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM players WHERE id = ?", (player_id,)).fetchone()
        if row is None:
            return None
        return self._row_to_record(row)

    def get_players(self, player_ids: Iterable[str]) -> List[PlayerRecord]:
        """Fetch players preserving the requested order; raises for unknown ids."""

        ids = list(player_ids)
        found = {player.player_id: player for player in self.list_players()}
        missing = [player_id for player_id in ids if player_id not in found]
        if missing:
            raise PlayerNotFoundError(f"Unknown player ids: {', '.join(missing)}")
        return [found[player_id] for player_id in ids]

    def list_players(self) -> List[PlayerRecord]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM players ORDER BY seq").fetchall()
        return [self._row_to_record(row) for row in rows]

    def update_player(self, player_id: str, **updates: Any) -> PlayerRecord:
        current = self.get_player(player_id)
        if current is None:
            raise PlayerNotFoundError(player_id)
        updates.pop("player_id", None)
        updated = current.with_updates(**updates)
        with self._connect() as conn:
            conn.execute(
                "UPDATE players SET payload_json = ?, updated_at = ? WHERE id = ?",
                (
                    json.dumps(updated.to_payload()),
                    datetime.now(timezone.utc).isoformat(),
                    player_id,
                ),
            )
            conn.commit()
        return updated

    def delete_player(self, player_id: str) -> None:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM players WHERE id = ?", (player_id,))
            conn.commit()
        if cursor.rowcount == 0:
            raise PlayerNotFoundError(player_id)

    def replace_all(self, players: Iterable[PlayerRecord]) -> int:
        """Swap the whole roster for ``players`` in one transaction."""

        now = datetime.now(timezone.utc).isoformat()
        rows = [
            (player.player_id, seq, json.dumps(player.to_payload()), now, now)
            for seq, player in enumerate(players, start=1)
        ]
        with self._connect() as conn:
            conn.execute("DELETE FROM players")
            try:
                conn.executemany(
                    "INSERT INTO players (id, seq, payload_json, created_at, updated_at) VALUES (?, ?, ?, ?, ?)",
                    rows,
                )
            except sqlite3.IntegrityError as exc:
                conn.rollback()
                raise ValueError("Imported roster contains duplicate player ids") from exc
            conn.commit()
        logger.info("Replaced roster with %d players", len(rows))
        return len(rows)

    def reset_to_default(self) -> int:
        """Replace the roster with the built-in sample players."""

        return self.replace_all(load_default_players())

    def clear(self) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM players")
            conn.commit()


__all__ = ["PlayerNotFoundError", "PlayerStore"]
