"""Selection pool of players queued for the next team generation."""

from __future__ import annotations

import enum
import logging
from typing import Iterator, List

from lolteams.config import get_rules
from lolteams.models import PlayerRecord


logger = logging.getLogger(__name__)


class ToggleResult(str, enum.Enum):
    ADDED = "added"
    REMOVED = "removed"
    CAPACITY_EXCEEDED = "capacity_exceeded"


class SelectionPool:
    """Ordered set of players, unique by id and capped at ``capacity``.

    Rejecting a player because the pool is full is an expected outcome and is
    reported through ``ToggleResult.CAPACITY_EXCEEDED`` rather than raised.
    """

    def __init__(self, capacity: int | None = None):
        if capacity is None:
            capacity = get_rules().pool_capacity
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._players: List[PlayerRecord] = []

    def _index_of(self, player_id: str) -> int | None:
        for idx, player in enumerate(self._players):
            if player.player_id == player_id:
                return idx
        return None

    def toggle(self, player: PlayerRecord) -> ToggleResult:
        idx = self._index_of(player.player_id)
        if idx is not None:
            del self._players[idx]
            return ToggleResult.REMOVED
        if len(self._players) >= self.capacity:
            logger.warning(
                "Selection pool full (%d/%d); rejected player %s",
                len(self._players),
                self.capacity,
                player.player_id,
            )
            return ToggleResult.CAPACITY_EXCEEDED
        self._players.append(player)
        return ToggleResult.ADDED

    def clear(self) -> None:
        self._players.clear()

    @property
    def players(self) -> tuple[PlayerRecord, ...]:
        return tuple(self._players)

    @property
    def remaining(self) -> int:
        return self.capacity - len(self._players)

    @property
    def is_full(self) -> bool:
        return len(self._players) >= self.capacity

    @property
    def is_ready(self) -> bool:
        return len(self._players) == self.capacity

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[PlayerRecord]:
        return iter(tuple(self._players))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, PlayerRecord):
            item = item.player_id
        if not isinstance(item, str):
            return False
        return self._index_of(item) is not None
