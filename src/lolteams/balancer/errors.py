"""Errors raised while building teams."""

from __future__ import annotations

from typing import Sequence


class TeamGenerationError(ValueError):
    """Raised when the pool cannot be split into teams."""


class TeamSizeError(TeamGenerationError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Select exactly {expected} players (got {actual})")
        self.expected = expected
        self.actual = actual


class DuplicatePlayerError(TeamGenerationError):
    def __init__(self, player_ids: Sequence[str]):
        super().__init__(f"Players selected more than once: {', '.join(player_ids)}")
        self.player_ids = list(player_ids)
