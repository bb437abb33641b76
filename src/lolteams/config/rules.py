"""Match format configuration for team generation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Dict, Iterable, Tuple


logger = logging.getLogger(__name__)

_KDA_WEIGHT_ENV = "LOLTEAMS_KDA_WEIGHT"
_WIN_RATE_WEIGHT_ENV = "LOLTEAMS_WIN_RATE_WEIGHT"


@dataclass(frozen=True)
class MatchRules:
    format_key: str
    team_size: int
    kda_weight: float
    win_rate_weight: float
    team_names: Tuple[str, str]

    @property
    def pool_capacity(self) -> int:
        return self.team_size * 2


_MATCH_RULES: Dict[str, MatchRules] = {
    "5V5": MatchRules(
        format_key="5V5",
        team_size=5,
        kda_weight=0.4,
        win_rate_weight=0.6,
        team_names=("Time Azul", "Time Vermelho"),
    ),
}

DEFAULT_FORMAT = "5V5"


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def iter_rules() -> Iterable[MatchRules]:
    """Return an iterator of all configured match formats."""

    return _MATCH_RULES.values()


def get_rules(format_key: str = DEFAULT_FORMAT) -> MatchRules:
    """Fetch rules for a match format, applying weight overrides from the environment.

    Raises KeyError for unknown formats.
    """

    key = format_key.upper()
    if key not in _MATCH_RULES:
        raise KeyError(f"No match rules configured for format={format_key!r}")
    rules = _MATCH_RULES[key]
    kda_weight = _env_float(_KDA_WEIGHT_ENV, rules.kda_weight, clamp_min=0.0)
    win_rate_weight = _env_float(_WIN_RATE_WEIGHT_ENV, rules.win_rate_weight, clamp_min=0.0)
    if kda_weight == rules.kda_weight and win_rate_weight == rules.win_rate_weight:
        return rules
    return replace(rules, kda_weight=kda_weight, win_rate_weight=win_rate_weight)
