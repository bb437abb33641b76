"""Configuration helpers for match formats."""

from .rules import DEFAULT_FORMAT, MatchRules, get_rules, iter_rules

__all__ = [
    "DEFAULT_FORMAT",
    "MatchRules",
    "get_rules",
    "iter_rules",
]
