"""Split a full selection pool into two teams."""

from __future__ import annotations

import logging
import random
from typing import List, Sequence

from lolteams.config import MatchRules, get_rules
from lolteams.models import PlayerRecord, TeamMode, TeamPair

from .aggregate import build_team, compare_teams
from .errors import DuplicatePlayerError, TeamSizeError


logger = logging.getLogger(__name__)


def fairness_score(player: PlayerRecord, rules: MatchRules | None = None) -> float:
    rules = rules or get_rules()
    return rules.kda_weight * player.kda + rules.win_rate_weight * player.win_rate


def _validate_pool(players: Sequence[PlayerRecord], rules: MatchRules) -> None:
    if len(players) != rules.pool_capacity:
        raise TeamSizeError(rules.pool_capacity, len(players))
    seen: set[str] = set()
    duplicates: list[str] = []
    for player in players:
        if player.player_id in seen and player.player_id not in duplicates:
            duplicates.append(player.player_id)
        seen.add(player.player_id)
    if duplicates:
        raise DuplicatePlayerError(duplicates)


def _build_pair(
    blue: Sequence[PlayerRecord],
    red: Sequence[PlayerRecord],
    *,
    mode: TeamMode,
    rules: MatchRules,
) -> TeamPair:
    blue_name, red_name = rules.team_names
    pair = TeamPair(
        blue=build_team(blue, blue_name, rules),
        red=build_team(red, red_name, rules),
        mode=mode,
    )
    comparison = compare_teams(pair, rules)
    logger.info(
        "Generated %s teams: kda_gap=%.2f win_rate_gap=%.2f score_gap=%.2f",
        mode,
        comparison.kda_gap,
        comparison.win_rate_gap,
        comparison.score_gap,
    )
    return pair


def balance_teams(players: Sequence[PlayerRecord], rules: MatchRules | None = None) -> TeamPair:
    """Rank players by fairness score and alternate picks between the sides.

    Sorted position 0 goes to blue, 1 to red, 2 to blue and so on. The sort is
    stable, so equal scores keep their input order.
    """

    rules = rules or get_rules()
    _validate_pool(players, rules)

    ordered = sorted(players, key=lambda player: fairness_score(player, rules), reverse=True)
    blue: List[PlayerRecord] = []
    red: List[PlayerRecord] = []
    for idx, player in enumerate(ordered):
        if idx % 2 == 0:
            blue.append(player)
        else:
            red.append(player)
    return _build_pair(blue, red, mode="balanced", rules=rules)


def _resolve_rng(rng: random.Random | int | None) -> random.Random:
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)


def randomize_teams(
    players: Sequence[PlayerRecord],
    rules: MatchRules | None = None,
    *,
    rng: random.Random | int | None = None,
) -> TeamPair:
    """Shuffle uniformly and split the pool in half."""

    rules = rules or get_rules()
    _validate_pool(players, rules)

    shuffled = list(players)
    _resolve_rng(rng).shuffle(shuffled)
    return _build_pair(
        shuffled[: rules.team_size],
        shuffled[rules.team_size :],
        mode="random",
        rules=rules,
    )


def generate_teams(
    players: Sequence[PlayerRecord],
    *,
    mode: TeamMode = "balanced",
    rules: MatchRules | None = None,
    rng: random.Random | int | None = None,
) -> TeamPair:
    if mode == "balanced":
        return balance_teams(players, rules)
    if mode == "random":
        return randomize_teams(players, rules, rng=rng)
    raise ValueError(f"Unknown team generation mode {mode!r}")

