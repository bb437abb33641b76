"""Command-line interface for generating 5v5 teams from a roster file."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from lolteams.balancer import TeamGenerationError, compare_teams, generate_teams
from lolteams.config import get_rules
from lolteams.config_loader import MappingProfile
from lolteams.ingest import PlayerImportError, load_players
from lolteams.models import Team, TeamPair
from lolteams.pool import SelectionPool, ToggleResult, rank_color


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate balanced 5v5 teams from a player roster")
    parser.add_argument("roster", type=Path, help="Path to roster JSON or CSV")
    parser.add_argument(
        "--select",
        nargs="*",
        default=[],
        help="Player IDs to put in the selection pool (toggling an ID twice removes it)",
    )
    parser.add_argument(
        "--mode",
        choices=("balanced", "random"),
        default="balanced",
        help="Balanced split by fairness score, or a random split",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for random mode")
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., real_name=Name)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write teams JSON")
    parser.add_argument("--verbose", action="store_true", help="Log generation details")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _format_team(team: Team) -> str:
    lines = [
        f"{team.name}  KDA {team.average_kda:.1f} | WR {team.average_win_rate:.1f}% | Wins {team.total_wins}"
    ]
    for player in team.players:
        rank = f"{player.rank} {player.tier}".strip() or "Unranked"
        lines.append(
            f"  {player.real_name} ({player.lol_name})  {rank} [{rank_color(player.rank)}]  {player.kda} KDA"
        )
    return "\n".join(lines)


def _pair_payload(pair: TeamPair) -> dict:
    return {
        "mode": pair.mode,
        "teams": [
            {
                "id": team.team_id,
                "name": team.name,
                "players": [player.to_payload() for player in team.players],
                "averageKda": team.average_kda,
                "totalWins": team.total_wins,
                "averageWinRate": team.average_win_rate,
            }
            for team in pair.teams
        ],
    }


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    mapping = _parse_mapping(args.column)
    if args.load_profile:
        mapping = MappingProfile.load(args.load_profile).columns | mapping
    if args.save_profile:
        MappingProfile(mapping).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    try:
        roster = load_players(args.roster, mapping=mapping or None)
    except (OSError, PlayerImportError) as exc:
        raise SystemExit(f"Could not load roster: {exc}") from exc

    by_id = {player.player_id: player for player in roster}
    rules = get_rules()
    pool = SelectionPool(rules.pool_capacity)
    for player_id in args.select:
        player = by_id.get(player_id)
        if player is None:
            raise SystemExit(f"Unknown player id {player_id!r}")
        if pool.toggle(player) is ToggleResult.CAPACITY_EXCEEDED:
            print(f"Maximum of {pool.capacity} players selected; skipped {player.real_name}")

    print(f"Selected players ({len(pool)}/{pool.capacity})")
    try:
        pair = generate_teams(pool.players, mode=args.mode, rules=rules, rng=args.seed)
    except TeamGenerationError as exc:
        print(str(exc))
        raise SystemExit(2) from exc

    print(_format_team(pair.blue))
    print()
    print(_format_team(pair.red))
    comparison = compare_teams(pair, rules)
    print(f"\nScore gap: {comparison.score_gap:.2f}")

    if args.output:
        args.output.write_text(json.dumps(_pair_payload(pair), indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Wrote teams to {args.output}")


if __name__ == "__main__":
    main()
