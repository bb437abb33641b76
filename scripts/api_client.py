"""Lightweight REST client for the lolteams API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the lolteams REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("player_ids", nargs="*", help="Player IDs to split into teams")
    parser.add_argument("--mode", choices=("balanced", "random"), default="balanced")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random mode")
    parser.add_argument("--import-roster", type=Path, metavar="JSON", help="Upload a roster JSON before anything else")
    parser.add_argument("--list-players", action="store_true", help="List roster players and exit")
    parser.add_argument("--search", default=None, help="Filter for --list-players")
    parser.add_argument("--export-path", type=Path, help="Download the roster JSON to this path and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.import_roster:
            resp = client.post(
                "/players/import",
                files={"file": (args.import_roster.name, args.import_roster.read_bytes(), "application/json")},
            )
            if resp.status_code == 400:
                raise SystemExit(f"import rejected: {resp.json()['detail']}")
            resp.raise_for_status()
            print(f"Imported {resp.json()['imported']} players")

        if args.list_players or args.export_path:
            if args.list_players:
                params = {"search": args.search} if args.search else None
                resp = client.get("/players", params=params)
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
            if args.export_path:
                resp = client.get("/players/export")
                resp.raise_for_status()
                args.export_path.write_text(resp.text, encoding="utf-8")
                print(f"Roster export saved to {args.export_path}")
            return

        if not args.player_ids:
            if args.import_roster:
                return
            raise SystemExit("player ids are required unless using --list-players/--export-path")

        payload = {"player_ids": args.player_ids, "mode": args.mode, "seed": args.seed}
        resp = client.post("/teams", json=payload)
        if resp.status_code in (400, 404):
            raise SystemExit(resp.json()["detail"])
        resp.raise_for_status()
        result = resp.json()
        for team in result["teams"]:
            names = ", ".join(player["real_name"] for player in team["players"])
            print(
                f"{team['name']}: KDA {team['average_kda']:.1f} WR {team['average_win_rate']:.1f}% "
                f"Wins {team['total_wins']} -> {names}"
            )
        print(f"Score gap: {result['score_gap']:.2f}")


if __name__ == "__main__":
    main()
