"""REST API for the roster and team generator."""

from __future__ import annotations

from dataclasses import asdict
from typing import Literal

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.responses import Response

from lolteams.api.schemas import (
    ImportResponse,
    LeaderboardResponse,
    PlayerCreateRequest,
    PlayerResponse,
    PlayerUpdateRequest,
    RosterSummaryResponse,
    TeamPairResponse,
    TeamRequest,
)
from lolteams.balancer import TeamGenerationError, compare_teams, generate_teams
from lolteams.config import get_rules
from lolteams.ingest import PlayerImportError, dump_players_json, load_players_json
from lolteams.models import PlayerRecord
from lolteams.persistence import PlayerNotFoundError, PlayerStore
from lolteams.pool import hall_of_fame, leaderboard, roster_summary, search_players


def _not_found_detail(exc: PlayerNotFoundError) -> str:
    return str(exc.args[0]) if exc.args else "Player not found"


def create_app(store: PlayerStore | None = None) -> FastAPI:
    app = FastAPI(title="lolteams")
    store = store or PlayerStore()
    app.state.player_store = store

    def _fetch_player_or_404(player_id: str) -> PlayerRecord:
        player = store.get_player(player_id)
        if player is None:
            raise HTTPException(status_code=404, detail="Player not found")
        return player

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/players", response_model=list[PlayerResponse])
    async def list_players(search: str | None = None):
        players = search_players(store.list_players(), search)
        return [PlayerResponse.from_record(player) for player in players]

    @app.post("/players", response_model=PlayerResponse, status_code=201)
    async def create_player(payload: PlayerCreateRequest):
        try:
            player = store.add_player(payload.model_dump(exclude_none=True))
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return PlayerResponse.from_record(player)

    @app.delete("/players")
    async def clear_players() -> dict[str, str]:
        store.clear()
        return {"status": "cleared"}

    @app.post("/players/import", response_model=ImportResponse)
    async def import_players(file: UploadFile = File(...)):
        contents = await file.read()
        if not contents:
            raise HTTPException(status_code=400, detail="Roster file is empty")
        try:
            players = load_players_json(contents.decode("utf-8"))
            imported = store.replace_all(players)
        except (PlayerImportError, UnicodeDecodeError, ValueError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ImportResponse(imported=imported)

    @app.post("/players/reset", response_model=ImportResponse)
    async def reset_players():
        return ImportResponse(imported=store.reset_to_default())

    @app.get("/players/export")
    async def export_players():
        return Response(
            content=dump_players_json(store.list_players()),
            media_type="application/json",
            headers={"Content-Disposition": "attachment; filename=lol-players.json"},
        )

    @app.get("/players/summary", response_model=RosterSummaryResponse)
    async def players_summary():
        return RosterSummaryResponse(**asdict(roster_summary(store.list_players())))

    @app.get("/players/{player_id}", response_model=PlayerResponse)
    async def get_player(player_id: str):
        return PlayerResponse.from_record(_fetch_player_or_404(player_id))

    @app.patch("/players/{player_id}", response_model=PlayerResponse)
    async def update_player(player_id: str, payload: PlayerUpdateRequest):
        try:
            player = store.update_player(player_id, **payload.model_dump(exclude_unset=True))
        except PlayerNotFoundError as exc:
            raise HTTPException(status_code=404, detail=_not_found_detail(exc)) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return PlayerResponse.from_record(player)

    @app.delete("/players/{player_id}")
    async def delete_player(player_id: str) -> dict[str, str]:
        try:
            store.delete_player(player_id)
        except PlayerNotFoundError as exc:
            raise HTTPException(status_code=404, detail=_not_found_detail(exc)) from exc
        return {"status": "deleted", "player_id": player_id}

    @app.get("/leaderboards", response_model=LeaderboardResponse)
    async def get_leaderboard(
        by: Literal["win_rate", "kda", "wins", "losses"] = "win_rate",
        limit: int = Query(default=5, ge=1, le=100),
    ):
        players = leaderboard(store.list_players(), by=by, limit=limit)
        return LeaderboardResponse(by=by, players=[PlayerResponse.from_record(player) for player in players])

    @app.get("/hall-of-fame", response_model=list[PlayerResponse])
    async def get_hall_of_fame():
        return [PlayerResponse.from_record(player) for player in hall_of_fame(store.list_players())]

    @app.post("/teams", response_model=TeamPairResponse)
    async def build_teams(request: TeamRequest):
        rules = get_rules()
        try:
            players = store.get_players(request.player_ids)
        except PlayerNotFoundError as exc:
            raise HTTPException(status_code=404, detail=_not_found_detail(exc)) from exc
        try:
            pair = generate_teams(players, mode=request.mode, rules=rules, rng=request.seed)
        except TeamGenerationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        comparison = compare_teams(pair, rules)
        return TeamPairResponse.from_pair(pair, comparison)

    return app


__all__ = ["create_app"]
