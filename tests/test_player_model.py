import pytest
from pydantic import ValidationError

from lolteams.balancer import fairness_score
from lolteams.ingest import load_players_json
from lolteams.models import PlayerRecord, compute_kda, compute_win_rate


def test_player_record_is_frozen():
    record = PlayerRecord(
        player_id="p1",
        real_name="João Silva",
        lol_name="DragonSlayer",
        main_champion="Yasuo",
        kda=2.8,
        wins=145,
        losses=98,
    )

    assert record.player_id == "p1"
    assert record.games_played == 243

    with pytest.raises((TypeError, ValidationError)):
        record.player_id = "p2"  # type: ignore[misc]


def test_win_rate_and_games_played_are_derived():
    record = PlayerRecord(player_id="p1", real_name="Maria", wins=167, losses=89)

    assert record.games_played == 256
    assert record.win_rate == pytest.approx(65.2)


def test_win_rate_zero_without_games():
    record = PlayerRecord(player_id="p1", real_name="New Player")

    assert record.games_played == 0
    assert record.win_rate == 0.0
    assert compute_win_rate(0, 0) == 0.0


def test_supplied_win_rate_is_recomputed_from_record():
    record = PlayerRecord(player_id="p1", real_name="Imported", wins=10, losses=0, win_rate=20.0)

    assert record.win_rate == 100.0
    assert fairness_score(record) == pytest.approx(60.0)


def test_supplied_win_rate_without_games_is_zero():
    players = load_players_json('[{"id": "y", "realName": "Y", "wins": 0, "losses": 0, "winRate": 90}]')

    assert players[0].games_played == 0
    assert players[0].win_rate == 0.0


def test_win_rate_rounds_half_up():
    assert compute_win_rate(1, 15) == 6.3
    assert PlayerRecord(player_id="p1", real_name="Half", wins=1, losses=15).win_rate == 6.3


def test_games_played_mismatch_rejected():
    with pytest.raises(ValidationError):
        PlayerRecord(player_id="p1", real_name="Broken", wins=10, losses=5, games_played=12)


def test_kda_derived_from_kills_deaths_assists():
    record = PlayerRecord(player_id="p1", real_name="Fragger", kills=10, deaths=4, assists=6)
    assert record.kda == pytest.approx(4.0)

    deathless = PlayerRecord(player_id="p2", real_name="Ghost", kills=3, deaths=0, assists=2)
    assert deathless.kda == pytest.approx(5.0)
    assert compute_kda(1, 3, 0) == pytest.approx(0.33)


def test_camel_case_payload_round_trip():
    payload = {
        "id": "7",
        "realName": "Ana Oliveira",
        "lolName": "MysticMage",
        "mainChampion": "Ahri",
        "kda": 2.9,
        "wins": 156,
        "losses": 94,
        "winRate": 62.4,
        "gamesPlayed": 250,
        "rank": "Diamond",
        "tier": "III",
        "lp": 1923,
    }
    record = PlayerRecord.model_validate(payload)

    assert record.real_name == "Ana Oliveira"
    assert record.to_payload()["winRate"] == 62.4
    assert "kills" not in record.to_payload()


def test_with_updates_recomputes_totals():
    record = PlayerRecord(player_id="p1", real_name="Pedro", kda=2.1, wins=134, losses=112)

    updated = record.with_updates(wins=135)

    assert updated.games_played == 247
    assert updated.win_rate == pytest.approx(54.7)
    assert record.wins == 134


def test_negative_kda_rejected():
    with pytest.raises(ValidationError):
        PlayerRecord(player_id="p1", real_name="Bad", kda=-1.0)
