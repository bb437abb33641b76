import pytest

from lolteams.models import PlayerRecord
from lolteams.pool import SelectionPool, ToggleResult


def _players(count: int) -> list[PlayerRecord]:
    return [
        PlayerRecord(player_id=f"p{idx}", real_name=f"Player {idx}", kda=1.0 + idx, wins=idx, losses=1)
        for idx in range(count)
    ]


def test_toggle_adds_then_removes():
    pool = SelectionPool()
    player = _players(1)[0]

    assert pool.toggle(player) is ToggleResult.ADDED
    assert player in pool
    assert "p0" in pool
    assert len(pool) == 1

    assert pool.toggle(player) is ToggleResult.REMOVED
    assert player not in pool
    assert len(pool) == 0


def test_toggle_matches_by_identifier():
    pool = SelectionPool()
    original = PlayerRecord(player_id="p1", real_name="Original", kda=2.0)
    edited = original.with_updates(real_name="Renamed")

    pool.toggle(original)
    assert pool.toggle(edited) is ToggleResult.REMOVED
    assert len(pool) == 0


def test_eleventh_player_rejected(caplog: pytest.LogCaptureFixture):
    players = _players(11)
    pool = SelectionPool()
    for player in players[:10]:
        assert pool.toggle(player) is ToggleResult.ADDED
    before = pool.players

    with caplog.at_level("WARNING"):
        result = pool.toggle(players[10])

    assert result is ToggleResult.CAPACITY_EXCEEDED
    assert pool.players == before
    assert players[10] not in pool
    assert pool.is_full and pool.is_ready
    assert "p10" in caplog.text


def test_full_pool_still_allows_removal():
    players = _players(10)
    pool = SelectionPool()
    for player in players:
        pool.toggle(player)

    assert pool.toggle(players[3]) is ToggleResult.REMOVED
    assert pool.remaining == 1
    assert not pool.is_ready


def test_clear_empties_pool():
    pool = SelectionPool()
    for player in _players(4):
        pool.toggle(player)

    pool.clear()

    assert len(pool) == 0
    assert list(pool) == []


def test_pool_keeps_selection_order():
    players = _players(5)
    pool = SelectionPool()
    for player in reversed(players):
        pool.toggle(player)

    assert [player.player_id for player in pool] == ["p4", "p3", "p2", "p1", "p0"]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        SelectionPool(0)
