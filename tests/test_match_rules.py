import pytest

from lolteams.config import get_rules, iter_rules


def test_get_rules_handles_lowercase_format():
    rules = get_rules("5v5")
    assert rules.format_key == "5V5"
    assert rules.team_size == 5
    assert rules.pool_capacity == 10


def test_default_weights(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("LOLTEAMS_KDA_WEIGHT", raising=False)
    monkeypatch.delenv("LOLTEAMS_WIN_RATE_WEIGHT", raising=False)
    rules = get_rules()
    assert rules.kda_weight == 0.4
    assert rules.win_rate_weight == 0.6
    assert len(rules.team_names) == 2


def test_env_overrides_weights(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOLTEAMS_KDA_WEIGHT", "0.5")
    monkeypatch.setenv("LOLTEAMS_WIN_RATE_WEIGHT", "not-a-number")
    rules = get_rules()
    assert rules.kda_weight == 0.5
    assert rules.win_rate_weight == 0.6


def test_get_rules_missing_raises():
    with pytest.raises(KeyError):
        get_rules("3V3")


def test_iter_rules_lists_formats():
    assert {rules.format_key for rules in iter_rules()} == {"5V5"}
