import json
from pathlib import Path

import pytest

from lolteams.cli import main


def _write_roster(tmp_path: Path, count: int = 11) -> Path:
    roster = [
        {
            "id": f"p{idx}",
            "realName": f"Player {idx}",
            "lolName": f"Summoner{idx}",
            "kda": 1.0 + idx * 0.5,
            "wins": 40 + idx,
            "losses": 40,
            "rank": "Silver",
            "tier": "I",
        }
        for idx in range(count)
    ]
    path = tmp_path / "roster.json"
    path.write_text(json.dumps(roster), encoding="utf-8")
    return path


def test_cli_writes_balanced_teams(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    roster = _write_roster(tmp_path)
    output = tmp_path / "teams.json"
    ids = [f"p{idx}" for idx in range(10)]

    main([str(roster), "--select", *ids, "--output", str(output)])

    out = capsys.readouterr().out
    assert "Selected players (10/10)" in out
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["mode"] == "balanced"
    blue, red = payload["teams"]
    assert [p["id"] for p in blue["players"]] == ["p9", "p7", "p5", "p3", "p1"]
    assert [p["id"] for p in red["players"]] == ["p8", "p6", "p4", "p2", "p0"]


def test_cli_reports_capacity_and_keeps_first_ten(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    roster = _write_roster(tmp_path)
    ids = [f"p{idx}" for idx in range(11)]

    main([str(roster), "--select", *ids, "--mode", "random", "--seed", "5"])

    out = capsys.readouterr().out
    assert "skipped Player 10" in out
    assert "Player 10 (" not in out


def test_cli_wrong_pool_size_exits_without_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    roster = _write_roster(tmp_path)
    output = tmp_path / "teams.json"

    with pytest.raises(SystemExit) as excinfo:
        main([str(roster), "--select", *[f"p{idx}" for idx in range(9)], "--output", str(output)])

    assert excinfo.value.code == 2
    assert "exactly 10" in capsys.readouterr().out
    assert not output.exists()


def test_cli_toggle_twice_removes(tmp_path: Path):
    roster = _write_roster(tmp_path)
    ids = [f"p{idx}" for idx in range(10)] + ["p0"]

    with pytest.raises(SystemExit) as excinfo:
        main([str(roster), "--select", *ids])
    assert excinfo.value.code == 2


def test_cli_unknown_player(tmp_path: Path):
    roster = _write_roster(tmp_path)

    with pytest.raises(SystemExit, match="Unknown player id"):
        main([str(roster), "--select", "nobody"])


def test_cli_csv_with_saved_profile(tmp_path: Path):
    csv_path = tmp_path / "roster.csv"
    rows = ["Code,Name,Wins,Losses,KDA"]
    rows += [f"c{idx},Csv {idx},{20 + idx},20,{1 + idx}" for idx in range(10)]
    csv_path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    profile = tmp_path / "profile.json"
    output = tmp_path / "teams.json"

    with pytest.raises(SystemExit):
        main([
            str(csv_path),
            "--column", "player_id=Code",
            "--column", "real_name=Name",
            "--column", "wins=Wins",
            "--column", "losses=Losses",
            "--column", "kda=KDA",
            "--save-profile", str(profile),
        ])
    assert profile.exists()

    main([
        str(csv_path),
        "--load-profile", str(profile),
        "--select", *[f"c{idx}" for idx in range(10)],
        "--output", str(output),
    ])

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["teams"][0]["players"][0]["id"] == "c9"
