from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from pitch_tunnel_matrix.cli import app

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

runner = CliRunner()


def _no_config(tmp_path: Path) -> list[str]:
    return ["--config", str(tmp_path / "absent.yaml")]


class TestRootCli:
    def test_help(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Pitch tunneling deception matrix" in result.output

    def test_pitches(self) -> None:
        result = runner.invoke(app, ["pitches"])
        assert result.exit_code == 0
        assert "Slider" in result.output
        assert "KN" in result.output


class TestLeagueCommand:
    def test_table_output(self, write_roster: Callable[..., Path], tmp_path: Path) -> None:
        roster = write_roster()
        result = runner.invoke(app, ["league", str(roster), "--seed", "7", *_no_config(tmp_path)])
        assert result.exit_code == 0, result.output
        assert "League pair averages" in result.output
        assert "Pitcher tunnel profiles" in result.output

    def test_json_output_is_reproducible(self, write_roster: Callable[..., Path], tmp_path: Path) -> None:
        roster = write_roster()
        args = ["league", str(roster), "--seed", "7", "--json", *_no_config(tmp_path)]
        first = runner.invoke(app, args)
        second = runner.invoke(app, args)
        assert first.exit_code == 0, first.output
        data = json.loads(first.output)
        assert [p["player_id"] for p in data["pitchers"]] == [201, 204, 207]
        assert len(data["pitchers"][0]["tunnel_pairs"]) == 6
        assert "FF-SL" in data["league_averages"]["pair_averages"]
        assert first.output == second.output

    def test_roster_from_env(
        self, write_roster: Callable[..., Path], tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PTM__MATRIX__ROSTER_FILE", str(write_roster()))
        monkeypatch.setenv("PTM__MATRIX__SEED", "3")
        result = runner.invoke(app, ["league", "--json", *_no_config(tmp_path)])
        assert result.exit_code == 0, result.output
        assert len(json.loads(result.output)["pitchers"]) == 3

    def test_missing_roster(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["league", str(tmp_path / "nope.yaml"), *_no_config(tmp_path)])
        assert result.exit_code == 1


class TestPitcherCommand:
    def test_shows_pair_matrix(self, write_roster: Callable[..., Path], tmp_path: Path) -> None:
        result = runner.invoke(app, ["pitcher", "207", str(write_roster()), "--seed", "1", *_no_config(tmp_path)])
        assert result.exit_code == 0, result.output
        assert "Caleb Rowan" in result.output
        assert "Overall" in result.output

    def test_unknown_player(self, write_roster: Callable[..., Path], tmp_path: Path) -> None:
        result = runner.invoke(app, ["pitcher", "999", str(write_roster()), *_no_config(tmp_path)])
        assert result.exit_code == 1

    def test_rejected_arsenal(self, write_roster: Callable[..., Path], tmp_path: Path) -> None:
        roster = write_roster(
            "pitchers:\n"
            "  - {player_id: 1, name: Bad Arm, role: RP, pitch_types: [FF, ZZ], skill_level: 0.5}\n"
        )
        result = runner.invoke(app, ["pitcher", "1", str(roster), *_no_config(tmp_path)])
        assert result.exit_code == 1
