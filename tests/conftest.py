"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

ROSTER_YAML = """\
pitchers:
  - player_id: 201
    name: Marcus Stroud
    team: NYM
    role: SP
    pitch_types: [FF, SL, CH, CB]
    skill_level: 0.85
  - player_id: 204
    name: Ryne Kessler
    team: NYM
    role: RP
    pitch_types: [FF, SL, SP]
    skill_level: 0.90
  - player_id: 207
    name: Caleb Rowan
    team: NYM
    role: CL
    pitch_types: [SI, SL, CH]
    skill_level: 0.65
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all PTM__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("PTM__"):
            monkeypatch.delenv(key)


@pytest.fixture
def write_roster(tmp_path: Path) -> Callable[[str], Path]:
    """Write roster YAML text to a temp file and return its path."""

    def _write(text: str = ROSTER_YAML) -> Path:
        path = tmp_path / "roster.yaml"
        path.write_text(text)
        return path

    return _write
