from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from config import ConfigurationSet

from pitch_tunnel_matrix.config import SettingsError, create_config, load_matrix_settings

if TYPE_CHECKING:
    from pathlib import Path


def test_create_config_returns_defaults() -> None:
    cfg = create_config(yaml_path="/nonexistent/tunnel.yaml")
    assert isinstance(cfg, ConfigurationSet)
    settings = load_matrix_settings(cfg)
    assert settings.seed is None
    assert settings.max_workers == 1
    assert settings.roster_file == "roster.yaml"


def test_yaml_overrides_defaults(tmp_path: Path) -> None:
    yaml_file = tmp_path / "tunnel.yaml"
    yaml_file.write_text("matrix:\n" "  seed: 42\n" "  roster_file: staff.yaml\n")
    settings = load_matrix_settings(create_config(yaml_path=str(yaml_file)))
    assert settings.seed == 42
    assert settings.roster_file == "staff.yaml"
    # Defaults still apply for unset keys
    assert settings.max_workers == 1


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    yaml_file = tmp_path / "tunnel.yaml"
    yaml_file.write_text("matrix:\n  seed: 42\n")
    monkeypatch.setenv("PTM__MATRIX__SEED", "7")
    monkeypatch.setenv("PTM__MATRIX__MAX_WORKERS", "4")
    settings = load_matrix_settings(create_config(yaml_path=str(yaml_file)))
    assert settings.seed == 7
    assert settings.max_workers == 4


def test_explicit_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PTM__MATRIX__SEED", "7")
    cfg = create_config(yaml_path="/nonexistent/tunnel.yaml", seed=99, max_workers=2, roster_file="x.yaml")
    settings = load_matrix_settings(cfg)
    assert settings.seed == 99
    assert settings.max_workers == 2
    assert settings.roster_file == "x.yaml"


def test_invalid_seed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PTM__MATRIX__SEED", "abc")
    with pytest.raises(SettingsError, match="matrix.seed"):
        load_matrix_settings(create_config(yaml_path="/nonexistent/tunnel.yaml"))


def test_workers_must_be_positive() -> None:
    cfg = create_config(yaml_path="/nonexistent/tunnel.yaml", max_workers=0)
    with pytest.raises(SettingsError, match="max_workers"):
        load_matrix_settings(cfg)
