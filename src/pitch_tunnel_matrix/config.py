from __future__ import annotations

from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from pitch_tunnel_matrix.domain.errors import TunnelError

_DEFAULTS: dict[str, object] = {
    "matrix": {
        "seed": "",
        "max_workers": 1,
        "roster_file": "roster.yaml",
    },
}


class SettingsError(TunnelError):
    """Raised when a configuration value cannot be interpreted."""


@dataclass(frozen=True)
class MatrixSettings:
    seed: int | None
    max_workers: int
    roster_file: str


def create_config(
    yaml_path: str = "tunnel.yaml",
    env_prefix: str = "PTM",
    defaults: dict[str, object] | None = None,
    *,
    seed: int | None = None,
    max_workers: int | None = None,
    roster_file: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables (``PTM__MATRIX__SEED=7``).
        defaults: Default configuration values.
        seed: Override the noise seed.
        max_workers: Override the number of worker processes.
        roster_file: Override the roster file path.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]

    overrides = _build_overrides(seed, max_workers, roster_file)
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _build_overrides(seed: int | None, max_workers: int | None, roster_file: str | None) -> dict[str, object]:
    matrix: dict[str, object] = {}
    if seed is not None:
        matrix["seed"] = seed
    if max_workers is not None:
        matrix["max_workers"] = max_workers
    if roster_file is not None:
        matrix["roster_file"] = roster_file
    return {"matrix": matrix} if matrix else {}


def _parse_seed(raw: object) -> int | None:
    text = str(raw).strip()
    if not text or text.lower() == "none":
        return None
    try:
        return int(text)
    except ValueError:
        raise SettingsError(f"matrix.seed must be an integer, got {raw!r}") from None


def load_matrix_settings(cfg: ConfigurationSet | None = None) -> MatrixSettings:
    if cfg is None:
        cfg = create_config()
    try:
        max_workers = int(str(cfg["matrix.max_workers"]))
    except ValueError:
        raise SettingsError(f"matrix.max_workers must be an integer, got {cfg['matrix.max_workers']!r}") from None
    if max_workers < 1:
        raise SettingsError(f"matrix.max_workers must be >= 1, got {max_workers}")
    return MatrixSettings(
        seed=_parse_seed(cfg["matrix.seed"]),
        max_workers=max_workers,
        roster_file=str(cfg["matrix.roster_file"]),
    )
