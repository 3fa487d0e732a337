from pathlib import Path
from typing import Any

import yaml

from pitch_tunnel_matrix.domain.errors import InvalidArsenalError, RosterConfigError
from pitch_tunnel_matrix.domain.tunnel import ArsenalSpec, PitcherRole


def _require_field(raw: dict[str, Any], field: str, context: str) -> Any:
    if field not in raw:
        raise RosterConfigError(f"{context}: missing required field '{field}'")
    return raw[field]


def parse_arsenal(raw: dict[str, Any], index: int) -> ArsenalSpec:
    """Parse one roster entry. Pitch tags are left for the builder to validate."""
    context = f"Pitcher #{index + 1}"
    if not isinstance(raw, dict):
        raise RosterConfigError(f"{context}: expected a mapping, got {type(raw).__name__}")

    raw_id = _require_field(raw, "player_id", context)
    try:
        player_id = int(raw_id)
    except (TypeError, ValueError):
        raise RosterConfigError(f"{context}: invalid player_id {raw_id!r}") from None
    context = f"Pitcher {player_id}"

    raw_role = _require_field(raw, "role", context)
    try:
        role = PitcherRole(str(raw_role).upper())
    except ValueError:
        raise RosterConfigError(f"{context}: invalid role '{raw_role}'") from None

    raw_pitches = _require_field(raw, "pitch_types", context)
    if not isinstance(raw_pitches, list):
        raise RosterConfigError(f"{context}: pitch_types must be a list")

    raw_skill = _require_field(raw, "skill_level", context)
    try:
        skill_level = float(raw_skill)
    except (TypeError, ValueError):
        raise RosterConfigError(f"{context}: invalid skill_level {raw_skill!r}") from None

    try:
        return ArsenalSpec(
            player_id=player_id,
            name=str(_require_field(raw, "name", context)),
            team=str(raw.get("team", "")),
            role=role,
            pitch_types=tuple(str(p) for p in raw_pitches),
            skill_level=skill_level,
        )
    except InvalidArsenalError as e:
        raise RosterConfigError(f"{context}: {e}") from e


def parse_roster(data: Any) -> list[ArsenalSpec]:
    if not isinstance(data, dict) or "pitchers" not in data:
        raise RosterConfigError("Roster must have a top-level 'pitchers' list")
    pitchers = data["pitchers"]
    if not isinstance(pitchers, list):
        raise RosterConfigError("'pitchers' must be a list")

    specs = [parse_arsenal(raw, i) for i, raw in enumerate(pitchers)]
    ids = [s.player_id for s in specs]
    if len(ids) != len(set(ids)):
        raise RosterConfigError("Roster has duplicate player_id values")
    return specs


def load_roster(path: Path) -> list[ArsenalSpec]:
    if not path.exists():
        raise RosterConfigError(f"Roster file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise RosterConfigError(f"Could not parse {path}: {e}") from e
    return parse_roster(data)
