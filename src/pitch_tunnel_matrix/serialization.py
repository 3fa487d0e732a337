"""Plain-data rendering of tunnel matrices for downstream reporting.

Pair keys become ``"CH-FF"`` strings and enums become their tag values, so the
output can go straight to ``json.dumps``.

Usage:
    matrix = build_league_matrix(specs, TunnelNoise(seed=7))
    payload = matrix_to_json(matrix)
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from pitch_tunnel_matrix.domain.tunnel import (
    LeagueTunnelAverages,
    PitcherArsenalProfile,
    TunnelMatrix,
    TunnelPairScore,
)


def pair_to_dict(pair: TunnelPairScore) -> dict[str, Any]:
    data = asdict(pair)
    data["pitch_a"] = pair.pitch_a.value
    data["pitch_b"] = pair.pitch_b.value
    data["key"] = str(pair.key)
    return data


def profile_to_dict(profile: PitcherArsenalProfile) -> dict[str, Any]:
    return {
        "player_id": profile.player_id,
        "name": profile.name,
        "team": profile.team,
        "role": profile.role.value,
        "pitch_types": [pt.value for pt in profile.pitch_types],
        "skill_level": profile.skill_level,
        "tunnel_pairs": [pair_to_dict(p) for p in profile.tunnel_pairs],
        "best_pair": pair_to_dict(profile.best_pair) if profile.best_pair is not None else None,
        "worst_pair": pair_to_dict(profile.worst_pair) if profile.worst_pair is not None else None,
        "overall_tunnel_score": profile.overall_tunnel_score,
        "overall_grade": profile.overall_grade,
        "league_percentile": profile.league_percentile,
    }


def averages_to_dict(averages: LeagueTunnelAverages) -> dict[str, Any]:
    return {
        "pair_averages": {str(key): value for key, value in averages.pair_averages.items()},
        "overall_avg": averages.overall_avg,
    }


def matrix_to_dict(matrix: TunnelMatrix) -> dict[str, Any]:
    return {
        "pitchers": [profile_to_dict(p) for p in matrix.pitchers],
        "league_averages": averages_to_dict(matrix.league_averages),
        "rejected": [asdict(r) for r in matrix.rejected],
    }


def matrix_to_json(matrix: TunnelMatrix, indent: int | None = 2) -> str:
    return json.dumps(matrix_to_dict(matrix), indent=indent)
