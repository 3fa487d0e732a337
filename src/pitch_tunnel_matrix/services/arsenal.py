import logging
import statistics

from pitch_tunnel_matrix.domain.errors import ArsenalRejection, InvalidArsenalError, TunnelError
from pitch_tunnel_matrix.domain.grade import tunnel_grade
from pitch_tunnel_matrix.domain.numeric import clamp, round_score
from pitch_tunnel_matrix.domain.pitch_type import PitchType, parse_pitch_type
from pitch_tunnel_matrix.domain.result import Err, Ok, Result
from pitch_tunnel_matrix.domain.tunnel import ArsenalSpec, PitcherArsenalProfile, TunnelPairScore
from pitch_tunnel_matrix.services.noise import TunnelNoise
from pitch_tunnel_matrix.services.pair_score import compute_pair_score

logger = logging.getLogger(__name__)

MIN_ARSENAL_SIZE = 2


def estimate_league_percentile(overall_tunnel_score: int, skill_level: float) -> int:
    """Approximate percentile from the pitcher's own score and skill, not a population rank."""
    return int(clamp(round_score(overall_tunnel_score * 1.05 + skill_level * 10 - 5), 1, 99))


def sort_pairs(pairs: list[TunnelPairScore]) -> list[TunnelPairScore]:
    """Best tunnel first; equal scores fall back to the pair key so ordering is stable."""
    return sorted(pairs, key=lambda p: (-p.tunnel_score, p.key))


def _validate_pitch_types(spec: ArsenalSpec) -> tuple[PitchType, ...]:
    pitch_types = tuple(parse_pitch_type(tag) for tag in spec.pitch_types)
    seen: set[PitchType] = set()
    for pt in pitch_types:
        if pt in seen:
            msg = f"Duplicate pitch type {pt} in arsenal of player {spec.player_id}"
            raise InvalidArsenalError(msg)
        seen.add(pt)
    return pitch_types


def build_arsenal_profile(spec: ArsenalSpec, noise: TunnelNoise) -> PitcherArsenalProfile:
    """Score every pitch pair in a pitcher's arsenal and summarize the matrix.

    An arsenal with fewer than two pitch types is a valid input and produces a
    degenerate profile with no pairs and no overall score.

    Raises:
        UnknownPitchTypeError: If a pitch tag is not in the catalog.
        InvalidArsenalError: If a pitch type is listed twice.
    """
    pitch_types = _validate_pitch_types(spec)

    if len(pitch_types) < MIN_ARSENAL_SIZE:
        logger.debug("Player %d has %d pitch type(s); no pairs to score", spec.player_id, len(pitch_types))
        return PitcherArsenalProfile(
            player_id=spec.player_id,
            name=spec.name,
            team=spec.team,
            role=spec.role,
            pitch_types=pitch_types,
            skill_level=spec.skill_level,
            tunnel_pairs=(),
            best_pair=None,
            worst_pair=None,
            overall_tunnel_score=None,
            overall_grade=None,
            league_percentile=None,
        )

    pairs: list[TunnelPairScore] = []
    for i in range(len(pitch_types)):
        for j in range(i + 1, len(pitch_types)):
            pairs.append(compute_pair_score(pitch_types[i], pitch_types[j], spec.skill_level, noise, spec.player_id))

    ranked = sort_pairs(pairs)
    overall = round_score(statistics.fmean(p.tunnel_score for p in ranked))
    logger.debug("Scored %d pairs for player %d (overall %d)", len(ranked), spec.player_id, overall)

    return PitcherArsenalProfile(
        player_id=spec.player_id,
        name=spec.name,
        team=spec.team,
        role=spec.role,
        pitch_types=pitch_types,
        skill_level=spec.skill_level,
        tunnel_pairs=tuple(ranked),
        best_pair=ranked[0],
        worst_pair=ranked[-1],
        overall_tunnel_score=overall,
        overall_grade=tunnel_grade(overall),
        league_percentile=estimate_league_percentile(overall, spec.skill_level),
    )


def try_build_profile(spec: ArsenalSpec, noise: TunnelNoise) -> Result[PitcherArsenalProfile, ArsenalRejection]:
    try:
        return Ok(build_arsenal_profile(spec, noise))
    except TunnelError as e:
        logger.debug("Rejected arsenal for player %d: %s", spec.player_id, e)
        return Err(ArsenalRejection(player_id=spec.player_id, name=spec.name, message=str(e)))
