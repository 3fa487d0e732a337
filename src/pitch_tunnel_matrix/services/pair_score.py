import math

from pitch_tunnel_matrix.domain.grade import tunnel_grade
from pitch_tunnel_matrix.domain.numeric import clamp, round_half_up, round_score
from pitch_tunnel_matrix.domain.pitch_type import PitchType, lookup_pitch_type
from pitch_tunnel_matrix.domain.tunnel import PairKey, TunnelPairScore
from pitch_tunnel_matrix.services.noise import TunnelNoise

RELEASE_WEIGHT = 0.40
MOVEMENT_WEIGHT = 0.35
VELO_WEIGHT = 0.25

# Noise half-widths, each multiplied by the pitcher's variance.
RELEASE_NOISE = 6.0
MOVEMENT_NOISE = 5.0
VELO_NOISE = 2.0
COMPOSITE_NOISE = 4.0

OPTIMAL_VELO_GAP = 10.0  # mph
MAX_VELO_GAP = 20.0


def pitcher_variance(skill_level: float) -> float:
    """Better pitchers repeat their release and shape, so their scores vary less."""
    return 1 - skill_level * 0.3


def velo_optimality(velo_gap: float) -> float:
    """How well a velocity gap disrupts timing: 1.0 at 10 mph, falling off linearly."""
    return 1 - abs(clamp(velo_gap, 0, MAX_VELO_GAP) - OPTIMAL_VELO_GAP) / 15


def skill_adjustment(skill_level: float) -> float:
    return skill_level * 15 - 5


def compute_pair_score(
    pitch_a: PitchType | str,
    pitch_b: PitchType | str,
    skill_level: float,
    noise: TunnelNoise,
    player_id: int = 0,
) -> TunnelPairScore:
    """Score how well two pitch types tunnel for a pitcher of the given skill.

    The pair is canonicalized before any noise is drawn, so (A, B) and (B, A) produce
    the same score for the same seed and player.

    Args:
        pitch_a: First pitch type tag.
        pitch_b: Second pitch type tag; must differ from ``pitch_a``.
        skill_level: Pitcher tunneling skill in [0, 1].
        noise: Noise source; its stream is keyed by ``player_id`` and the pair.
        player_id: Pitcher the score is computed for.

    Returns:
        The pair score with every component clamped to its documented range.

    Raises:
        UnknownPitchTypeError: If either tag is not in the catalog.
    """
    key = PairKey.of(pitch_a, pitch_b)
    a = lookup_pitch_type(key.first)
    b = lookup_pitch_type(key.second)
    variance = pitcher_variance(skill_level)
    stream = noise.stream(player_id, key)

    release_gap = abs(a.release_height - b.release_height)
    release_similarity = int(
        clamp(round_score(100 - release_gap * 80 + stream.spread(RELEASE_NOISE) * variance), 10, 99)
    )

    movement_gap = math.hypot(a.vertical_break - b.vertical_break, a.horizontal_break - b.horizontal_break)
    movement_divergence = int(
        clamp(round_score(movement_gap * 3.2 + stream.spread(MOVEMENT_NOISE) * variance), 5, 99)
    )

    velo_differential = round_half_up(abs(a.avg_velocity - b.avg_velocity), 1)
    perceived_gap = velo_differential + round_half_up(stream.spread(VELO_NOISE) * variance, 1)

    raw_score = (
        release_similarity * RELEASE_WEIGHT
        + movement_divergence * MOVEMENT_WEIGHT
        + velo_optimality(perceived_gap) * 100 * VELO_WEIGHT
    )
    tunnel_score = int(
        clamp(
            round_score(raw_score + stream.spread(COMPOSITE_NOISE) * variance + skill_adjustment(skill_level)),
            10,
            98,
        )
    )

    return TunnelPairScore(
        pitch_a=key.first,
        pitch_b=key.second,
        release_similarity=release_similarity,
        movement_divergence=movement_divergence,
        velo_differential=velo_differential,
        tunnel_score=tunnel_score,
        whiff_rate_delta=round_half_up(tunnel_score / 100 * 12, 1),
        grade=tunnel_grade(tunnel_score),
    )
