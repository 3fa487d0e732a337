import logging
from collections import defaultdict
from collections.abc import Sequence
from concurrent.futures import ProcessPoolExecutor
from functools import partial

from pitch_tunnel_matrix.domain.errors import ArsenalRejection
from pitch_tunnel_matrix.domain.numeric import clamp, round_score
from pitch_tunnel_matrix.domain.result import Result, partition_results
from pitch_tunnel_matrix.domain.tunnel import (
    NEUTRAL_LEAGUE_AVERAGE,
    ArsenalSpec,
    LeagueTunnelAverages,
    PairKey,
    PitcherArsenalProfile,
    TunnelMatrix,
    TunnelPairScore,
)
from pitch_tunnel_matrix.services.arsenal import try_build_profile
from pitch_tunnel_matrix.services.noise import TunnelNoise

logger = logging.getLogger(__name__)


def compute_league_averages(profiles: Sequence[PitcherArsenalProfile]) -> LeagueTunnelAverages:
    """Average tunnel scores per pitch pair and over every pair score in the league.

    The overall average weights each pair score equally, so pitchers with deeper
    arsenals contribute more pairs than pitchers with two or three pitches.
    """
    totals: dict[PairKey, int] = defaultdict(int)
    counts: dict[PairKey, int] = defaultdict(int)

    for profile in profiles:
        for pair in profile.tunnel_pairs:
            totals[pair.key] += pair.tunnel_score
            counts[pair.key] += 1

    if not counts:
        logger.debug("No pair scores across %d pitcher(s); using neutral league average", len(profiles))
        return LeagueTunnelAverages(pair_averages={}, overall_avg=NEUTRAL_LEAGUE_AVERAGE)

    pair_averages = {key: round_score(totals[key] / counts[key]) for key in sorted(totals)}
    overall_avg = round_score(sum(totals.values()) / sum(counts.values()))
    return LeagueTunnelAverages(pair_averages=pair_averages, overall_avg=overall_avg)


def build_league_matrix(
    specs: Sequence[ArsenalSpec],
    noise: TunnelNoise,
    max_workers: int | None = 1,
) -> TunnelMatrix:
    """Build every pitcher's profile, then reduce them into league averages.

    Profiles are independent, so when ``max_workers != 1`` and there is more than one
    arsenal they are built in a process pool. Arsenals that fail validation are
    reported in ``TunnelMatrix.rejected`` and left out of the averages.
    """
    build = partial(try_build_profile, noise=noise)
    results: list[Result[PitcherArsenalProfile, ArsenalRejection]]
    if len(specs) > 1 and max_workers != 1:
        with ProcessPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(build, specs))
    else:
        results = [build(spec) for spec in specs]

    profiles, rejected = partition_results(results)
    if rejected:
        logger.info("Rejected %d of %d arsenal(s)", len(rejected), len(specs))

    averages = compute_league_averages(profiles)
    logger.debug("Built league matrix: %d pitchers, %d pair keys", len(profiles), len(averages.pair_averages))
    return TunnelMatrix(pitchers=tuple(profiles), league_averages=averages, rejected=tuple(rejected))


def population_percentile(profile: PitcherArsenalProfile, profiles: Sequence[PitcherArsenalProfile]) -> int | None:
    """Rank-based percentile of a pitcher's overall score within ``profiles``.

    Returns the share of scored pitchers at or below this pitcher's score, clamped to
    [1, 99], or None when the pitcher has no overall score.
    """
    if profile.overall_tunnel_score is None:
        return None
    scores = [p.overall_tunnel_score for p in profiles if p.overall_tunnel_score is not None]
    if not scores:
        return None
    at_or_below = sum(1 for s in scores if s <= profile.overall_tunnel_score)
    return int(clamp(round_score(at_or_below / len(scores) * 100), 1, 99))


def pair_delta(pair: TunnelPairScore, averages: LeagueTunnelAverages) -> int | None:
    league_avg = averages.pair_averages.get(pair.key)
    if league_avg is None:
        return None
    return pair.tunnel_score - league_avg
