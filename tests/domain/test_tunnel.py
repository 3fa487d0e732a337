import pytest

from pitch_tunnel_matrix.domain.errors import InvalidArsenalError
from pitch_tunnel_matrix.domain.pitch_type import PitchType
from pitch_tunnel_matrix.domain.tunnel import (
    NEUTRAL_LEAGUE_AVERAGE,
    ArsenalSpec,
    LeagueTunnelAverages,
    PairKey,
    PitcherRole,
    TunnelPairScore,
)


class TestPairKey:
    def test_of_is_order_independent(self) -> None:
        assert PairKey.of(PitchType.FOUR_SEAM, PitchType.CHANGEUP) == PairKey.of("CH", "FF")

    def test_canonical_order_is_lexicographic(self) -> None:
        key = PairKey.of("SL", "FF")
        assert key.first is PitchType.FOUR_SEAM
        assert key.second is PitchType.SLIDER
        assert str(key) == "FF-SL"

    def test_hash_matches_for_both_orders(self) -> None:
        buckets = {PairKey.of("SL", "FF"): 1}
        assert buckets[PairKey.of("FF", "SL")] == 1

    def test_parse_either_order(self) -> None:
        assert PairKey.parse("SL-FF") == PairKey.of("FF", "SL")

    def test_parse_rejects_malformed(self) -> None:
        with pytest.raises(ValueError, match="Invalid pair key"):
            PairKey.parse("FFSL")

    def test_direct_construction_must_be_canonical(self) -> None:
        with pytest.raises(ValueError, match="canonical"):
            PairKey(PitchType.SLIDER, PitchType.FOUR_SEAM)

    def test_same_pitch_twice_rejected(self) -> None:
        with pytest.raises(ValueError, match="distinct"):
            PairKey.of("FF", "FF")


class TestTunnelPairScore:
    def test_key_canonicalizes(self) -> None:
        pair = TunnelPairScore(
            pitch_a=PitchType.SLIDER,
            pitch_b=PitchType.FOUR_SEAM,
            release_similarity=90,
            movement_divergence=50,
            velo_differential=9.2,
            tunnel_score=80,
            whiff_rate_delta=9.6,
            grade="A-",
        )
        assert pair.key == PairKey.of("FF", "SL")


class TestArsenalSpec:
    def test_skill_out_of_range(self) -> None:
        with pytest.raises(InvalidArsenalError, match="skill_level"):
            ArsenalSpec(1, "A", "NYM", PitcherRole.STARTER, ("FF", "SL"), 1.5)

    def test_skill_bounds_inclusive(self) -> None:
        ArsenalSpec(1, "A", "NYM", PitcherRole.STARTER, ("FF", "SL"), 0.0)
        ArsenalSpec(1, "A", "NYM", PitcherRole.STARTER, ("FF", "SL"), 1.0)


class TestLeagueTunnelAverages:
    def test_defaults_are_neutral(self) -> None:
        averages = LeagueTunnelAverages()
        assert averages.overall_avg == NEUTRAL_LEAGUE_AVERAGE == 50
        assert averages.pair_averages == {}

    def test_missing_pair_is_none_not_zero(self) -> None:
        averages = LeagueTunnelAverages(pair_averages={PairKey.of("FF", "SL"): 72}, overall_avg=72)
        assert averages.pair_average("SL", "FF") == 72
        assert averages.pair_average("CH", "CB") is None
