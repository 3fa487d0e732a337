from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from pitch_tunnel_matrix.domain.errors import ArsenalRejection, InvalidArsenalError
from pitch_tunnel_matrix.domain.pitch_type import PitchType, parse_pitch_type

NEUTRAL_LEAGUE_AVERAGE = 50


class PitcherRole(StrEnum):
    STARTER = "SP"
    RELIEVER = "RP"
    CLOSER = "CL"


@dataclass(frozen=True, order=True)
class PairKey:
    """An unordered pitch-type pair, stored with its tags in lexicographic order."""

    first: PitchType
    second: PitchType

    def __post_init__(self) -> None:
        if self.first == self.second:
            msg = f"A pair needs two distinct pitch types, got {self.first}-{self.second}"
            raise ValueError(msg)
        if self.first.value > self.second.value:
            msg = f"PairKey must be canonical; use PairKey.of({self.first}, {self.second})"
            raise ValueError(msg)

    @classmethod
    def of(cls, a: PitchType | str, b: PitchType | str) -> PairKey:
        pa, pb = parse_pitch_type(a), parse_pitch_type(b)
        if pa.value > pb.value:
            pa, pb = pb, pa
        return cls(pa, pb)

    @classmethod
    def parse(cls, raw: str) -> PairKey:
        """Parse ``"FF-SL"`` (either order) into a canonical key."""
        parts = raw.split("-")
        if len(parts) != 2:
            msg = f"Invalid pair key: {raw!r} (expected A-B)"
            raise ValueError(msg)
        return cls.of(parts[0], parts[1])

    def __str__(self) -> str:
        return f"{self.first}-{self.second}"


@dataclass(frozen=True)
class TunnelPairScore:
    pitch_a: PitchType
    pitch_b: PitchType
    release_similarity: int  # 10-99
    movement_divergence: int  # 5-99
    velo_differential: float  # mph
    tunnel_score: int  # 10-98
    whiff_rate_delta: float  # whiff-rate points gained when paired
    grade: str

    @property
    def key(self) -> PairKey:
        return PairKey.of(self.pitch_a, self.pitch_b)


@dataclass(frozen=True)
class ArsenalSpec:
    player_id: int
    name: str
    team: str
    role: PitcherRole
    pitch_types: tuple[PitchType | str, ...]
    skill_level: float  # 0-1, higher = better tunneling

    def __post_init__(self) -> None:
        if not 0.0 <= self.skill_level <= 1.0:
            msg = f"skill_level for player {self.player_id} must be within [0, 1], got {self.skill_level}"
            raise InvalidArsenalError(msg)


@dataclass(frozen=True)
class PitcherArsenalProfile:
    player_id: int
    name: str
    team: str
    role: PitcherRole
    pitch_types: tuple[PitchType, ...]
    skill_level: float
    tunnel_pairs: tuple[TunnelPairScore, ...]
    best_pair: TunnelPairScore | None
    worst_pair: TunnelPairScore | None
    overall_tunnel_score: int | None
    overall_grade: str | None
    # Formula-based estimate from the pitcher's own score, not a rank in the population.
    league_percentile: int | None

    @property
    def is_degenerate(self) -> bool:
        """True when the arsenal has fewer than two pitch types and so no pairs."""
        return not self.tunnel_pairs

    def pair(self, a: PitchType | str, b: PitchType | str) -> TunnelPairScore | None:
        key = PairKey.of(a, b)
        for pair in self.tunnel_pairs:
            if pair.key == key:
                return pair
        return None


@dataclass(frozen=True)
class LeagueTunnelAverages:
    pair_averages: dict[PairKey, int] = field(default_factory=dict)
    overall_avg: int = NEUTRAL_LEAGUE_AVERAGE

    def pair_average(self, a: PitchType | str, b: PitchType | str) -> int | None:
        """League mean for a pair, or None when no pitcher in the league throws it."""
        return self.pair_averages.get(PairKey.of(a, b))


@dataclass(frozen=True)
class TunnelMatrix:
    pitchers: tuple[PitcherArsenalProfile, ...]
    league_averages: LeagueTunnelAverages
    rejected: tuple[ArsenalRejection, ...] = ()

    def pitcher(self, player_id: int) -> PitcherArsenalProfile | None:
        for profile in self.pitchers:
            if profile.player_id == player_id:
                return profile
        return None
