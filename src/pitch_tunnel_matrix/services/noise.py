"""Seedable noise streams for tunnel scoring.

Every pitch pair of every pitcher draws from its own stream, derived from
``(seed, player_id, pair)``. Streams never share state, so profiles can be built in
any order or in parallel and still come out identical for a fixed seed.

Usage:
    noise = TunnelNoise(seed=7)
    stream = noise.stream(player_id=201, key=PairKey.of("FF", "SL"))
    jitter = stream.spread(6.0) * variance
"""

from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pitch_tunnel_matrix.domain.tunnel import PairKey


class NoiseStream:
    """Symmetric uniform draws for a single pitch pair."""

    def __init__(self, rng: random.Random, scale: float) -> None:
        self._rng = rng
        self._scale = scale

    def spread(self, half_width: float) -> float:
        """Draw from U(-half_width, half_width), scaled by the owning TunnelNoise."""
        draw = self._rng.uniform(-half_width, half_width)
        return draw * self._scale


@dataclass(frozen=True)
class TunnelNoise:
    seed: int | None = None
    scale: float = 1.0

    def __post_init__(self) -> None:
        if self.scale < 0:
            msg = "scale must be non-negative"
            raise ValueError(msg)

    @classmethod
    def disabled(cls) -> TunnelNoise:
        """A noise source that always draws zero."""
        return cls(seed=0, scale=0.0)

    def stream(self, player_id: int, key: PairKey) -> NoiseStream:
        if self.seed is None:
            return NoiseStream(random.Random(), self.scale)
        return NoiseStream(random.Random(_derive_seed(self.seed, player_id, key)), self.scale)


def _derive_seed(seed: int, player_id: int, key: PairKey) -> int:
    # hash() is salted per process for str, so derive a stable integer explicitly.
    digest = hashlib.blake2b(f"{seed}:{player_id}:{key}".encode(), digest_size=8).digest()
    return int.from_bytes(digest, "big")
