"""Seeded randomness for terrain and spawning.

Every value is ``xxh64(seed, domain, key, salt)`` mapped onto the wanted
range, so a match rebuilt from the same seed gets the same hills, the same
spawn columns and the same headings no matter in which order they are asked
for.
"""

from __future__ import annotations

import math
import struct

import xxhash

from worms.core.enums import Domain

_PACK = struct.Struct("<qiqi")
# Top 53 bits, so the quotient is exactly representable and stays below 1.0
_SPAN = float(1 << 53)


class DeterministicRNG:
    """Pure function of (seed, domain, key, salt); holds no cursor."""

    __slots__ = ("_seed",)

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def next_float(self, domain: Domain, key: int, salt: int) -> float:
        """Uniform in [0.0, 1.0)."""
        digest = xxhash.xxh64_intdigest(_PACK.pack(self._seed, domain.value, key, salt))
        return (digest >> 11) / _SPAN

    def next_int(self, domain: Domain, key: int, salt: int, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends included."""
        return min(high, low + int(self.next_float(domain, key, salt) * (high - low + 1)))

    def next_uniform(self, domain: Domain, key: int, salt: int, low: float, high: float) -> float:
        return low + self.next_float(domain, key, salt) * (high - low)

    def next_heading(self, domain: Domain, key: int, salt: int) -> float:
        """A direction in [0, 2*pi)."""
        return self.next_float(domain, key, salt) * 2.0 * math.pi
