"""Seeded value noise with smooth interpolation and octave summing."""

from __future__ import annotations

import math

_MASK32 = 0xFFFFFFFF


class NoiseGenerator:
    """Deterministic 2D value noise driven by an integer seed."""

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def value(self, x: float, z: float, octaves: int, mod1: float, mod2: float) -> float:
        """Weighted mean of `octaves` samples; each octave scales coordinates by
        `mod1` and the weight by `mod2`."""
        mod = 1.0
        total = 0.0
        weight_sum = 0.0
        for _ in range(octaves):
            total += self.generate(x, z) * mod
            weight_sum += mod
            x *= mod1
            z *= mod1
            mod *= mod2
        if weight_sum == 0.0:
            return math.nan
        return total / weight_sum

    def generate(self, x: float, z: float) -> float:
        """Smoothly interpolated noise at a point."""
        sx = math.floor(x)
        sz = math.floor(z)
        fx = x - sx
        fz = z - sz
        return self._lerp(
            self._lerp(self.find_noise2(sx, sz), self.find_noise2(sx + 1.0, sz), fx),
            self._lerp(self.find_noise2(sx, sz + 1.0), self.find_noise2(sx + 1.0, sz + 1.0), fx),
            fz,
        )

    def find_noise2(self, x: float, z: float) -> float:
        """Raw lattice noise in (-1, 1] for a grid point."""
        return self._find_noise(int(x + z * 57.0))

    def _find_noise(self, n: int) -> float:
        # 32-bit wrapping integer hash; only the low 31 bits survive the mask.
        n = (n + self._seed) & _MASK32
        n = ((n << 13) ^ n) & _MASK32
        hashed = (n * (n * n * 60493 + 19990303) + 1376312589) & 0x7FFFFFFF
        return 1.0 - hashed / 1073741824.0

    @staticmethod
    def _lerp(start: float, end: float, t: float) -> float:
        return (t * t * (3 - 2 * t)) * (end - start) + start