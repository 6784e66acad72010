"""Seedable integer random numbers from a 32-bit Mersenne Twister."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


class _MersenneTwister:
    """MT19937 with the standard single-integer seeding."""

    _N = 624
    _M = 397

    def __init__(self, seed: int) -> None:
        self._state: list[int] = []
        self._index = self._N
        self.seed(seed)

    def seed(self, value: int) -> None:
        state = [value & _MASK32]
        for i in range(1, self._N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._state = state
        self._index = self._N

    def _twist(self) -> None:
        state = self._state
        n, m = self._N, self._M
        for i in range(n):
            y = (state[i] & 0x80000000) | (state[(i + 1) % n] & 0x7FFFFFFF)
            value = state[(i + m) % n] ^ (y >> 1)
            if y & 1:
                value ^= 0x9908B0DF
            state[i] = value
        self._index = 0

    def next_u32(self) -> int:
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


class Random:
    """Uniform integers in closed ranges, reproducible from a seed."""

    def __init__(self, seed: int = 0) -> None:
        self._engine = _MersenneTwister(seed)
        for i in range(5):
            self.int_in_range(i, i * 5)

    def set_seed(self, seed: int) -> None:
        """Reset the generator to the state given by `seed`."""
        self._engine.seed(seed)

    def int_in_range(self, start: int, end: int) -> int:
        """A uniform integer in the closed range [start, end]."""
        if start > end:
            raise ValueError(f"empty range: start {start} is greater than end {end}")
        span = end - start
        if span >= _MASK32:
            # Full 32-bit range: the raw draw with its sign bit flipped.
            return _to_int32(self._engine.next_u32() ^ 0x80000000) + (start + (1 << 31))
        count = span + 1
        while True:
            draw = 0
            mask = 0
            while mask < count - 1:
                draw = self._engine.next_u32()
                mask = _MASK32
            if draw // count < mask // count or mask % count == count - 1:
                return start + draw % count