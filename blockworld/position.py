"""Positions stored as a chunk-aligned origin plus a small local offset."""

from __future__ import annotations

import math
from typing import Optional

from .vectors import Vector2, Vector3

_CHUNK_MASK = ~0xF


class Position:
    """A point kept as `chunk_pos` (block space, multiple of 16) plus local `p`.

    Keeping the local part small preserves float precision far from the origin.
    """

    def __init__(self, p: Vector3 = Vector3(), chunk_pos: Optional[Vector2] = None) -> None:
        self.p = p
        if chunk_pos is None:
            self._chunk_pos = Vector2(0, 0)
            self.update()
        else:
            self._chunk_pos = chunk_pos

    def __repr__(self) -> str:
        return f"Position(p={self.p!r}, chunk_pos={self._chunk_pos!r})"

    @property
    def chunk_pos(self) -> Vector2:
        """Block-space origin of the chunk the local offset is relative to."""
        return self._chunk_pos

    def update(self) -> None:
        """Move whole chunks from the local offset into the chunk origin."""
        x, y, z = self.p
        cx, cz = self._chunk_pos

        if x > 16.0:
            n = math.floor(x) & _CHUNK_MASK
            cx += n
            x -= n
        elif x < 0.0:
            n = (math.floor(-x) + 16) & _CHUNK_MASK
            cx -= n
            x += n

        if z > 16.0:
            n = math.floor(z) & _CHUNK_MASK
            cz += n
            z -= n
        elif z < 0.0:
            n = (math.floor(-z) + 16) & _CHUNK_MASK
            cz -= n
            z += n

        self.p = Vector3(x, y, z)
        self._chunk_pos = Vector2(cx, cz)

    def world_pos(self) -> Vector3:
        """The absolute position as floats."""
        return Vector3(
            self.p.x + float(self._chunk_pos.x),
            self.p.y,
            self.p.z + float(self._chunk_pos.y),
        )

    def world_block_pos(self) -> Vector3:
        """The absolute position with the local part truncated to integers."""
        return Vector3(
            int(self.p.x) + self._chunk_pos.x,
            int(self.p.y),
            int(self.p.z) + self._chunk_pos.y,
        )