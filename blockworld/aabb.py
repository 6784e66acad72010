"""Axis-aligned bounding boxes."""

from __future__ import annotations

from .vectors import Vector3


class AABB:
    """A box given by its minimum and maximum corners."""

    __slots__ = ("_vmin", "_vmax")

    def __init__(
        self,
        pos: Vector3 = Vector3(),
        size: Vector3 = Vector3(1.0, 1.0, 1.0),
    ) -> None:
        self._vmin = pos
        self._vmax = pos + size

    def __repr__(self) -> str:
        return f"AABB(vmin={self._vmin!r}, vmax={self._vmax!r})"

    @property
    def vmin(self) -> Vector3:
        return self._vmin

    @property
    def vmax(self) -> Vector3:
        return self._vmax

    def is_colliding(self, other: AABB) -> bool:
        """True if the interiors of the two boxes overlap."""
        return (
            self._vmin.x < other._vmax.x
            and self._vmax.x > other._vmin.x
            and self._vmin.y < other._vmax.y
            and self._vmax.y > other._vmin.y
            and self._vmin.z < other._vmax.z
            and self._vmax.z > other._vmin.z
        )

    def set_position(self, pos: Vector3) -> None:
        """Move the box so its minimum corner is at `pos`, keeping its size."""
        self._vmax = self._vmax + (pos - self._vmin)
        self._vmin = pos

    def set_size(self, size: Vector3) -> None:
        """Resize the box, keeping its minimum corner."""
        self._vmax = self._vmin + size

    def vertex_p(self, normal: Vector3) -> Vector3:
        """The corner furthest along `normal`."""
        return Vector3(
            self._vmax.x if normal.x > 0.0 else self._vmin.x,
            self._vmax.y if normal.y > 0.0 else self._vmin.y,
            self._vmax.z if normal.z > 0.0 else self._vmin.z,
        )

    def vertex_n(self, normal: Vector3) -> Vector3:
        """The corner used as the negative vertex; this is always the minimum corner."""
        return self._vmin