"""View frustum culling from a combined view-projection matrix."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from .aabb import AABB
from .vectors import Vector3, dot_product, length


class FrustumPlaneID(IntEnum):
    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3
    NEAR = 4
    FAR = 5


@dataclass(frozen=True)
class FrustumPlane:
    """A plane `dot(normal, p) + distance = 0`; the inside is where it is >= 0."""

    normal: Vector3 = Vector3(0.0, 0.0, 0.0)
    distance: float = 0.0


# For each plane: the column combined with column 3, and its sign.
_PLANE_SOURCES = {
    FrustumPlaneID.LEFT: (0, 1.0),
    FrustumPlaneID.RIGHT: (0, -1.0),
    FrustumPlaneID.TOP: (1, -1.0),
    FrustumPlaneID.BOTTOM: (1, 1.0),
    FrustumPlaneID.NEAR: (2, 1.0),
    FrustumPlaneID.FAR: (2, -1.0),
}


class Frustum:
    """Six planes extracted from a row-major 4x4 view-projection matrix."""

    def __init__(self) -> None:
        self.planes: list[FrustumPlane] = [FrustumPlane() for _ in FrustumPlaneID]

    def update(self, view_proj: Sequence[Sequence[float]]) -> None:
        """Recompute the planes from a 4x4 matrix indexed as `m[row][column]`."""
        rows = [list(row) for row in view_proj]
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("view-projection matrix must be 4x4")

        planes = []
        for plane_id in FrustumPlaneID:
            column, sign = _PLANE_SOURCES[plane_id]
            normal = Vector3(*(rows[r][3] + sign * rows[r][column] for r in range(3)))
            distance = rows[3][3] + sign * rows[3][column]
            size = length(normal)
            planes.append(FrustumPlane(normal / size, distance / size))
        self.planes = planes

    def is_point_in_frustum(self, pt: Vector3) -> bool:
        return all(dot_product(p.normal, pt) + p.distance >= 0 for p in self.planes)

    def is_sphere_in_frustum(self, pt: Vector3, radius: float) -> bool:
        return all(
            dot_product(p.normal, pt) + p.distance + radius >= 0 for p in self.planes
        )

    def is_box_in_frustum(self, box: AABB) -> bool:
        """True unless the box lies wholly outside some plane."""
        return all(
            dot_product(p.normal, box.vertex_p(p.normal)) + p.distance >= 0
            for p in self.planes
        )