"""Generators for simple meshes: cubes, spheres, cones and planes."""

from __future__ import annotations

import math

from .mesh import IndexedTriangleList, Vertex
from .vectors import Vector3

PI = 3.14159


def _mesh_from(positions, indices) -> IndexedTriangleList:
    return IndexedTriangleList(
        vertices=[Vertex(pos=Vector3(*p)) for p in positions],
        indices=list(indices),
    )


def cube() -> IndexedTriangleList:
    """A unit cube centred on the origin with 8 shared vertices."""
    positions = [
        (-0.5, -0.5, -0.5),
        (0.5, -0.5, -0.5),
        (-0.5, 0.5, -0.5),
        (0.5, 0.5, -0.5),
        (-0.5, -0.5, 0.5),
        (0.5, -0.5, 0.5),
        (-0.5, 0.5, 0.5),
        (0.5, 0.5, 0.5),
    ]
    indices = [
        0, 2, 1, 2, 3, 1,
        1, 3, 5, 3, 7, 5,
        2, 6, 3, 3, 6, 7,
        4, 5, 7, 4, 7, 6,
        0, 4, 2, 2, 4, 6,
        0, 1, 4, 1, 5, 4,
    ]
    return _mesh_from(positions, indices)


def cube_independent() -> IndexedTriangleList:
    """A unit cube with 4 vertices of its own per face, so faces can have
    separate normals."""
    positions = [
        (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5),
        (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (0.5, 0.5, 0.5),
        (-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5),
        (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5),
        (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5),
        (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, 0.5), (0.5, 0.5, 0.5),
    ]
    indices = [
        0, 2, 1, 2, 3, 1,
        4, 5, 7, 4, 7, 6,
        8, 10, 9, 10, 11, 9,
        12, 13, 15, 12, 15, 14,
        16, 17, 18, 18, 17, 19,
        20, 23, 21, 20, 22, 23,
    ]
    return _mesh_from(positions, indices)


def sphere(detail: int) -> IndexedTriangleList:
    """A unit sphere with `detail` latitude bands and `2 * detail` meridians."""
    if detail < 2:
        raise ValueError(f"sphere detail must be at least 2, got {detail}")
    count = detail * 2
    positions: list[tuple[float, float, float]] = [(0.0, 1.0, 0.0)]
    indices: list[int] = []

    for i in range(count - 1):
        indices += (0, i + 2, i + 1)
    indices += (0, 1, count)

    for i in range(1, detail):
        y = math.cos(i * PI / detail)
        mult = math.sin(i * PI / detail)
        for j in range(count):
            angle = j * PI / detail
            positions.append((math.cos(angle) * mult, y, math.sin(angle) * mult))
            if i < detail - 1:
                ind = 1 + (i - 1) * count + j
                if j == count - 1:
                    indices += (ind, ind + 1, ind + count, ind, ind - count + 1, ind + 1)
                else:
                    indices += (ind, ind + count + 1, ind + count, ind, ind + 1, ind + count + 1)

    positions.append((0.0, -1.0, 0.0))
    bottom = len(positions) - 1
    for i in range(count - 1):
        indices += (bottom, bottom - i - 2, bottom - i - 1)
    indices += (bottom, bottom - 1, bottom - count)

    return _mesh_from(positions, indices)


def cone(sides: int) -> IndexedTriangleList:
    """A cone with its apex at y=1 and a base of `sides` points at y=-1."""
    if sides < 1:
        raise ValueError(f"cone needs at least 1 side, got {sides}")
    positions = [(0.0, 1.0, 0.0)]
    for i in range(sides):
        angle = i * PI * 2.0 / sides
        positions.append((math.cos(angle), -1.0, math.sin(angle)))

    indices: list[int] = []
    for i in range(1, sides):
        indices += (0, i + 1, i)
    indices += (0, 1, sides)
    for i in range(2, sides):
        indices += (1, i, i + 1)

    return _mesh_from(positions, indices)


def plane(divisions: int) -> IndexedTriangleList:
    """A unit square in the xz-plane split into a grid with shared vertices."""
    if divisions < 1:
        raise ValueError(f"plane needs at least 1 division, got {divisions}")
    positions = [
        (0.5 - i / divisions, 0.0, 0.5 - j / divisions)
        for i in range(divisions + 1)
        for j in range(divisions + 1)
    ]
    indices: list[int] = []
    for i in range(divisions):
        for j in range(divisions):
            ind = i * (divisions + 1) + j
            indices += (
                ind, ind + divisions + 2, ind + divisions + 1,
                ind, ind + 1, ind + divisions + 2,
            )
    return _mesh_from(positions, indices)


def plane_independent(divisions: int) -> IndexedTriangleList:
    """A unit square grid in the xz-plane where every cell has its own 4 vertices."""
    if divisions < 1:
        raise ValueError(f"plane needs at least 1 division, got {divisions}")
    positions: list[tuple[float, float, float]] = []
    indices: list[int] = []
    for i in range(divisions):
        for j in range(divisions):
            x0 = 0.5 - i / divisions
            x1 = 0.5 - (i + 1) / divisions
            z0 = 0.5 - j / divisions
            z1 = 0.5 - (j + 1) / divisions
            positions += [(x0, 0.0, z0), (x1, 0.0, z0), (x0, 0.0, z1), (x1, 0.0, z1)]
            ind = (j * divisions + i) * 4
            indices += (ind, ind + 2, ind + 3, ind, ind + 3, ind + 1)
    return _mesh_from(positions, indices)