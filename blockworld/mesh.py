"""Vertices and indexed triangle lists."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vectors import Vector2, Vector3, cross_product, length


@dataclass
class Vertex:
    """A mesh vertex with position, normal and texture coordinates."""

    pos: Vector3 = Vector3(0.0, 0.0, 0.0)
    normal: Vector3 = Vector3(0.0, 0.0, 0.0)
    tc: Vector2 = Vector2(0.0, 0.0)


@dataclass
class IndexedTriangleList:
    """Vertices plus a flat list of indices, three per triangle."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def triangles(self):
        """Yield the index triples of the triangles in order."""
        it = iter(self.indices)
        return zip(it, it, it)

    def calculate_normals(self) -> None:
        """Give every vertex of each triangle that triangle's face normal.

        Later triangles overwrite the normals of vertices they share with
        earlier ones.
        """
        for i0, i1, i2 in self.triangles():
            v0 = self.vertices[i0]
            v1 = self.vertices[i1]
            v2 = self.vertices[i2]
            cross = cross_product(v1.pos - v0.pos, v2.pos - v0.pos)
            size = length(cross)
            if size == 0.0:
                raise ValueError(f"degenerate triangle ({i0}, {i1}, {i2})")
            normal = cross / size
            v0.normal = normal
            v1.normal = normal
            v2.normal = normal