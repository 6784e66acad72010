"""A 16x256x16 column of blocks and the meshes built from it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .aabb import AABB
from .blocks import (
    BLOCK_PIXEL_SIZE,
    BlockType,
    is_drawable,
    is_fluid,
    is_full,
    is_plant,
    is_transparent,
    is_x_shaped,
    texture_for,
)
from .mesh import IndexedTriangleList, Vertex
from .structure import ChunkMap
from .vectors import Vector2, Vector3

CHUNK_WIDTH = 16
CHUNK_HEIGHT = 256
CHUNK_W_BY_W = CHUNK_WIDTH * CHUNK_WIDTH
CHUNK_BLOCKS_COUNT = CHUNK_W_BY_W * CHUNK_HEIGHT

_ZERO = Vector3(0.0, 0.0, 0.0)

# (neighbour offset, normal, quad corners, which texture)
_FACES = (
    ((0, 0, -1), Vector3(0.0, 0.0, -1.0),
     ((0, 0, 0), (0, 1, 0), (1, 0, 0), (1, 1, 0)), "side"),
    ((0, 0, 1), Vector3(0.0, 0.0, 1.0),
     ((1, 0, 1), (1, 1, 1), (0, 0, 1), (0, 1, 1)), "side"),
    ((-1, 0, 0), Vector3(-1.0, 0.0, 0.0),
     ((0, 0, 1), (0, 1, 1), (0, 0, 0), (0, 1, 0)), "side"),
    ((1, 0, 0), Vector3(1.0, 0.0, 0.0),
     ((1, 0, 0), (1, 1, 0), (1, 0, 1), (1, 1, 1)), "side"),
    ((0, 1, 0), Vector3(0.0, 1.0, 0.0),
     ((0, 1, 0), (0, 1, 1), (1, 1, 0), (1, 1, 1)), "top"),
    ((0, -1, 0), Vector3(0.0, -1.0, 0.0),
     ((0, 0, 1), (0, 0, 0), (1, 0, 1), (1, 0, 0)), "bottom"),
)

_CROSS_QUADS = (
    ((0, 0, 0), (0, 1, 0), (1, 0, 1), (1, 1, 1)),
    ((0, 0, 1), (0, 1, 1), (1, 0, 0), (1, 1, 0)),
)

_NEIGHBOUR_OFFSETS = ((0, 0, -1), (0, 0, 1), (-1, 0, 0), (1, 0, 0), (0, -1, 0), (0, 1, 0))


def chunk_pos_of(block_pos: Vector3) -> Vector2:
    """The chunk coordinates holding a world block position."""
    return Vector2(int(block_pos.x) >> 4, int(block_pos.z) >> 4)


def chunk_to_block_space(chunk_pos: Vector2) -> Vector2:
    """The block-space origin (x, z) of a chunk."""
    return Vector2(int(chunk_pos.x) << 4, int(chunk_pos.y) << 4)


@dataclass
class ChunkMeshes:
    """The three meshes of a chunk; a mesh with no faces is None."""

    terrain: Optional[IndexedTriangleList] = None
    plants: Optional[IndexedTriangleList] = None
    water: Optional[IndexedTriangleList] = None


def _add_quad(mesh: IndexedTriangleList, corners, origin, normal, tex: Vector2,
              reverse: bool = False) -> None:
    start = len(mesh.vertices)
    if reverse:
        mesh.indices += (start + 3, start + 1, start + 2, start + 2, start + 1, start)
    else:
        mesh.indices += (start, start + 1, start + 2, start + 2, start + 1, start + 3)
    uvs = (
        Vector2(tex.x, tex.y + BLOCK_PIXEL_SIZE),
        Vector2(tex.x, tex.y),
        Vector2(tex.x + BLOCK_PIXEL_SIZE, tex.y + BLOCK_PIXEL_SIZE),
        Vector2(tex.x + BLOCK_PIXEL_SIZE, tex.y),
    )
    ox, oy, oz = origin
    for (cx, cy, cz), uv in zip(corners, uvs):
        mesh.vertices.append(
            Vertex(pos=Vector3(ox + cx, oy + cy, oz + cz), normal=normal, tc=uv)
        )


class Chunk:
    """A column of blocks at a chunk position, with its own mesh state.

    Lookups outside the column's x/z range go to `world`.
    """

    def __init__(self, chunk_pos: Vector2, world: Optional[ChunkMap] = None) -> None:
        self.pos = chunk_to_block_space(chunk_pos)
        self.world = world
        self._blocks = bytearray(CHUNK_BLOCKS_COUNT)
        self.meshes = ChunkMeshes()
        self.skip_layer = [False] * CHUNK_HEIGHT
        self.mesh_updated = True
        self.loaded = False

    def __repr__(self) -> str:
        return f"Chunk(pos={self.pos!r})"

    @staticmethod
    def _index(x: int, y: int, z: int) -> int:
        return y * CHUNK_W_BY_W + x * CHUNK_WIDTH + z

    @staticmethod
    def _inside(x: int, y: int, z: int) -> bool:
        return 0 <= x < CHUNK_WIDTH and 0 <= y < CHUNK_HEIGHT and 0 <= z < CHUNK_WIDTH

    def get_block(self, x: int, y: int, z: int) -> BlockType:
        """The block at local coordinates; above or below the column is air."""
        if y < 0 or y >= CHUNK_HEIGHT:
            return BlockType.AIR
        if x < 0 or x >= CHUNK_WIDTH or z < 0 or z >= CHUNK_WIDTH:
            if self.world is None:
                raise RuntimeError("chunk has no world to look up neighbouring blocks")
            return BlockType(
                self.world.get_block(Vector3(x + self.pos.x, y, z + self.pos.y))
            )
        return BlockType(self._blocks[self._index(x, y, z)])

    def set_block(self, x: int, y: int, z: int, block: BlockType) -> None:
        """Set a block; outside the chunk this does nothing.

        The mesh is marked stale when the block changes between full and not full.
        """
        if not self._inside(x, y, z):
            return
        ind = self._index(x, y, z)
        prev = self._blocks[ind]
        self._blocks[ind] = int(block)
        if is_full(block) != is_full(prev):
            self.set_draw_layer(y)
            self.mesh_updated = False

    def set_block_at(self, pos: Vector3, block: BlockType) -> None:
        """Set a block by local position vector; outside the chunk this does nothing.

        The mesh is marked stale unless both old and new blocks are full and drawable.
        """
        x, y, z = int(pos.x), int(pos.y), int(pos.z)
        if not self._inside(x, y, z):
            return
        ind = self._index(x, y, z)
        prev = self._blocks[ind]
        self._blocks[ind] = int(block)
        if not (is_full(block) and is_full(prev)) or not (
            is_drawable(block) and is_drawable(prev)
        ):
            self.set_draw_layer(y)
            self.mesh_updated = False

    def set_block_no_checks(self, x: int, y: int, z: int, block: BlockType) -> None:
        """Write a block without bounds checks or mesh bookkeeping."""
        self._blocks[self._index(x, y, z)] = int(block)

    def set_draw_layer(self, y: int) -> None:
        """Mark layer `y` and its neighbours as needing to be meshed."""
        self.skip_layer[y] = False
        if y > 0:
            self.skip_layer[y - 1] = False
        if y < CHUNK_HEIGHT - 1:
            self.skip_layer[y + 1] = False

    def make_mesh(self) -> ChunkMeshes:
        """Rebuild the terrain, plant and water meshes and return them."""
        self.free_mesh()
        terrain = IndexedTriangleList()
        plants = IndexedTriangleList()
        water = IndexedTriangleList()
        blocks = self._blocks

        for y in range(CHUNK_HEIGHT):
            if self.skip_layer[y]:
                continue
            layer_has_no_faces = True
            base = y * CHUNK_W_BY_W
            for x in range(CHUNK_WIDTH):
                row = base + x * CHUNK_WIDTH
                for z in range(CHUNK_WIDTH):
                    raw = blocks[row + z]
                    if not is_drawable(raw):
                        continue
                    block = BlockType(raw)
                    origin = (float(x), float(y), float(z))
                    textures = texture_for(block)

                    if is_x_shaped(block):
                        if any(
                            is_transparent(self.get_block(x + dx, y + dy, z + dz))
                            for dx, dy, dz in _NEIGHBOUR_OFFSETS
                        ):
                            layer_has_no_faces = False
                            for reverse in (False, True):
                                for corners in _CROSS_QUADS:
                                    _add_quad(plants, corners, origin, _ZERO,
                                              textures.side, reverse)
                        continue

                    if is_plant(block):
                        target = plants
                    elif is_fluid(block):
                        target = water
                    else:
                        target = terrain

                    for (dx, dy, dz), normal, corners, face in _FACES:
                        neighbour = self.get_block(x + dx, y + dy, z + dz)
                        if is_transparent(neighbour) and neighbour != block:
                            layer_has_no_faces = False
                            _add_quad(target, corners, origin, normal,
                                      getattr(textures, face))

            if layer_has_no_faces:
                self.skip_layer[y] = True

        plants.calculate_normals()

        self.meshes = ChunkMeshes(
            terrain=terrain if terrain.vertices else None,
            plants=plants if plants.vertices else None,
            water=water if water.vertices else None,
        )
        self.mesh_updated = True
        return self.meshes

    def free_mesh(self) -> None:
        """Drop all meshes."""
        self.meshes = ChunkMeshes()

    def bounds(self, relative_chunk_pos: Optional[Vector2] = None) -> AABB:
        """The chunk's bounding box, optionally relative to a block-space origin."""
        rel = relative_chunk_pos if relative_chunk_pos is not None else Vector2(0, 0)
        return AABB(
            Vector3(float(self.pos.x - rel.x), 0.0, float(self.pos.y - rel.y)),
            Vector3(float(CHUNK_WIDTH), float(CHUNK_HEIGHT), float(CHUNK_WIDTH)),
        )