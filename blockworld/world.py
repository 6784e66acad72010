"""The world: a map of chunks generated and meshed around a moving position."""

from __future__ import annotations

import os
import threading
from typing import Optional, Union

from .blocks import BlockType
from .chunk import CHUNK_HEIGHT, Chunk, chunk_pos_of, chunk_to_block_space
from .position import Position
from .structure import ChunkMap
from .terrain import TerrainGenerator
from .vectors import Vector2, Vector3

RENDER_DISTANCE = 8
UNLOAD_DISTANCE = 8

_NEIGHBOURS = (Vector2(0, 1), Vector2(0, -1), Vector2(1, 0), Vector2(-1, 0))


class World(ChunkMap):
    """Chunks keyed by chunk position, with an optional background loader."""

    def __init__(self, seed: int, biome_path: Optional[Union[str, os.PathLike]] = None) -> None:
        self.terrain = TerrainGenerator(seed, biome_path)
        self.chunks: dict[Vector2, Chunk] = {}
        self.render_distance = RENDER_DISTANCE
        self.unload_distance = UNLOAD_DISTANCE
        self._lock = threading.RLock()
        self._stop = threading.Event()
        self._loader: Optional[threading.Thread] = None

    def __enter__(self) -> World:
        return self

    def __exit__(self, *args) -> None:
        self.stop_loader()

    def get_block(self, pos: Vector3) -> BlockType:
        """The block at a world position; unloaded chunks read as grass."""
        x, y, z = int(pos.x), int(pos.y), int(pos.z)
        if y < 0 or y >= CHUNK_HEIGHT:
            return BlockType.AIR
        cp = chunk_pos_of(Vector3(x, y, z))
        chunk = self.chunks.get(cp)
        if chunk is None:
            return BlockType.GRASS
        origin = chunk_to_block_space(cp)
        return chunk.get_block(x - origin.x, y, z - origin.y)

    def set_block(self, pos: Vector3, block: BlockType) -> None:
        """Place a block, marking neighbouring chunks whose faces it touches."""
        with self._lock:
            self._place(pos, block)

    def set_block_no_checks(self, pos: Vector3, block: BlockType) -> None:
        """Place a block without taking the chunk lock."""
        self._place(pos, block)

    def _place(self, pos: Vector3, block: BlockType) -> None:
        x, y, z = int(pos.x), int(pos.y), int(pos.z)
        if y < 0 or y >= CHUNK_HEIGHT:
            return
        cp = chunk_pos_of(Vector3(x, y, z))
        chunk = self.chunks.get(cp)
        if chunk is None:
            return
        origin = chunk_to_block_space(cp)
        chunk.set_block_at(Vector3(x - origin.x, y, z - origin.y), block)

        edges = (
            (x & 0xF == 0, Vector2(-1, 0)),
            (z & 0xF == 0, Vector2(0, -1)),
            (x & 0xF == 0xF, Vector2(1, 0)),
            (z & 0xF == 0xF, Vector2(0, 1)),
        )
        for on_edge, offset in edges:
            if not on_edge:
                continue
            neighbour = self.chunks.get(cp + offset)
            if neighbour is not None:
                neighbour.set_draw_layer(y)
                neighbour.mesh_updated = False

    def update_meshes(self) -> None:
        """Rebuild the mesh of every chunk marked stale."""
        with self._lock:
            for chunk in list(self.chunks.values()):
                if not chunk.mesh_updated:
                    chunk.make_mesh()

    def get_chunk(self, chunk_pos: Vector2) -> Optional[Chunk]:
        return self.chunks.get(chunk_pos)

    def load_around(self, position: Position) -> None:
        """One loader pass: unload far chunks, generate near ones, then mesh."""
        with self._lock:
            cx = position.chunk_pos.x >> 4
            cz = position.chunk_pos.y >> 4
            far = self.unload_distance
            for cp in [
                cp for cp in self.chunks
                if not (cx - far <= cp.x <= cx + far and cz - far <= cp.y <= cz + far)
            ]:
                del self.chunks[cp]

            near = self.render_distance
            for x in range(cx - near, cx + near + 1):
                for z in range(cz - near, cz + near + 1):
                    cp = Vector2(x, z)
                    if cp not in self.chunks:
                        chunk = Chunk(cp, self)
                        self.chunks[cp] = chunk
                        self.terrain.generate(chunk)

            for cp, chunk in list(self.chunks.items()):
                if chunk.loaded:
                    continue
                chunk.loaded = True
                for offset in _NEIGHBOURS:
                    neighbour = self.chunks.get(cp + offset)
                    if neighbour is not None:
                        neighbour.mesh_updated = False
                        neighbour.skip_layer = [False] * CHUNK_HEIGHT

            self.update_meshes()

    @property
    def loader_running(self) -> bool:
        return self._loader is not None and self._loader.is_alive()

    def start_loader(self, position: Position, interval: float = 0.8) -> None:
        """Run `load_around(position)` every `interval` seconds in a background thread."""
        if self.loader_running:
            raise RuntimeError("chunk loader is already running")
        self._stop.clear()
        self._loader = threading.Thread(
            target=self._loader_loop, args=(position, interval), daemon=True
        )
        self._loader.start()

    def _loader_loop(self, position: Position, interval: float) -> None:
        while not self._stop.is_set():
            self.load_around(position)
            self._stop.wait(interval)

    def stop_loader(self) -> None:
        """Stop the background loader and wait for it to finish."""
        self._stop.set()
        if self._loader is not None:
            self._loader.join()
            self._loader = None