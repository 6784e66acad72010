"""Fills chunks with terrain from biome noise."""

from __future__ import annotations

import os
from typing import Optional, Union

from .biome import Biome, BiomeType
from .blocks import BlockType
from .chunk import CHUNK_HEIGHT, CHUNK_WIDTH, Chunk
from .noise import NoiseGenerator
from .rng import Random
from .structure import make_oak_tree
from .vectors import Vector3

WATER_LEVEL = 64


class TerrainGenerator:
    """Generates stone, water, surface blocks, flora and trees for chunks."""

    def __init__(self, seed: int, biome_path: Optional[Union[str, os.PathLike]] = None) -> None:
        self.noise = NoiseGenerator(seed)
        self.rand = Random()
        self.biomes = {biome_type: Biome() for biome_type in BiomeType}
        if biome_path is not None:
            self.biomes[BiomeType.LIGHT_FOREST].load_from_file(biome_path)

    @property
    def biome(self) -> Biome:
        """The biome used for all terrain."""
        return self.biomes[BiomeType.LIGHT_FOREST]

    def generate(self, chunk: Chunk) -> None:
        """Fill `chunk` column by column."""
        biome = self.biome
        solid = biome._solid_blocks(chunk.pos.x, chunk.pos.y, CHUNK_WIDTH, CHUNK_HEIGHT, self.noise)
        for x in range(CHUNK_WIDTH):
            for z in range(CHUNK_WIDTH):
                for y, is_solid in enumerate(solid[x][z]):
                    if is_solid:
                        chunk.set_block_no_checks(x, y, z, BlockType.STONE)
                    elif y <= WATER_LEVEL:
                        chunk.set_block_no_checks(x, y, z, BlockType.WATER)
                self._cover_column(chunk, biome, x, z)
                chunk.set_block(x, 0, z, BlockType.BEDROCK)

    def _cover_column(self, chunk: Chunk, biome: Biome, x: int, z: int) -> None:
        for y in range(1, CHUNK_HEIGHT):
            if chunk.get_block(x, y, z) != BlockType.STONE:
                continue
            above = chunk.get_block(x, y + 1, z)
            if above == BlockType.AIR:
                if y < WATER_LEVEL + 2:
                    chunk.set_block(x, y, z, biome.beach_block)
                    continue
                chunk.set_block(x, y, z, biome.top_block)
                if (
                    biome.has_flora()
                    and self.rand.int_in_range(0, biome.flora_frequency_num) == 0
                    and y > WATER_LEVEL + 2
                ):
                    chunk.set_block(x, y + 1, z, biome.flora_block(self.rand))
                elif (
                    biome.has_trees()
                    and self.rand.int_in_range(0, biome.tree_frequency_num) == 0
                    and y > WATER_LEVEL + 5
                    and 0 < x < CHUNK_WIDTH - 1
                    and 0 < z < CHUNK_WIDTH - 1
                ):
                    if chunk.world is None:
                        raise RuntimeError("chunk has no world to grow trees into")
                    make_oak_tree(
                        chunk.world,
                        self.rand,
                        Vector3(chunk.pos.x + x, y + 1, chunk.pos.y + z),
                    )
            elif above == BlockType.WATER:
                chunk.set_block(x, y, z, biome.beach_block)
            elif (
                chunk.get_block(x, y + 2, z) == BlockType.AIR
                or chunk.get_block(x, y + 3, z) == BlockType.AIR
            ):
                chunk.set_block(x, y, z, biome.second_block)