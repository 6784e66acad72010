"""The block map interface and the structures placed into it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

from .blocks import BlockType
from .rng import Random
from .vectors import Vector3


class ChunkMap(ABC):
    """Anything that holds blocks addressed by world position."""

    @abstractmethod
    def get_block(self, pos: Vector3) -> BlockType:
        """The block at `pos`."""

    @abstractmethod
    def set_block(self, pos: Vector3, block: BlockType) -> None:
        """Place `block` at `pos`, keeping dependent state up to date."""

    @abstractmethod
    def set_block_no_checks(self, pos: Vector3, block: BlockType) -> None:
        """Place `block` at `pos` without locking."""


class StructureType(IntEnum):
    OAK_TREE = 0


def make_oak_tree(world: ChunkMap, rand: Random, pos: Vector3) -> None:
    """Grow an oak at `pos`: a 3 to 5 block trunk under a 3x4x3 crown of
    leaves that only fills air."""
    height = rand.int_in_range(3, 5)
    for i in range(height):
        world.set_block_no_checks(Vector3(pos.x, pos.y + i, pos.z), BlockType.OAK_LOG)

    for x in range(pos.x - 1, pos.x + 2):
        for y in range(pos.y + height - 1, pos.y + height + 3):
            for z in range(pos.z - 1, pos.z + 2):
                leaf_pos = Vector3(x, y, z)
                if world.get_block(leaf_pos) == BlockType.AIR:
                    world.set_block_no_checks(leaf_pos, BlockType.OAK_LEAVES)