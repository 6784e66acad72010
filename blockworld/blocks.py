"""Block types, their classification and their texture atlas coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from .vectors import Vector2

BLOCK_PIXEL_SIZE = 0.25  # one tile of 16 pixels in a 64-pixel atlas


class BlockType(IntEnum):
    AIR = 0
    # transparent blocks
    WATER = 1
    GRASS_TUFT = 2
    OXEYE_DAISY = 3
    BLUE_ORCHID = 4
    SUGAR_CANE = 5
    # full blocks
    OAK_LEAVES = 6
    GLASS = 7
    GRASS = 8
    DIRT = 9
    STONE = 10
    SAND = 11
    OAK_LOG = 12
    BEDROCK = 13


BlockLike = Union[BlockType, int]


@dataclass(frozen=True)
class TextureData:
    """Atlas coordinates of a block's top, side and bottom faces."""

    top: Vector2 = Vector2(0.0, 0.0)
    side: Vector2 = Vector2(0.0, 0.0)
    bottom: Vector2 = Vector2(0.0, 0.0)


def _uniform(x: float, y: float) -> TextureData:
    tile = Vector2(x, y)
    return TextureData(tile, tile, tile)


TEXTURE_DATA: tuple[TextureData, ...] = (
    TextureData(),  # air
    _uniform(0.25, 0.25),  # water
    _uniform(0.0, 0.75),  # grass tuft
    _uniform(0.25, 0.75),  # oxeye daisy
    _uniform(0.5, 0.75),  # blue orchid
    _uniform(0.75, 0.25),  # sugar cane
    _uniform(0.5, 0.5),  # oak leaves
    _uniform(0.75, 0.5),  # glass
    TextureData(Vector2(0.0, 0.0), Vector2(0.0, 0.25), Vector2(0.25, 0.0)),  # grass
    _uniform(0.25, 0.0),  # dirt
    _uniform(0.5, 0.0),  # stone
    _uniform(0.75, 0.0),  # sand
    TextureData(Vector2(0.25, 0.5), Vector2(0.0, 0.5), Vector2(0.25, 0.5)),  # oak log
    _uniform(0.5, 0.25),  # bedrock
)


def is_drawable(block: BlockLike) -> bool:
    """Anything but air is drawn."""
    return int(block) > 0


def is_full(block: BlockLike) -> bool:
    """Full cubes, from oak leaves upwards."""
    return int(block) > 5


def is_transparent(block: BlockLike) -> bool:
    """Blocks that let neighbouring faces show: air up to glass."""
    return int(block) < 8


def is_fluid(block: BlockLike) -> bool:
    return 0 < int(block) < 2


def not_ignored_by_ray(block: BlockLike) -> bool:
    """Blocks a pick ray stops on: everything but air and water."""
    return int(block) > 1


def is_plant(block: BlockLike) -> bool:
    return 1 < int(block) < 7


def is_x_shaped(block: BlockLike) -> bool:
    """Plants drawn as two crossed quads."""
    return 1 < int(block) < 6


def texture_for(block: BlockLike) -> TextureData:
    """The atlas coordinates for `block`."""
    return TEXTURE_DATA[int(block)]