"""Biome parameters: the noise that shapes the terrain and the blocks covering it."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Callable, Iterator, TypeVar, Union

from .blocks import BlockType
from .noise import NoiseGenerator
from .rng import Random
from .structure import StructureType
from .vectors import Vector3

T = TypeVar("T")


class BiomeType(IntEnum):
    LIGHT_FOREST = 0


_FLOAT_KEYS = {
    "offset": "offset",
    "amplitude": "amplitude",
    "heightMul": "height_mul",
    "xMul": "x_mul",
    "yMul": "y_mul",
    "zMul": "z_mul",
    "octaveMul1": "octave_mul1",
    "octaveMul2": "octave_mul2",
}

_INT_KEYS = {
    "octaves": "octaves",
    "floraFrequencyNum": "flora_frequency_num",
    "treeFrequencyNum": "tree_frequency_num",
}

_BLOCK_KEYS = {
    "topBlock": "top_block",
    "secondBlock": "second_block",
    "beachBlock": "beach_block",
}


def _take(tokens: Iterator[str], key: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"missing value after {key!r}") from None


def _parse(convert: Callable[[str], T], token: str, key: str) -> T:
    try:
        return convert(token)
    except ValueError:
        raise ValueError(f"bad value {token!r} for {key!r}") from None


def _read_list(tokens: Iterator[str], key: str, kind: Callable[[int], T]) -> tuple[T, ...]:
    count = _parse(int, _take(tokens, key), key)
    if count < 0:
        raise ValueError(f"negative count {count} for {key!r}")
    return tuple(
        _parse(lambda token: kind(int(token)), _take(tokens, key), key) for _ in range(count)
    )


@dataclass
class Biome:
    """Terrain density parameters plus surface, flora and tree settings."""

    top_block: BlockType = BlockType.GRASS
    second_block: BlockType = BlockType.DIRT
    beach_block: BlockType = BlockType.SAND

    flora: tuple[BlockType, ...] = ()
    flora_frequency_num: int = 0

    trees: tuple[StructureType, ...] = ()
    tree_frequency_num: int = 0

    offset: float = 80.0
    amplitude: float = 20.0
    height_mul: float = 1.2
    x_mul: float = 0.025
    y_mul: float = 0.04
    z_mul: float = 0.025
    octaves: int = 3
    octave_mul1: float = 1.5
    octave_mul2: float = 0.6

    def load_from_file(self, path: Union[str, os.PathLike]) -> Biome:
        """Read whitespace-separated `key value` pairs; unknown tokens are skipped.

        `flora` and `trees` take a count followed by that many ids.
        """
        tokens = iter(Path(path).read_text().split())
        for key in tokens:
            if key in _FLOAT_KEYS:
                setattr(self, _FLOAT_KEYS[key], _parse(float, _take(tokens, key), key))
            elif key in _INT_KEYS:
                setattr(self, _INT_KEYS[key], _parse(int, _take(tokens, key), key))
            elif key in _BLOCK_KEYS:
                value = _parse(lambda token: BlockType(int(token)), _take(tokens, key), key)
                setattr(self, _BLOCK_KEYS[key], value)
            elif key == "flora":
                self.flora = _read_list(tokens, key, BlockType)
            elif key == "trees":
                self.trees = _read_list(tokens, key, StructureType)
        return self

    def _sample(self, a: float, b: float, noise: NoiseGenerator) -> float:
        if self.octaves > 1:
            return noise.value(a, b, self.octaves, self.octave_mul1, self.octave_mul2)
        return noise.generate(a, b)

    def has_block_at(self, pos: Vector3, noise: NoiseGenerator) -> bool:
        """True where the terrain density puts solid ground."""
        x = float(pos.x) * self.x_mul
        y = float(pos.y) * self.y_mul
        z = float(pos.z) * self.z_mul
        density = (
            self._sample(x, y, noise) + self._sample(x, z, noise) + self._sample(y, z, noise)
        ) * self.amplitude + pos.y * self.height_mul
        return density < self.offset

    def _solid_blocks(
        self, origin_x: int, origin_z: int, width: int, height: int, noise: NoiseGenerator
    ) -> list[list[list[bool]]]:
        """`has_block_at` for a whole width x width x height box, indexed [x][z][y].

        The three noise planes are sampled once each instead of per block.
        """
        xs = [float(origin_x + x) * self.x_mul for x in range(width)]
        ys = [float(y) * self.y_mul for y in range(height)]
        zs = [float(origin_z + z) * self.z_mul for z in range(width)]
        xy = [[self._sample(xv, yv, noise) for yv in ys] for xv in xs]
        yz = [[self._sample(yv, zv, noise) for zv in zs] for yv in ys]
        result = []
        for xi, xv in enumerate(xs):
            row = []
            for zi, zv in enumerate(zs):
                xz = self._sample(xv, zv, noise)
                row.append(
                    [
                        (xy[xi][y] + xz + yz[y][zi]) * self.amplitude + y * self.height_mul
                        < self.offset
                        for y in range(height)
                    ]
                )
            result.append(row)
        return result

    def has_flora(self) -> bool:
        return len(self.flora) > 0

    def has_trees(self) -> bool:
        return len(self.trees) > 0

    def flora_block(self, rand: Random) -> BlockType:
        """A random flora block of this biome."""
        if not self.flora:
            raise ValueError("biome has no flora")
        return self.flora[rand.int_in_range(0, len(self.flora) - 1)]

    def tree(self, rand: Random) -> StructureType:
        """A random tree type of this biome."""
        if not self.trees:
            raise ValueError("biome has no trees")
        return self.trees[rand.int_in_range(0, len(self.trees) - 1)]