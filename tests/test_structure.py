import pytest

from blockworld.blocks import BlockType
from blockworld.rng import Random
from blockworld.structure import ChunkMap, StructureType, make_oak_tree
from blockworld.vectors import Vector3


class DictMap(ChunkMap):
    def __init__(self):
        self.blocks = {}

    def get_block(self, pos):
        return self.blocks.get(pos, BlockType.AIR)

    def set_block(self, pos, block):
        self.blocks[pos] = block

    def set_block_no_checks(self, pos, block):
        self.blocks[pos] = block


ORIGIN = Vector3(10, 64, -4)


def _of(world, kind):
    return {p for p, b in world.blocks.items() if b == kind}


def test_chunk_map_is_abstract():
    with pytest.raises(TypeError):
        ChunkMap()


def test_structure_type_value():
    assert StructureType(0) is StructureType.OAK_TREE
    with pytest.raises(ValueError):
        StructureType(1)


def test_trunk_is_a_column_of_logs():
    world = DictMap()
    make_oak_tree(world, Random(7), ORIGIN)
    logs = _of(world, BlockType.OAK_LOG)
    assert 3 <= len(logs) <= 5
    assert logs == {Vector3(ORIGIN.x, ORIGIN.y + i, ORIGIN.z) for i in range(len(logs))}


def test_crown_surrounds_top_of_trunk():
    world = DictMap()
    make_oak_tree(world, Random(3), ORIGIN)
    height = len(_of(world, BlockType.OAK_LOG))
    leaves = _of(world, BlockType.OAK_LEAVES)
    assert len(leaves) == 35
    assert Vector3(ORIGIN.x, ORIGIN.y + height - 1, ORIGIN.z) not in leaves
    assert all(abs(p.x - ORIGIN.x) <= 1 and abs(p.z - ORIGIN.z) <= 1 for p in leaves)
    assert min(p.y for p in leaves) == ORIGIN.y + height - 1
    assert max(p.y for p in leaves) == ORIGIN.y + height + 2


def test_leaves_do_not_replace_existing_blocks():
    world = DictMap()
    stone_pos = Vector3(ORIGIN.x + 1, ORIGIN.y + 5, ORIGIN.z + 1)
    world.blocks[stone_pos] = BlockType.STONE
    make_oak_tree(world, Random(11), ORIGIN)
    assert world.get_block(stone_pos) == BlockType.STONE


def test_same_seed_grows_same_tree():
    first, second = DictMap(), DictMap()
    make_oak_tree(first, Random(42), ORIGIN)
    make_oak_tree(second, Random(42), ORIGIN)
    assert first.blocks == second.blocks


def test_heights_vary_over_many_trees():
    rand = Random(1)
    heights = set()
    for _ in range(40):
        world = DictMap()
        make_oak_tree(world, rand, ORIGIN)
        heights.add(len(_of(world, BlockType.OAK_LOG)))
    assert heights == {3, 4, 5}