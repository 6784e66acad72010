import pytest

from blockworld.blocks import (
    BLOCK_PIXEL_SIZE,
    TEXTURE_DATA,
    BlockType,
    TextureData,
    is_drawable,
    is_fluid,
    is_full,
    is_plant,
    is_transparent,
    is_x_shaped,
    not_ignored_by_ray,
    texture_for,
)
from blockworld.vectors import Vector2


def test_block_ids_match_storage_values():
    assert BlockType(0) is BlockType.AIR
    assert BlockType(1) is BlockType.WATER
    assert BlockType(13) is BlockType.BEDROCK
    assert texture_for(len(BlockType) - 1) == TEXTURE_DATA[-1]


def test_air_is_not_drawable_everything_else_is():
    assert not is_drawable(BlockType.AIR)
    assert all(is_drawable(b) for b in BlockType if b is not BlockType.AIR)


def test_full_blocks_start_at_oak_leaves():
    assert is_full(BlockType.OAK_LEAVES)
    assert is_full(BlockType.STONE)
    assert not is_full(BlockType.SUGAR_CANE)
    assert not is_full(BlockType.AIR)


def test_transparency():
    assert is_transparent(BlockType.AIR)
    assert is_transparent(BlockType.WATER)
    assert is_transparent(BlockType.GLASS)
    assert not is_transparent(BlockType.GRASS)


def test_only_water_is_fluid():
    assert [b for b in BlockType if is_fluid(b)] == [BlockType.WATER]


def test_ray_ignores_air_and_water():
    ignored = [b for b in BlockType if not not_ignored_by_ray(b)]
    assert ignored == [BlockType.AIR, BlockType.WATER]


def test_plants_and_x_shapes():
    assert is_plant(BlockType.OAK_LEAVES)
    assert not is_x_shaped(BlockType.OAK_LEAVES)
    assert is_x_shaped(BlockType.SUGAR_CANE)
    assert not is_plant(BlockType.WATER)
    assert all(is_plant(b) for b in BlockType if is_x_shaped(b))


def test_predicates_accept_plain_ints():
    assert is_full(int(BlockType.DIRT))
    assert not is_drawable(0)


def test_texture_for_grass_has_distinct_faces():
    tex = texture_for(BlockType.GRASS)
    assert tex.top == Vector2(0.0, 0.0)
    assert tex.side == Vector2(0.0, 0.25)
    assert tex.bottom == Vector2(0.25, 0.0)


def test_texture_for_air_is_empty():
    assert texture_for(BlockType.AIR) == TextureData()


def test_texture_coordinates_stay_inside_atlas():
    for block in BlockType:
        tex = texture_for(block)
        for face in (tex.top, tex.side, tex.bottom):
            assert 0.0 <= face.x <= 1.0 - BLOCK_PIXEL_SIZE
            assert 0.0 <= face.y <= 1.0 - BLOCK_PIXEL_SIZE


def test_texture_for_unknown_id_raises():
    with pytest.raises(IndexError):
        texture_for(14)