import time

import pytest

from blockworld.blocks import BlockType
from blockworld.chunk import Chunk
from blockworld.position import Position
from blockworld.vectors import Vector2, Vector3
from blockworld.world import World


def _add_chunk(world, x, z):
    chunk = Chunk(Vector2(x, z), world)
    world.chunks[Vector2(x, z)] = chunk
    return chunk


def test_out_of_range_height_is_air():
    world = World(1)
    _add_chunk(world, 0, 0)
    assert world.get_block(Vector3(1, -1, 1)) == BlockType.AIR
    assert world.get_block(Vector3(1, 256, 1)) == BlockType.AIR


def test_missing_chunk_reads_as_grass():
    world = World(1)
    assert world.get_block(Vector3(100, 50, 100)) == BlockType.GRASS


def test_set_and_get_round_trip_negative_coordinates():
    world = World(1)
    chunk = _add_chunk(world, -1, -1)
    world.set_block(Vector3(-1, 5, -16), BlockType.GLASS)
    assert world.get_block(Vector3(-1, 5, -16)) == BlockType.GLASS
    assert chunk.get_block(15, 5, 0) == BlockType.GLASS


def test_set_block_in_missing_chunk_is_ignored():
    world = World(1)
    world.set_block(Vector3(40, 5, 40), BlockType.STONE)
    assert world.get_chunk(Vector2(2, 2)) is None
    assert world.get_block(Vector3(40, 5, 40)) == BlockType.GRASS


def test_edge_block_marks_neighbour_stale():
    world = World(1)
    _add_chunk(world, 0, 0)
    left = _add_chunk(world, -1, 0)
    right = _add_chunk(world, 1, 0)
    left.skip_layer[9] = left.skip_layer[10] = left.skip_layer[11] = True
    world.set_block(Vector3(0, 10, 5), BlockType.STONE)
    assert left.mesh_updated is False
    assert left.skip_layer[9:12] == [False, False, False]
    assert right.mesh_updated is True


def test_far_edge_block_marks_positive_neighbour():
    world = World(1)
    _add_chunk(world, 0, 0)
    front = _add_chunk(world, 0, 1)
    back = _add_chunk(world, 0, -1)
    world.set_block_no_checks(Vector3(4, 20, 15), BlockType.DIRT)
    assert front.mesh_updated is False
    assert back.mesh_updated is True


def test_update_meshes_builds_single_block():
    world = World(1)
    chunk = _add_chunk(world, 0, 0)
    world.set_block(Vector3(5, 10, 5), BlockType.STONE)
    assert chunk.mesh_updated is False
    world.update_meshes()
    assert chunk.mesh_updated is True
    terrain = chunk.meshes.terrain
    assert len(terrain.vertices) == 24
    assert len(terrain.indices) == 36


def test_get_chunk():
    world = World(1)
    chunk = _add_chunk(world, 3, -2)
    assert world.get_chunk(Vector2(3, -2)) is chunk
    assert world.get_chunk(Vector2(0, 0)) is None


def test_load_around_unloads_far_chunks_and_marks_loaded():
    world = World(1)
    world.render_distance = 0
    world.unload_distance = 2
    home = _add_chunk(world, 0, 0)
    side = _add_chunk(world, 1, 0)
    _add_chunk(world, 5, 0)
    world.load_around(Position(Vector3(1.0, 100.0, 1.0)))
    assert set(world.chunks) == {Vector2(0, 0), Vector2(1, 0)}
    assert home.loaded and side.loaded
    assert home.mesh_updated and side.mesh_updated


def test_background_loader_runs_and_stops():
    world = World(1)
    world.render_distance = 0
    chunk = _add_chunk(world, 0, 0)
    position = Position(Vector3(2.0, 100.0, 2.0))
    with world:
        world.start_loader(position, interval=0.01)
        with pytest.raises(RuntimeError):
            world.start_loader(position)
        deadline = time.monotonic() + 10.0
        while not chunk.loaded and time.monotonic() < deadline:
            time.sleep(0.01)
        assert chunk.loaded is True
        assert world.loader_running is True
    assert world.loader_running is False