import math

from blockworld.blocks import BlockType
from blockworld.entity import Entity
from blockworld.position import Position
from blockworld.structure import ChunkMap
from blockworld.vectors import Vector3

SIZE = Vector3(0.6, 1.8, 0.6)


class BlockMap(ChunkMap):
    def __init__(self, fill=None):
        self.fill = fill or (lambda x, y, z: BlockType.AIR)
        self.blocks = {}

    def get_block(self, pos):
        key = (int(pos.x), int(pos.y), int(pos.z))
        if key in self.blocks:
            return self.blocks[key]
        return self.fill(*key)

    def set_block(self, pos, block):
        self.blocks[(int(pos.x), int(pos.y), int(pos.z))] = block

    def set_block_no_checks(self, pos, block):
        self.set_block(pos, block)


def floor_world(extra=lambda x, y, z: False):
    def fill(x, y, z):
        if y == 0 or extra(x, y, z):
            return BlockType.STONE
        return BlockType.AIR

    return BlockMap(fill)


def make_entity(x, y, z):
    return Entity(Position(Vector3(x, y, z)), SIZE)


def test_free_fall_moves_down_only():
    world = BlockMap()
    entity = make_entity(8.5, 100.0, 8.5)
    entity.update(world, 0.05)
    assert entity.vel.y < 0.0
    assert entity.position.p.y < 100.0
    assert entity.position.p.x == 8.5
    assert entity.position.p.z == 8.5
    assert entity.on_ground is False


def test_collider_follows_position():
    world = BlockMap()
    entity = make_entity(8.5, 50.0, 8.5)
    for _ in range(5):
        entity.update(world, 0.016)
    centre = entity.collider.vmin + entity.center_offset
    assert math.isclose(centre.y, entity.position.p.y)
    assert math.isclose(centre.x, entity.position.p.x)


def test_lands_on_floor():
    world = floor_world()
    entity = make_entity(8.5, 3.0, 8.5)
    for _ in range(120):
        entity.update(world, 0.016)
    assert entity.on_ground is True
    assert 1.0 <= entity.collider.vmin.y < 1.01


def test_stopped_by_wall():
    world = floor_world(lambda x, y, z: x == 10 and 1 <= y <= 3)
    entity = make_entity(8.5, 1.91, 8.5)
    for _ in range(150):
        entity.add_acceleration(Vector3(20.0, 0.0, 0.0))
        entity.update(world, 0.016)
    assert entity.collider.vmax.x <= 10.0
    assert entity.collider.vmax.x > 9.5


def test_water_slows_fall_and_sets_flag():
    water = BlockMap(lambda x, y, z: BlockType.WATER if 0 <= y < 200 else BlockType.AIR)
    air = BlockMap()
    swimmer = make_entity(8.5, 100.0, 8.5)
    faller = make_entity(8.5, 100.0, 8.5)
    for _ in range(10):
        swimmer.update(water, 0.016)
        faller.update(air, 0.016)
    assert swimmer.in_water is True
    assert faller.in_water is False
    assert swimmer.position.p.y > faller.position.p.y


def test_acceleration_is_applied_then_cleared():
    world = BlockMap()
    pushed = make_entity(8.5, 100.0, 8.5)
    still = make_entity(8.5, 100.0, 8.5)
    pushed.add_acceleration(Vector3(25.0, 0.0, 0.0))
    pushed.add_acceleration(Vector3(25.0, 0.0, 0.0))
    pushed.update(world, 0.05)
    still.update(world, 0.05)
    assert pushed.position.world_pos().x > still.position.world_pos().x
    assert pushed.accel == Vector3(0.0, 0.0, 0.0)


def test_set_collider_size_keeps_min_corner():
    entity = make_entity(8.5, 10.0, 8.5)
    before = entity.collider.vmin
    entity.set_collider_size(Vector3(1.0, 2.0, 1.0))
    assert entity.collider.vmin == before
    size = entity.collider.vmax - entity.collider.vmin
    assert math.isclose(size.y, 2.0)
    assert math.isclose(size.x, 1.0)


def test_set_position_rebases_chunk_origin():
    entity = make_entity(8.5, 10.0, 8.5)
    entity.set_position(Vector3(40.0, 5.0, -3.0))
    world_pos = entity.position.world_pos()
    assert math.isclose(world_pos.x, 40.0)
    assert math.isclose(world_pos.y, 5.0)
    assert math.isclose(world_pos.z, -3.0)
    assert entity.position.chunk_pos.x % 16 == 0
    assert entity.collider.vmin + entity.center_offset == entity.position.p