"""Moving bodies with gravity, drag and swept box collision against full blocks."""

from __future__ import annotations

import math

from .aabb import AABB
from .blocks import BlockType, is_full
from .position import Position
from .structure import ChunkMap
from .vectors import Vector2, Vector3

GRAVITY = 28.449
GRAVITY_IN_WATER = 5.0

_ZERO = Vector3(0.0, 0.0, 0.0)
_UNIT = Vector3(1.0, 1.0, 1.0)
_FRAME_RATE = 62.5


def _sweep_axis(
    block_min: float, block_max: float, box_min: float, box_max: float, velocity: float
) -> tuple[float, float, float, float]:
    """Entry and exit distances and times along one axis."""
    if velocity > 0.0:
        dist_entry = block_min - box_max
        dist_exit = block_max - box_min
    else:
        dist_entry = block_max - box_min
        dist_exit = block_min - box_max
    if velocity != 0.0:
        return dist_entry, dist_exit, dist_entry / velocity, dist_exit / velocity
    return dist_entry, dist_exit, -math.inf, math.inf


class Entity:
    """A body with a box collider that falls, swims and slides along blocks.

    `position` keeps a chunk-aligned origin; the collider is in the same local
    space as `position.p`.
    """

    def __init__(self, pos: Position, collider_size: Vector3) -> None:
        self._pos = Position(pos.p, pos.chunk_pos)
        self.vel = _ZERO
        self.rot = Vector2(0.0, 0.0)
        self.accel = _ZERO
        self.center_offset = collider_size / 2.0
        self.collider = AABB(self._pos.p - self.center_offset, collider_size)
        self.on_ground = False
        self.in_water = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._pos!r}, vel={self.vel!r})"

    @property
    def position(self) -> Position:
        return self._pos

    @property
    def rotation(self) -> Vector2:
        return self.rot

    def update(self, world: ChunkMap, dt: float) -> None:
        """Advance the entity by `dt` seconds through `world`."""
        self.on_ground = False
        gravity = GRAVITY_IN_WATER if self.in_water else GRAVITY
        self.vel = Vector3(self.vel.x, self.vel.y - gravity * dt, self.vel.z)
        self.in_water = False
        self.vel = self.vel + self.accel * dt
        self.accel = _ZERO

        time = 0.0
        for _ in range(3):
            if time >= 1.0:
                break
            time = self._collide(world, time, dt)

        if world.get_block(self._pos.world_block_pos()) == BlockType.WATER:
            self.in_water = True
            factors = (0.80, 0.93, 0.80)
        else:
            horizontal = 0.92 if self.on_ground else 0.96
            factors = (horizontal, 0.99, horizontal)
        steps = dt * _FRAME_RATE
        self.vel = Vector3(*(v * f**steps for v, f in zip(self.vel, factors)))

    def _collide(self, world: ChunkMap, time: float, dt: float) -> float:
        world_pos = self._pos.world_block_pos()
        motion = self.vel * (1.0 - time) * dt
        dest = Vector3(
            world_pos.x + int(motion.x),
            world_pos.y + int(motion.y),
            world_pos.z + int(motion.z),
        )
        off = Vector3(
            int(self.center_offset.x), int(self.center_offset.y), int(self.center_offset.z)
        )
        lo = [min(a, b) - o - 2 for a, b, o in zip(world_pos, dest, off)]
        hi = [max(a, b) + o + 2 for a, b, o in zip(world_pos, dest, off)]

        chunk = self._pos.chunk_pos
        sweep = self.vel * dt
        hit_normal = _ZERO
        smallest = 1.0

        for x in range(lo[0], hi[0]):
            for y in range(lo[1], hi[1]):
                for z in range(lo[2], hi[2]):
                    if not is_full(world.get_block(Vector3(x, y, z))):
                        continue
                    block = AABB(
                        Vector3(float(x - chunk.x), float(y), float(z - chunk.y)), _UNIT
                    )
                    dist_entry, entry, exit_ = self._entry_exit(block, sweep)
                    entry_time = max(entry)
                    exit_time = min(exit_)
                    missed = (
                        entry_time > exit_time
                        or (entry.x < 0.0 and entry.y < 0.0 and entry.z < 0.0)
                        or entry.x > 1.0
                        or entry.y > 1.0
                        or entry.z > 1.0
                    )
                    if not missed and smallest > entry_time:
                        smallest = entry_time
                        hit_normal = self._hit_normal(entry, dist_entry, hit_normal)

        p = self._pos.p + self.vel * (dt * smallest)
        px, py, pz = p
        vx, vy, vz = self.vel
        if hit_normal.x != 0.0:
            px -= vx * 0.008
            vx = hit_normal.x * 0.008
        if hit_normal.z != 0.0:
            pz -= vz * 0.008
            vz = hit_normal.z * 0.008
        if hit_normal.y > 0.0:
            vy = 0.00264
            py += 0.0018207
            self.on_ground = True
        elif hit_normal.y < 0.0:
            py -= vy * dt
            vy = -0.008

        self.vel = Vector3(vx, vy, vz)
        self._pos.p = Vector3(px, py, pz)
        self._pos.update()
        self.collider.set_position(self._pos.p - self.center_offset)
        return time + smallest

    def _entry_exit(
        self, block: AABB, velocity: Vector3
    ) -> tuple[Vector3, Vector3, Vector3]:
        axes = [
            _sweep_axis(bmin, bmax, cmin, cmax, v)
            for bmin, bmax, cmin, cmax, v in zip(
                block.vmin, block.vmax, self.collider.vmin, self.collider.vmax, velocity
            )
        ]
        dist_entry = Vector3(*(a[0] for a in axes))
        entry = Vector3(*(a[2] for a in axes))
        exit_ = Vector3(*(a[3] for a in axes))
        return dist_entry, entry, exit_

    @staticmethod
    def _hit_normal(entry: Vector3, dist_entry: Vector3, current: Vector3) -> Vector3:
        if entry.x > entry.y and entry.x > entry.z:
            return Vector3(1.0 if dist_entry.x < 0.0 else -1.0, 0.0, 0.0)
        if entry.y > entry.x and entry.y > entry.z:
            return Vector3(0.0, 1.0 if dist_entry.y < 0.0 else -1.0, 0.0)
        if entry.z > entry.x and entry.z > entry.y:
            return Vector3(0.0, 0.0, 1.0 if dist_entry.z < 0.0 else -1.0)
        return current

    def add_acceleration(self, acceleration: Vector3) -> None:
        """Add to the acceleration applied on the next update."""
        self.accel = self.accel + acceleration

    def set_collider_size(self, collider_size: Vector3) -> None:
        """Resize the collider, keeping its minimum corner."""
        self.center_offset = collider_size * 0.5
        self.collider.set_size(collider_size)

    def set_position(self, position: Vector3) -> None:
        """Teleport to an absolute position."""
        self._pos = Position(position)
        self._pos.update()
        self.collider.set_position(self._pos.p - self.center_offset)