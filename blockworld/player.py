"""The player: an entity steered by keyboard and mouse input that edits blocks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .aabb import AABB
from .blocks import BlockType, is_full, not_ignored_by_ray
from .entity import Entity
from .position import Position
from .ray import Ray
from .vectors import Vector2, Vector3

RUN_ACCEL = 20.0
WALK_ACCEL = 14.0
SNEAK_ACCEL = 4.3
JUMP_VEL = 9.5
SWIM_UP_ACCEL = 29.0

MOUSE_SENSITIVITY = 0.005
MAX_PITCH = 1.5707963
FULL_TURN = 6.283185307
EYE_HEIGHT = 0.72
REACH = 5.0
RAY_STEP = 0.1

STANDING_SIZE = Vector3(0.6, 1.8, 0.6)
SNEAKING_SIZE = Vector3(0.6, 1.5, 0.6)


@dataclass(frozen=True)
class InputState:
    """Which controls are held during one frame."""

    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False
    sneak: bool = False
    sprint: bool = False
    jump: bool = False
    attack: bool = False
    place: bool = False
    pick: bool = False


class Player(Entity):
    """An entity that walks, jumps, swims, and breaks, places and picks blocks."""

    def __init__(self, pos: Position) -> None:
        super().__init__(pos, STANDING_SIZE)
        self.selected_block = BlockType.OAK_LEAVES
        self._last_attack = False
        self._last_place = False
        self._last_pick = False
        self._last_sneak = False

    def handle_input(self, inputs: InputState, mouse_delta: Vector2, world) -> None:
        """Apply one frame of input; `world` needs get_block, set_block and update_meshes."""
        self._look(mouse_delta)
        self._move(inputs)
        self._crouch(inputs)

        if inputs.attack and not self._last_attack:
            self._break(world)
        self._last_attack = inputs.attack

        if inputs.place and not self._last_place:
            self._place(world)
        self._last_place = inputs.place

        if inputs.pick and not self._last_pick:
            hit = self._cast(world)
            if hit is not None:
                self.selected_block = BlockType(world.get_block(hit[1]))
        self._last_pick = inputs.pick

    def _look(self, mouse_delta: Vector2) -> None:
        delta = mouse_delta * MOUSE_SENSITIVITY
        pitch = self.rot.x - delta.y
        yaw = self.rot.y - delta.x
        pitch = max(-MAX_PITCH, min(MAX_PITCH, pitch))
        if yaw > FULL_TURN:
            yaw -= FULL_TURN
        if yaw < 0.0:
            yaw += FULL_TURN
        self.rot = Vector2(pitch, yaw)

    def _move(self, inputs: InputState) -> None:
        if inputs.sneak:
            amount = SNEAK_ACCEL
        elif inputs.sprint:
            amount = RUN_ACCEL
        else:
            amount = WALK_ACCEL
        cos_yaw = math.cos(self.rot.y)
        sin_yaw = math.sin(self.rot.y)
        ax, ay, az = self.accel
        if inputs.forward:
            az += amount * cos_yaw
            ax -= amount * sin_yaw
        if inputs.back:
            az -= amount * cos_yaw
            ax += amount * sin_yaw
        if inputs.left:
            ax -= amount * cos_yaw
            az -= amount * sin_yaw
        if inputs.right:
            ax += amount * cos_yaw
            az += amount * sin_yaw

        if inputs.jump:
            if self.in_water:
                ay += SWIM_UP_ACCEL
            if self.on_ground:
                self.vel = Vector3(self.vel.x, JUMP_VEL, self.vel.z)
        self.accel = Vector3(ax, ay, az)

    def _crouch(self, inputs: InputState) -> None:
        if not inputs.sneak and self._last_sneak:
            p = self.position.p
            self.position.p = Vector3(p.x, p.y + 0.2, p.z)
            self.collider.set_position(self.position.p - self.center_offset)
            self.set_collider_size(STANDING_SIZE)
        elif inputs.sneak and not self._last_sneak:
            self.set_collider_size(SNEAKING_SIZE)
        if inputs.sneak and self.in_water:
            self.accel = Vector3(self.accel.x, self.accel.y - SWIM_UP_ACCEL, self.accel.z)
        self._last_sneak = inputs.sneak

    def _block_at(self, point: Vector3) -> Vector3:
        chunk = self.position.chunk_pos
        return Vector3(
            math.floor(point.x) + chunk.x,
            math.floor(point.y),
            math.floor(point.z) + chunk.y,
        )

    def _cast(self, world) -> Optional[tuple[Ray, Vector3]]:
        """Walk a ray from the eyes; return it with the first block it stops on."""
        p = self.position.p
        ray = Ray(Vector3(p.x, p.y + EYE_HEIGHT, p.z), self.rot)
        while ray.length < REACH:
            block_pos = self._block_at(ray.step(RAY_STEP))
            if not_ignored_by_ray(world.get_block(block_pos)):
                return ray, block_pos
        return None

    def _break(self, world) -> None:
        hit = self._cast(world)
        if hit is None:
            return
        world.set_block(hit[1], BlockType.AIR)
        world.update_meshes()

    def _place(self, world) -> None:
        hit = self._cast(world)
        if hit is None:
            return
        ray = hit[0]
        point = ray.step(-RAY_STEP)
        block_pos = self._block_at(point)
        if is_full(self.selected_block):
            cell = AABB(
                Vector3(
                    float(math.floor(point.x)),
                    float(math.floor(point.y)),
                    float(math.floor(point.z)),
                ),
                Vector3(1.0, 1.0, 1.0),
            )
            if self.collider.is_colliding(cell):
                return
        world.set_block(block_pos, self.selected_block)
        world.update_meshes()