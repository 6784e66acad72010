"""A ray that is walked forward in fixed steps from a start point."""

from __future__ import annotations

import math

from .vectors import Vector2, Vector3


class Ray:
    """A ray cast from `start_pos` in the direction given by pitch and yaw."""

    def __init__(self, start_pos: Vector3, rot: Vector2) -> None:
        self._start = start_pos
        self._direction = Vector3(
            -math.sin(rot.y) * math.cos(rot.x),
            math.sin(rot.x),
            math.cos(rot.y) * math.cos(rot.x),
        )
        self._length = 0.0

    @property
    def length(self) -> float:
        """How far the ray has been walked so far."""
        return self._length

    @property
    def direction(self) -> Vector3:
        return self._direction

    def step(self, step_length: float) -> Vector3:
        """Advance by `step_length` (negative steps back) and return the new point."""
        self._length += step_length
        return self._start + self._direction * self._length