"""The four directions of the scene."""

from __future__ import annotations

import math
from enum import Enum


class SceneDirection(Enum):
    """A direction on the scene, numbered counter-clockwise from down."""

    DOWN = 0
    RIGHT = 1
    UP = 2
    LEFT = 3

    def vec(self) -> tuple[float, float]:
        """Unit vector pointing this way."""
        return _VECTORS[self]

    def opposite(self) -> SceneDirection:
        return SceneDirection.from_index(self.value + 2)

    def perp(self) -> SceneDirection:
        """The direction a quarter turn further."""
        return SceneDirection.from_index(self.value + 1)

    def index(self) -> int:
        return self.value

    @classmethod
    def from_index(cls, index: int) -> SceneDirection:
        return cls(index % 4)

    @classmethod
    def from_gravity(cls, gravity: tuple[float, float]) -> SceneDirection:
        """The direction that gravity pulls towards."""
        x, y = gravity
        length = math.hypot(x, y)
        if length == 0.0 or math.isnan(length):
            return cls.DOWN
        x, y = x / length, y / length
        if y > 0.1:
            return cls.UP
        if x < -0.1:
            return cls.LEFT
        if x > 0.1:
            return cls.RIGHT
        return cls.DOWN


_VECTORS = {
    SceneDirection.DOWN: (0.0, -1.0),
    SceneDirection.RIGHT: (1.0, 0.0),
    SceneDirection.UP: (0.0, 1.0),
    SceneDirection.LEFT: (-1.0, 0.0),
}