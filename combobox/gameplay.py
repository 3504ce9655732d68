"""Level loading and the per-frame rules of a running level."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from combobox.levels_a import level1, level2, level3, level4, level5, level6
from combobox.levels_b import level7, level8, level9
from combobox.levels_c import level10, level11, level12
from combobox.scene import Level, Rect, SpawnPoint

BOUNDARY_MARGIN = 100.0
UNBOUNDED_LIMIT = 10000.0
FINISH_RADIUS = 120.0
FINISH_DELAY = 1.0

LEVELS: dict[int, Callable[[Level], None]] = {
    1: level1,
    2: level2,
    3: level3,
    4: level4,
    5: level5,
    6: level6,
    7: level7,
    8: level8,
    9: level9,
    10: level10,
    11: level11,
    12: level12,
}


def build_level(number: int) -> Level:
    """Lay out level ``number``; an unknown number gives an empty scene."""
    level = Level()
    setup = LEVELS.get(number)
    if setup is not None:
        setup(level)
    return level


def _outside(position: tuple[float, float], boundaries: Rect | None) -> bool:
    x, y = position
    if boundaries is None:
        return math.hypot(x, y) > UNBOUNDED_LIMIT
    return (
        x < boundaries.min_x - BOUNDARY_MARGIN
        or x > boundaries.max_x + BOUNDARY_MARGIN
        or y < boundaries.min_y - BOUNDARY_MARGIN
        or y > boundaries.max_y + BOUNDARY_MARGIN
    )


def out_of_bounds(
    positions: Iterable[tuple[float, float]], boundaries: Rect | None
) -> bool:
    """True when there are players and every one of them has left the scene."""
    positions = list(positions)
    return bool(positions) and all(_outside(p, boundaries) for p in positions)


def all_players_finished(
    players: Iterable[tuple[float, float]],
    finish_points: Iterable[tuple[float, float]],
) -> bool:
    """True when there are players and each one is near some finish point."""
    players = list(players)
    finish_points = list(finish_points)
    if not players:
        return False
    return all(
        any(
            math.hypot(px - fx, py - fy) < FINISH_RADIUS
            for fx, fy in finish_points
        )
        for px, py in players
    )


def active_spawn_points(level: Level, players: int) -> list[SpawnPoint]:
    """Spawn points used in a game of ``players`` players."""
    return [p for p in level.spawn_points if p.index.number_of_players() == players]


@dataclass
class FinishTimer:
    """Waits for all players to stay at the finish before completing a level."""

    elapsed: float = 0.0

    def tick(self, delta: float, all_finished: bool, completed: bool) -> bool:
        """Advance by ``delta`` seconds; return True when the level completes."""
        if all_finished and not completed:
            self.elapsed += delta
            if self.elapsed > FINISH_DELAY:
                self.elapsed = 0.0
                return True
            return False
        self.elapsed = 0.0
        return False