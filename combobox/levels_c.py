"""Layouts of the last three levels."""

from __future__ import annotations

from combobox.direction import SceneDirection
from combobox.scene import (
    Buff,
    Color,
    Combobox,
    Direction,
    ElevatorLoop,
    Gravity,
    Lamp,
    Level,
    PlayerIndex,
    Standard,
    Undo,
)

_BACKGROUND = Color(0.03, 0.03, 0.03)
_UP = SceneDirection.UP.vec()
_DOWN = SceneDirection.DOWN.vec()
_RIGHT = SceneDirection.RIGHT.vec()

__all__ = ["level10", "level11", "level12", "ElevatorLoop"]


def _place_walls(
    builder: Level, walls: list[tuple[float, float, float, float]]
) -> None:
    """Place walls given as (min_x, max_x, min_y, max_y)."""
    for min_x, max_x, min_y, max_y in walls:
        builder.spawn_wall(min_x, max_x, min_y, max_y)


def _spawn_points(
    builder: Level,
    single: tuple[float, float],
    first: tuple[float, float],
    second: tuple[float, float],
) -> None:
    builder.set_spawn_point(*single, PlayerIndex.single())
    builder.set_spawn_point(*first, PlayerIndex.two(0))
    builder.set_spawn_point(*second, PlayerIndex.two(1))


def level10(builder: Level) -> None:
    """Tenth level: a dark cave lit by lamps."""
    inf = 60.0
    builder.set_audio("audio/level10.ogg")
    builder.set_min_view_range(10.0)
    builder.set_ambient_light(Color.BLACK)
    builder.set_background_color(_BACKGROUND)

    _place_walls(builder, [
        (-15.0, -14.0, -1.0, 0.0),
        (-13.0, -12.0, -1.0, 0.0),
        (-11.0, -10.0, -1.0, 0.0),
        (-9.0, -8.0, -1.0, 0.0),
        (-7.0, 0.0, -1.0, 0.0),
        (-inf, 3.0, -2.0, -1.0),
        (-inf, -17.0, -inf, inf),
        (-17.0, -14.0, 6.5, inf),
        (-13.0, -12.1, 6.0, inf),
        (-10.8, -10.0, 6.0, 10.0),
        (-9.0, -8.0, 6.0, 10.0),
        (-7.0, -5.0, 6.0, 10.0),
        (-6.0, 1.0, 6.0, 7.0),
        (0.0, 1.0, -2.0, 7.0),
        (1.0, 2.0, -6.0, 4.0),
        (-inf, -12.1, 10.0, inf),
        (-inf, inf, 14.0, inf),
        (-2.0, inf, 11.0, inf),
        (-10.8, -5.0, 10.0, 11.0),
        (2.0, 3.0, 10.0, 11.0),
        (17.0, 18.0, 8.0, 11.0),
        (21.0, inf, 8.0, 11.0),
        (17.0, inf, -1.0, 8.0),
        (20.0, inf, -4.0, -1.0),
        (7.0, 8.0, -1.0, 6.0),
        (13.0, 14.0, -1.0, 6.0),
        (7.0, 14.0, -1.0, 0.0),
        (7.0, 14.0, 5.0, 6.0),
        (2.0, 14.0, -6.0, -4.0),
        (17.0, inf, -inf, -4.0),
        (-inf, inf, -inf, -10.0),
        (-4.0, -2.0, -inf, -6.5),
        (-inf, -4.0, -inf, -6.0),
        (-inf, -14.0, -inf, -2.0),
        (5.0, 5.9, 8.5, 9.0),
    ])

    builder.spawn_box(Combobox(0.9, Lamp(Color.RED * 1.3)), -7.5, -0.5)
    builder.spawn_box(Combobox(0.9, Lamp(Color.BLUE * 1.3)), -9.5, -0.5)
    builder.spawn_box(Combobox(0.9, Lamp(Color.YELLOW * 1.2)), -11.5, -0.5)
    builder.spawn_box(Combobox(0.9, Lamp(Color.GREEN * 1.1)), -13.5, -0.5)

    builder.spawn_box(Combobox(0.98, Gravity()), -16.5, -0.5)
    builder.spawn_box(Combobox(0.9, Direction(_UP)), -2.5, 0.5)
    builder.spawn_box(Combobox(0.9, Direction(_UP)), -1.0, 0.5)

    builder.spawn_box(Combobox(0.85, Direction(_DOWN)), 4.4, 10.5)
    builder.spawn_box(Combobox(0.85, Direction(_RIGHT)), 6.6, 10.5)
    builder.spawn_box(Combobox(0.85, Gravity()), 5.5, 8.0)

    builder.spawn_box(Combobox(1.0, Lamp(Color.CYAN * 1.5)), 11.5, 2.5)
    builder.spawn_box(Combobox(1.0, Lamp(Color.ORANGE * 1.5)), 19.5, 9.5)

    builder.spawn_box(Combobox(0.98, Undo()), 19.0, -2.5)
    builder.spawn_box(Combobox(1.0, Buff(3.0)), 9.5, -9.5)
    builder.spawn_box(
        Combobox(1.0, Lamp(Color.LIME_GREEN * 1.5), local_gravity=_DOWN), 3.5, -9.5
    )

    builder.spawn_button(0.5, -9.5, SceneDirection.UP, 1)
    builder.spawn_door(-4.5, -4.5, 3.0, SceneDirection.UP, 1, 0)

    _spawn_points(builder, (-5.5, 1.0), (-6.0, 1.0), (-4.5, 1.0))

    builder.set_finish_point(-12.0, -4.0)


def level11(builder: Level) -> None:
    """Eleventh level: lamps of four colours and a six-button code."""
    inf = 60.0
    builder.set_audio("audio/level11.ogg")
    builder.set_background_color(_BACKGROUND)
    builder.set_boundaries(-20.0, 24.0, -13.5, 20.0)
    builder.set_min_view_range(8.0)
    builder.set_ambient_light(Color.BLACK)

    _spawn_points(builder, (-14.5, -2.0), (-15.0, -2.0), (-9.0, -2.0))

    builder.spawn_hint(6.0, -9.5, "images/enter-the-code.png")

    _place_walls(builder, [
        (-inf, -17.0, -inf, inf),
        (-inf, -16.0, -inf, -1.0),
        (-inf, -12.0, -inf, -3.0),
        (-inf, -7.0, -inf, -6.0),
        (-10.0, -7.0, -inf, -3.0),
        (-10.0, 0.0, -8.0, -3.0),
        (-inf, inf, -inf, -12.0),
        (16.0, inf, -inf, -8.0),
        (18.0, inf, -inf, inf),
        (10.0, inf, 7.0, inf),
        (-inf, inf, 10.0, inf),
        (-inf, 2.0, 8.0, inf),
        (-inf, -14.0, 3.0, inf),
        (-inf, -16.0, 2.0, inf),
        (-inf, -11.8, 4.0, 5.0),
        (-inf, -12.0, 3.0, 4.0),
        (-10.0, 15.0, -5.5, -5.0),
        (13.0, 15.0, -5.0, 4.0),
        (0.0, 15.0, 0.0, 4.0),
        (0.0, 2.0, 0.0, 5.0),
        (-3.0, 0.0, -8.0, 2.0),
        (-6.2, 15.0, 0.7, 2.0),
        (-8.0, -6.0, 2.0, 5.0),
        (-10.0, -6.0, 3.0, 5.0),
        (-10.2, -6.0, 4.0, 5.0),
    ])

    builder.spawn_box(Combobox(1.0, Standard(group=1)), -16.5, -0.5)
    builder.spawn_box(Combobox(4.0, Lamp(Color.GREEN)), -11.0, -5.0)
    builder.spawn_box(Combobox(1.0, Lamp(Color.RED)), -7.5, 5.5)
    builder.spawn_box(Combobox(1.0, Direction(_UP)), -4.0, -2.5)
    builder.spawn_box(Combobox(1.0, Gravity()), 6.5, 4.5)
    builder.spawn_box(Combobox(1.0, Direction(_UP)), 4.5, 4.5)
    builder.spawn_box(Combobox(1.0, Direction(_UP)), -1.0, -11.5)
    for x in (1.5, 3.5, 5.5):
        builder.spawn_box(Combobox(1.0, Standard(group=1)), x, -2.5)

    builder.spawn_box(Combobox(1.4, Lamp(Color.RED)), 13.3, -10.0)
    builder.spawn_box(Combobox(1.4, Lamp(Color.GREEN)), 14.5, -10.0)
    builder.spawn_box(Combobox(1.4, Lamp(Color.BLUE * 1.3)), 13.3, -11.3)
    builder.spawn_box(Combobox(1.4, Lamp(Color.YELLOW)), 14.5, -11.3)
    builder.spawn_box(Combobox(1.0, Undo()), 12.5, 6.5)

    builder.spawn_door(-5.5, -1.0, 4.0, SceneDirection.DOWN, 1, 0)
    builder.spawn_door(10.5, 5.5, 3.0, SceneDirection.DOWN, 2, 0)
    builder.spawn_door(
        -2.5, -10.0, 4.0, SceneDirection.UP, 4 | 8 | 16, 32 | 64 | 128
    )

    builder.spawn_button(-7.5, -2.5, SceneDirection.UP, 1)
    builder.spawn_button(6.5, 9.5, SceneDirection.DOWN, 2)
    for i in range(6):
        x = 1.5 + i * 2.0
        builder.spawn_button(x, -4.5, SceneDirection.UP, 0)
        builder.spawn_button(x, -11.5, SceneDirection.UP, 2 ** (2 + i))

    builder.set_finish_point(-5.0, -10.0)


def level12(builder: Level) -> None:
    """Twelfth and final level: a choice of paths down a deep shaft."""
    inf = 90.0
    builder.set_boundaries(-13.0, 28.0, -48.0, 10.0)
    builder.set_audio("audio/level12.ogg")
    builder.set_min_view_range(6.5)
    builder.set_background_color(_BACKGROUND)

    builder.spawn_hint(-6.0, 4.5, "images/final.png")
    builder.spawn_hint(-3.0, -4.0, "images/choose-wisely.png")
    builder.spawn_hint(-3.0, -42.0, "images/you-did-it.png")

    _place_walls(builder, [
        (-9.0, 0.0, 0.0, 1.0),
        (-10.0, -9.0, -inf, 1.0),
        (-inf, -10.0, -inf, -4.0),
        (-inf, -11.0, -inf, inf),
        (-inf, -9.0, 7.0, inf),
        (-inf, inf, 8.0, inf),
        (-10.0, -9.0, 3.0, inf),
        (-3.0, inf, 6.0, inf),
        (17.0, inf, 2.0, inf),
        (24.0, inf, -inf, inf),
        (15.0, inf, -inf, -10.0),
        (9.0, 15.0, -inf, -12.0),
        (2.0, 9.0, -40.0, -8.0),
        (2.0, 5.0, -40.0, -6.0),
        (-2.0, 0.0, -39.0, -6.0),
        (-6.0, -4.0, -39.0, -6.0),
        (-inf, -8.0, -inf, -6.0),
        (-3.0, 0.0, 0.0, 3.0),
        (0.0, 12.0, -1.0, 2.0),
        (9.0, 12.0, -3.0, 2.0),
        (11.0, 21.0, -2.0, -5.0),
        (-inf, inf, -inf, -44.0),
    ])

    _spawn_points(builder, (-7.0, 2.0), (-7.0, 2.0), (-5.5, 2.0))

    builder.set_finish_point(7.0, -42.0)

    builder.spawn_button(-7.5, 7.5, SceneDirection.DOWN, 1)
    builder.spawn_door(-0.5, 4.5, 3.0, SceneDirection.DOWN, 1, 0)

    builder.spawn_box(Combobox(1.0, Standard(group=1)), -2.5, 3.5)

    for i in range(3):
        builder.spawn_box(
            Combobox(0.9, Direction(_DOWN), local_gravity=_UP), -10.5, 3.5 + i
        )
    for i in range(4):
        builder.spawn_box(
            Combobox(0.9, Direction(_UP), local_gravity=_DOWN), -10.5, -0.5 - i
        )

    builder.spawn_box(Combobox(0.9, Gravity()), -9.5, 1.5)

    for x in (1.5, 3.5, 5.5, 7.5, 9.5):
        builder.spawn_box(Combobox(1.0, Standard(group=1)), x, 3.5)
    builder.spawn_box(Combobox(1.0, Buff(4.0)), 11.5, 3.5)

    builder.spawn_box(Combobox(0.9, Gravity()), 18.5, -1.5)
    builder.spawn_box(Combobox(0.9, Direction(_DOWN)), 20.5, -1.5)

    builder.spawn_box(Combobox(1.0, Standard(group=1)), 19.0, -8.5)
    builder.spawn_box(Combobox(1.0, Standard(group=2)), 18.5, -9.5)
    builder.spawn_box(Combobox(1.0, Standard(group=3)), 19.5, -9.5)