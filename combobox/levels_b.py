"""Layouts of levels seven to nine."""

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
_RIGHT = SceneDirection.RIGHT.vec()


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


def level7(builder: Level) -> None:
    """Seventh level: a gravity box and an undo box pulled sideways."""
    inf = 60.0
    builder.set_audio("audio/level7.ogg")
    builder.set_min_view_range(7.0)
    builder.set_background_color(_BACKGROUND)

    _place_walls(builder, [
        (-inf, -4.0, -inf, inf),
        (-inf, 11.0, -inf, -2.0),
        (-inf, 0.0, 2.0, inf),
        (-inf, 2.0, 5.0, inf),
        (-inf, 21.0, 9.0, inf),
        (10.0, 14.0, 6.0, 15.0),
        (7.0, 14.0, -inf, 2.0),
        (13.0, 29.0, 0.0, 2.0),
        (21.0, 23.0, 0.0, 5.4),
        (23.0, 29.0, 2.0, 4.0),
        (21.0, 23.0, 8.5, 14.0),
        (20.0, inf, 11.0, inf),
        (31.0, inf, 9.0, inf),
        (32.0, inf, -inf, inf),
        (-inf, inf, -inf, -8.0),
        (10.0, 22.0, -inf, -7.0),
        (26.0, 27.0, -6.0, -3.0),
        (16.0, 17.0, 4.5, 5.0),
    ])

    builder.spawn_box(Combobox(1.0, Direction(_UP)), -1.0, 0.5)
    builder.spawn_box(Combobox(1.0, Gravity()), 5.5, -1.5)
    builder.spawn_box(Combobox(1.0, Undo()), 11.5, 2.5)

    builder.spawn_button(11.5, 2.5, SceneDirection.UP, 1)
    builder.spawn_door(13.5, 4.0, 4.0, SceneDirection.UP, 1, 0)

    builder.spawn_box(Combobox(1.0, Direction(_UP)), 16.5, 5.5)
    builder.spawn_box(Combobox(1.0, Direction(_RIGHT)), 24.5, 4.5)

    builder.spawn_box(Combobox(1.0, Undo(), local_gravity=_RIGHT), 25.5, -4.5)

    builder.spawn_elevator(
        32.0, -7.0, 26.0, -7.0, ElevatorLoop(period=5.0, current=0.0)
    )

    builder.set_finish_point(18.0, -2.0)

    _spawn_points(builder, (1.5, -1.0), (1.5, -1.0), (3.5, -1.0))


def level8(builder: Level) -> None:
    """Eighth level: a dark room with a button code to enter."""
    inf = 60.0
    builder.set_audio("audio/level8.ogg")
    builder.set_min_view_range(8.0)
    builder.set_ambient_light(Color.BLACK)
    builder.set_background_color(_BACKGROUND)

    _place_walls(builder, [
        (-inf, 0.0, -inf, inf),
        (-inf, inf, -inf, 0.0),
        (-inf, 2.0, -inf, 3.0),
        (-inf, inf, 9.0, 12.0),
        (5.0, inf, 4.0, 5.3),
        (5.0, 6.0, 5.0, 6.5),
        (4.0, 5.0, 4.0, 4.6),
        (-inf, 7.0, 10.0, inf),
        (22.0, inf, 10.0, inf),
        (30.0, inf, -inf, inf),
        (23.0, inf, 5.0, 10.0),
    ])

    lower_buttons = [(19.5, 1), (17.5, 2), (15.5, 4), (13.5, 8), (11.5, 16), (9.5, 32)]
    for x, mask in lower_buttons:
        builder.spawn_button(x, 0.5, SceneDirection.UP, mask)

    builder.spawn_door(25.0, 2.0, 4.0, SceneDirection.UP, 1 | 8 | 16, 2 | 4 | 32)

    builder.spawn_box(Combobox(1.0, Lamp(Color.RED)), 2.5, 0.5)
    builder.spawn_box(Combobox(1.0, Lamp(Color.GREEN)), 5.5, 0.5)
    builder.spawn_box(Combobox(1.0, Lamp(Color.BLUE)), 8.0, 0.5)
    builder.spawn_box(Combobox(1.0, Lamp(Color.PURPLE * 2.0)), 19.5, 6.5)
    builder.spawn_box(Combobox(1.0, Buff(3.0)), 9.5, 6.5)

    for x, _ in lower_buttons:
        builder.spawn_button(x, 12.5, SceneDirection.UP, 0)

    for x in (19.5, 13.5, 11.5):
        builder.spawn_box(Combobox(1.0, Standard(group=0)), x, 12.5)

    _spawn_points(builder, (23.5, 1.0), (21.5, 1.0), (23.5, 1.0))

    builder.spawn_hint(15.5, 2.0, "images/enter-the-code.png")
    builder.spawn_hint(25.5, 9.5, "images/code.png")

    builder.set_finish_point(27.0, 2.0)


def level9(builder: Level) -> None:
    """Ninth level: a long route of doors, buttons and elevators."""
    inf = 60.0
    builder.set_audio("audio/level9.ogg")
    builder.set_min_view_range(7.0)
    builder.set_background_color(_BACKGROUND)

    _spawn_points(builder, (-4.5, -5.0), (-3.5, -5.0), (-5.5, -5.0))

    _place_walls(builder, [
        (-inf, -38.0, -inf, inf),
        (-inf, inf, -inf, -14.0),
        (-27.0, -25.0, -inf, -6.0),
        (-27.0, inf, -inf, -12.0),
        (-14.0, inf, -inf, -11.0),
        (-12.0, inf, -inf, -6.0),
        (-21.0, inf, -8.0, -6.0),
        (0.0, 10.0, -inf, -3.0),
        (6.0, 10.0, -inf, 0.0),
        (10.0, 14.0, -inf, -5.0),
        (14.0, 17.0, -inf, 0.0),
        (14.0, 22.0, -2.0, 0.0),
        (0.0, inf, -inf, -5.0),
        (24.0, 27.0, -inf, 0.0),
        (27.0, 30.0, -inf, -0.5),
        (30.0, inf, -inf, inf),
        (-inf, inf, 9.0, inf),
        (-9.0, 21.0, 8.0, inf),
        (0.0, 12.0, 6.0, inf),
        (0.0, 4.0, 3.5, inf),
        (-9.0, 21.0, 7.0, inf),
        (-inf, -36.0, 7.0, inf),
        (-35.0, -30.0, -11.0, 0.0),
        (-33.0, -27.0, -2.0, 2.0),
        (-31.0, -17.0, -1.5, 4.0),
        (-14.5, -11.0, -1.0, 4.0),
        (-13.0, -10.0, -3.0, 3.0),
        (-14.5, 0.0, 0.0, 2.0),
        (26.0, 28.0, 4.0, 5.0),
        (27.5, 28.0, 0.5, 5.0),
        (-24.0, -23.0, 4.0, 6.0),
    ])

    builder.spawn_box(Combobox(1.0, Standard(group=1)), -0.5, -5.5)
    builder.spawn_box(Combobox(1.0, Direction(_UP)), -15.5, -5.5)
    builder.spawn_box(Combobox(1.0, Standard(group=1)), -12.5, 4.5)
    builder.spawn_box(Combobox(1.0, Standard(group=1)), -17.5, -11.5)
    builder.spawn_box(Combobox(1.0, Buff(4.0)), -13.0, -10.5)
    builder.spawn_box(Combobox(1.0, Undo()), -29.5, 4.5)
    builder.spawn_box(Combobox(1.0, Gravity()), -30.5, -16.5)
    builder.spawn_box(Combobox(1.0, Direction(_UP)), -35.5, -16.5)
    builder.spawn_box(Combobox(1.0, Undo(), local_gravity=_UP), 28.5, 8.5)
    builder.spawn_box(Combobox(0.9, Standard(group=1)), 29.1, 0.0)
    builder.spawn_box(Combobox(0.9, Direction(_UP)), 27.7, 0.0)
    builder.spawn_box(Combobox(1.0, Standard(group=1)), 19.5, -4.5)

    builder.spawn_door(-11.5, -4.5, 3.0, SceneDirection.UP, 1, 0)
    builder.spawn_door(-28.5, -6.5, 3.0, SceneDirection.RIGHT, 2 | 4, 0)
    builder.spawn_door(12.0, -0.5, 4.0, SceneDirection.LEFT, 8 | 16, 0)

    builder.spawn_button(-8.5, -5.5, SceneDirection.UP, 1)
    builder.spawn_button(-18.5, -2.0, SceneDirection.DOWN, 2)
    builder.spawn_button(-20.5, -2.0, SceneDirection.DOWN, 4)
    builder.spawn_button(15.5, 0.5, SceneDirection.UP, 8)
    builder.spawn_button(17.5, 0.5, SceneDirection.UP, 16)

    elevator_height = 0.1
    builder.spawn_elevator(
        -23.0, -12.0 + elevator_height, -23.0, -6.0 - elevator_height,
        ElevatorLoop(period=6.0, current=0.0),
    )
    builder.spawn_elevator(
        23.0, -5.0 + elevator_height, 23.0, 4.0 - elevator_height,
        ElevatorLoop(period=6.0, current=0.0),
    )

    builder.set_finish_point(12.0, -3.0)