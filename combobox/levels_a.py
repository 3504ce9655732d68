"""Layouts of the first six levels."""

from __future__ import annotations

from combobox.direction import SceneDirection
from combobox.scene import (
    Buff,
    Color,
    Combobox,
    Direction,
    ElevatorLoop,
    Level,
    PlayerIndex,
    Standard,
    Undo,
)

_BACKGROUND = Color(0.03, 0.03, 0.03)
_UP = (0.0, 1.0)


def _walls(builder: Level, inf: float, walls: list[tuple[float, float, float, float]]) -> None:
    """Place walls given as (min_x, max_x, min_y, max_y); None stands for -inf, inf."""
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


def level1(builder: Level) -> None:
    """First level: a few boxes of one group to combine."""
    inf = 60.0
    builder.set_audio("audio/level1.ogg")
    builder.set_min_view_range(8.0)
    builder.set_background_color(_BACKGROUND)

    _spawn_points(builder, (5.5, 1.0), (5.5, 1.0), (7.5, 1.0))

    builder.spawn_hint(4.0, 3.0, "images/controls.png")
    builder.spawn_hint(14.0, 1.5, "images/controls-2.png")

    _walls(builder, inf, [
        (-inf, 0.0, -inf, inf),
        (-inf, 2.0, -inf, 0.3),
        (-inf, inf, -inf, 0.0),
        (9.0, inf, -inf, 3.0),
        (12.0, 14.0, 5.0, 6.0),
        (13.0, 19.0, 6.0, 7.0),
        (17.0, 19.0, -inf, 7.0),
        (17.0, 22.0, -inf, 5.0),
        (30.0, inf, -inf, 6.5),
        (37.0, inf, -inf, inf),
        (-inf, inf, 13.0, inf),
        (23.0, 27.0, 11.0, inf),
        (7.0, 11.0, 11.0, inf),
        (3.0, 7.0, 8.0, inf),
        (-inf, 3.0, 6.0, inf),
    ])

    for x, y in [(2.5, 0.5), (16.5, 3.5), (21.5, 5.5), (26.5, 3.5), (28.5, 3.5)]:
        builder.spawn_box(Combobox(1.0, Standard(group=1)), x, y)

    builder.set_finish_point(33.0, 8.5)


def level2(builder: Level) -> None:
    """Second level: heavy boxes of two groups."""
    inf = 60.0
    builder.set_audio("audio/level2.ogg")
    builder.set_min_view_range(8.0)
    builder.set_background_color(_BACKGROUND)

    _spawn_points(builder, (10.5, 1.0), (9.5, 1.0), (11.5, 1.0))

    _walls(builder, inf, [
        (-inf, 0.0, -inf, inf),
        (-inf, 7.0, -inf, 4.0),
        (-inf, inf, -inf, 0.0),
        (18.0, inf, -inf, 4.5),
        (24.0, inf, -inf, inf),
        (15.0, inf, 11.0, inf),
        (15.0, 20.0, 10.0, inf),
        (10.0, 15.0, 12.0, inf),
        (12.0, 14.0, 11.0, inf),
        (8.0, 10.0, 9.0, inf),
        (-inf, 10.0, 11.0, inf),
        (-inf, 6.0, 8.0, inf),
    ])

    for x in (1.5, 3.5, 5.5):
        builder.spawn_box(Combobox(1.0, Standard(group=1)), x, 4.5)
    builder.spawn_box(Combobox(4.0, Standard(group=2)), 14.0, 1.0)
    builder.spawn_box(Combobox(4.0, Standard(group=1)), 17.0, 1.0)

    builder.set_finish_point(21.0, 6.5)


def level3(builder: Level) -> None:
    """Third level: looping elevators."""
    inf = 60.0
    builder.set_audio("audio/level3.ogg")
    builder.set_background_color(_BACKGROUND)
    builder.set_min_view_range(8.0)

    _spawn_points(builder, (21.5, 3.0), (20.5, 3.0), (21.2, 3.0))

    _walls(builder, inf, [
        (-inf, 0.0, -inf, inf),
        (-inf, 8.0, -inf, 5.0),
        (-inf, 8.0, -inf, 0.0),
        (10.0, 17.0, -inf, 5.0),
        (17.0, inf, -inf, 2.0),
        (24.0, inf, -inf, inf),
        (14.0, inf, 12.0, inf),
        (19.0, 21.0, 10.0, inf),
        (11.0, inf, 14.0, inf),
        (-inf, inf, 16.0, inf),
        (-inf, 7.0, 10.0, 10.5),
        (-inf, 3.0, 9.0, 10.5),
    ])

    builder.spawn_box(Combobox(1.0, Standard(group=2)), 3.5, 5.5)
    builder.spawn_box(Combobox(1.0, Standard(group=2)), 5.5, 5.5)
    builder.spawn_box(Combobox(1.0, Standard(group=1)), 13.5, 5.5)
    builder.spawn_box(Combobox(1.0, Standard(group=1)), 22.5, 2.5)

    elevator_height = 0.1
    builder.spawn_elevator(
        9.0, 0.0 + elevator_height, 9.0, 5.0 - elevator_height,
        ElevatorLoop(period=5.0, current=0.0),
    )
    builder.spawn_elevator(
        18.0, 2.0 + elevator_height, 18.0, 5.0 - elevator_height,
        ElevatorLoop(period=5.0, current=0.0),
    )

    builder.set_finish_point(4.0, 12.5)


def level4(builder: Level) -> None:
    """Fourth level: buff boxes."""
    inf = 60.0
    builder.set_audio("audio/level4.ogg")
    builder.set_background_color(_BACKGROUND)
    builder.set_min_view_range(8.0)

    _spawn_points(builder, (2.0, 4.0), (1.0, 4.0), (3.0, 4.0))

    _walls(builder, inf, [
        (-inf, 0.0, -inf, inf),
        (-inf, 4.0, -inf, 3.0),
        (-inf, 10.5, -inf, 1.0),
        (-inf, inf, -inf, 0.5),
        (15.0, 19.0, -inf, 5.0),
        (15.0, inf, -inf, 3.0),
        (26.0, inf, -inf, 6.5),
        (31.0, inf, -inf, inf),
        (-inf, inf, 13.0, inf),
        (23.0, 25.0, 10.0, inf),
        (-inf, 25.0, 12.0, inf),
        (-inf, 12.0, 10.0, inf),
        (9.0, 10.0, 5.5, inf),
        (-inf, 10.0, 9.0, inf),
        (-inf, 3.0, 8.0, inf),
        (6.0, 9.0, 3.5, 4.0),
        (10.0, 13.5, 6.0, 6.5),
        (19.0, 21.0, 7.5, 8.0),
    ])

    builder.spawn_box(Combobox(1.0, Standard(group=1)), 6.5, 1.5)
    builder.spawn_box(Combobox(1.0, Standard(group=1)), 10.0, 1.5)
    builder.spawn_box(Combobox(1.0, Buff(3.0)), 7.5, 5.5)
    builder.spawn_box(Combobox(1.0, Standard(group=1)), 12.0, 7.0)
    builder.spawn_box(Combobox(1.0, Buff(3.0)), 20.0, 8.5)

    builder.set_finish_point(29.0, 8.5)


def level5(builder: Level) -> None:
    """Fifth level: an undo box, a button and a door."""
    inf = 70.0
    builder.set_audio("audio/level5.ogg")
    builder.set_background_color(_BACKGROUND)
    builder.set_min_view_range(8.0)

    _spawn_points(builder, (3.5, 2.0), (3.0, 2.0), (5.0, 2.0))

    _walls(builder, inf, [
        (-inf, 0.0, -inf, inf),
        (-inf, 2.0, -inf, 2.0),
        (-inf, 8.0, -inf, 1.0),
        (-inf, inf, -inf, 0.0),
        (30.0, inf, -inf, 4.0),
        (36.0, inf, -inf, inf),
        (-inf, inf, 12.0, inf),
        (17.0, 26.0, 9.0, inf),
        (23.0, 24.0, 2.5, inf),
        (20.0, 24.0, 2.5, 5.0),
        (14.0, 24.0, 2.5, 4.0),
        (-inf, 26.0, 10.0, inf),
        (-inf, 7.0, 8.0, inf),
        (-inf, 3.0, 5.0, inf),
    ])

    builder.spawn_box(Combobox(1.0, Buff(3.0)), 1.5, 2.5)
    builder.spawn_box(Combobox(1.0, Standard(group=1)), 6.5, 1.5)
    builder.spawn_box(Combobox(1.0, Buff(3.0)), 12.5, 0.5)
    builder.spawn_box(Combobox(1.0, Undo()), 15.5, 4.5)
    builder.spawn_box(Combobox(1.0, Standard(group=1)), 21.5, 5.5)
    builder.spawn_box(Combobox(2.0, Standard(group=2)), 28.0, 1.0)

    builder.spawn_door(20.5, 1.25, 2.5, SceneDirection.UP, 1, 0)
    builder.spawn_button(18.5, 4.5, SceneDirection.UP, 1)

    builder.set_finish_point(33.0, 6.0)


def level6(builder: Level) -> None:
    """Sixth level: direction boxes, two doors and an elevator."""
    inf = 70.0
    builder.set_audio("audio/level6.ogg")
    builder.set_background_color(_BACKGROUND)
    builder.set_min_view_range(8.0)

    _spawn_points(builder, (4.5, 1.0), (4.5, 1.0), (6.5, 1.0))

    _walls(builder, inf, [
        (-inf, 0.0, -inf, inf),
        (-inf, 3.0, -inf, 2.0),
        (-inf, inf, -inf, 0.0),
        (10.0, inf, -inf, 3.0),
        (33.5, inf, -inf, 4.5),
        (34.0, inf, -inf, 10.0),
        (33.0, 34.0, 8.0, 8.5),
        (39.0, inf, -inf, inf),
        (35.0, inf, 14.0, inf),
        (34.0, 35.0, 13.0, inf),
        (32.0, inf, 15.0, inf),
        (28.0, inf, 15.0, inf),
        (-inf, inf, 15.5, inf),
        (-inf, 24.0, 15.0, inf),
        (18.0, 22.0, 6.0, inf),
        (18.5, 24.0, 6.0, 11.0),
        (-inf, 22.0, 10.0, inf),
        (8.0, 10.0, 8.0, inf),
        (-inf, 10.0, 9.0, inf),
        (-inf, 6.0, 6.0, inf),
        (-inf, 3.0, 4.0, inf),
        (30.0, 30.6, 10.0, 10.5),
        (28.0, 30.0, 6.0, 11.0),
        (30.0, 31.0, 5.0, 7.0),
        (31.0, 32.0, 5.0, 6.0),
        (15.0, 19.0, 7.0, 12.0),
    ])

    builder.spawn_box(Combobox(1.0, Direction(_UP)), 1.5, 2.5)
    builder.spawn_box(Combobox(1.0, Direction(_UP)), 11.5, 3.5)
    builder.spawn_box(Combobox(1.0, Standard(group=1)), 15.5, 3.5)
    builder.spawn_box(Combobox(16.0, Standard(group=2)), 26.0, 5.0)
    builder.spawn_box(Combobox(1.0, Undo()), 29.5, 11.5)

    builder.spawn_door(19.5, 4.5, 3.0, SceneDirection.UP, 1, 0)
    builder.spawn_door(34.5, 11.5, 3.0, SceneDirection.UP, 2, 0)

    builder.spawn_button(13.5, 9.5, SceneDirection.DOWN, 1)
    builder.spawn_button(26.0, 3.5, SceneDirection.UP, 2)

    elevator_height = 0.10
    builder.spawn_elevator(
        9.0,
        0.0 + elevator_height - 0.05,
        9.0,
        3.0 - elevator_height + 0.01,
        ElevatorLoop(period=5.0, current=0.0),
    )

    builder.set_finish_point(37.0, 12.0)