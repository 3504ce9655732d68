import pytest

from combobox.direction import SceneDirection
from combobox.scene import (
    Buff,
    Color,
    Combobox,
    ElevatorLoop,
    Gravity,
    Lamp,
    Level,
    PlayerIndex,
    Rect,
    Standard,
)


def test_scaled_keeps_alpha_and_multiplies_channels():
    color = Color(0.2, 0.4, 0.5, 0.7)
    result = color.scaled(2.0)
    assert result.a == 0.7
    assert result == Color(0.4, 0.8, 1.0, 0.7)


def test_mul_matches_scaled():
    assert Color.BLUE * 1.3 == Color.BLUE.scaled(1.3)
    assert Color.WHITE.scaled(1.0) == Color.WHITE


def test_player_index_counts():
    assert PlayerIndex.single().number_of_players() == 1
    assert PlayerIndex.two(1).number_of_players() == 2
    assert PlayerIndex.two(1).slot == 1
    assert PlayerIndex.two(0) != PlayerIndex.single()


def test_player_index_out_of_range():
    with pytest.raises(ValueError):
        PlayerIndex.two(2)


def test_combobox_defaults():
    box = Combobox(1.0, Standard(group=1))
    assert box.combined_from == []
    assert box.local_gravity is None
    assert box.box_type == Standard(1)


def test_rect_from_corners_normalizes():
    rect = Rect.from_corners(21.0, 11.0, -2.0, -5.0)
    assert (rect.min_x, rect.max_x, rect.min_y, rect.max_y) == (11.0, 21.0, -5.0, -2.0)
    assert rect.contains(15.0, -3.0)
    assert not rect.contains(15.0, 0.0)


def test_level_settings():
    level = Level()
    level.set_audio("audio/level1.ogg")
    level.set_min_view_range(8.0)
    level.set_background_color(Color(0.03, 0.03, 0.03))
    level.set_ambient_light(Color.BLACK)
    level.set_finish_point(33.0, 8.5)
    level.set_boundaries(-20.0, 24.0, -13.5, 20.0)
    assert level.audio == "audio/level1.ogg"
    assert level.min_view_range == 8.0
    assert level.background_color == Color(0.03, 0.03, 0.03)
    assert level.ambient_light == Color.BLACK
    assert level.finish_point == (33.0, 8.5)
    assert level.boundaries == Rect(-20.0, 24.0, -13.5, 20.0)


def test_spawn_point_is_replaced_per_index():
    level = Level()
    level.set_spawn_point(5.5, 1.0, PlayerIndex.single())
    level.set_spawn_point(7.5, 1.0, PlayerIndex.two(1))
    level.set_spawn_point(6.0, 2.0, PlayerIndex.single())
    singles = [p for p in level.spawn_points if p.index == PlayerIndex.single()]
    assert len(level.spawn_points) == 2
    assert [(p.x, p.y) for p in singles] == [(6.0, 2.0)]


def test_spawned_objects_are_recorded_in_order():
    level = Level()
    level.spawn_wall(-60.0, 0.0, -60.0, 60.0)
    level.spawn_wall(12.0, 14.0, 5.0, 6.0)
    level.spawn_box(Combobox(1.0, Buff(3.0)), 7.5, 5.5)
    level.spawn_box(Combobox(1.0, Lamp(Color.RED)), 2.5, 0.5)
    level.spawn_button(18.5, 4.5, SceneDirection.UP, 1)
    level.spawn_door(20.5, 1.25, 2.5, SceneDirection.UP, 1, 0)
    level.spawn_elevator(9.0, 0.1, 9.0, 4.9, ElevatorLoop(period=5.0))
    level.spawn_hint(4.0, 3.0, "images/controls.png")

    assert [w.rect.max_x for w in level.walls] == [0.0, 14.0]
    assert [b.combobox.box_type for b in level.boxes] == [Buff(3.0), Lamp(Color.RED)]
    assert level.buttons[0].mask == 1
    assert level.doors[0].direction is SceneDirection.UP
    assert level.doors[0].close_mask == 0
    assert level.elevators[0].start == (9.0, 0.1)
    assert level.elevators[0].kind.current == 0.0
    assert level.hints[0].image == "images/controls.png"


def test_box_types_compare_by_value():
    assert Gravity() == Gravity()
    assert Standard(1) != Standard(2)