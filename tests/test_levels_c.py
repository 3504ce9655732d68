import pytest

from combobox.direction import SceneDirection
from combobox.levels_c import level10, level11, level12
from combobox.scene import (
    Buff,
    Color,
    Direction,
    Lamp,
    Level,
    PlayerIndex,
    Rect,
    Standard,
    Wall,
)


def _build(setup):
    level = Level()
    setup(level)
    return level


@pytest.mark.parametrize(
    "setup, audio",
    [
        (level10, "audio/level10.ogg"),
        (level11, "audio/level11.ogg"),
        (level12, "audio/level12.ogg"),
    ],
)
def test_audio_track(setup, audio):
    assert _build(setup).audio == audio


@pytest.mark.parametrize("setup", [level10, level11, level12])
def test_spawn_points_cover_both_modes(setup):
    level = _build(setup)
    indices = {p.index for p in level.spawn_points}
    assert indices == {PlayerIndex.single(), PlayerIndex.two(0), PlayerIndex.two(1)}
    assert len(level.spawn_points) == len(indices)


@pytest.mark.parametrize("setup", [level10, level11, level12])
def test_background_and_finish(setup):
    level = _build(setup)
    assert level.background_color == Color(0.03, 0.03, 0.03)
    assert level.finish_point is not None
    assert level.walls
    assert all(w.rect.min_x <= w.rect.max_x for w in level.walls)
    assert all(w.rect.min_y <= w.rect.max_y for w in level.walls)


def test_level10_settings():
    level = _build(level10)
    assert level.min_view_range == 10.0
    assert level.ambient_light == Color.BLACK
    assert level.boundaries is None
    assert level.finish_point == (-12.0, -4.0)


def test_level10_button_opens_door():
    level = _build(level10)
    masks = {b.mask for b in level.buttons}
    for door in level.doors:
        assert door.open_mask & ~0 in masks or door.open_mask == 0
    assert level.doors[0].direction is SceneDirection.UP


def test_level10_lime_lamp_falls_down():
    level = _build(level10)
    lime = [
        b for b in level.boxes
        if b.combobox.box_type == Lamp(Color.LIME_GREEN * 1.5)
    ]
    assert len(lime) == 1
    assert lime[0].combobox.local_gravity == SceneDirection.DOWN.vec()
    assert (lime[0].x, lime[0].y) == (3.5, -9.5)


def test_level11_boundaries():
    level = _build(level11)
    assert level.boundaries == Rect(-20.0, 24.0, -13.5, 20.0)
    assert level.ambient_light == Color.BLACK


def test_level11_code_door_matches_buttons():
    level = _build(level11)
    code_door = next(d for d in level.doors if d.close_mask)
    assert code_door.open_mask == 4 | 8 | 16
    assert code_door.close_mask == 32 | 64 | 128
    code_buttons = [b for b in level.buttons if b.y == -11.5]
    union = 0
    for button in code_buttons:
        assert button.mask & (button.mask - 1) == 0
        union |= button.mask
    assert union == code_door.open_mask | code_door.close_mask


def test_level11_decoy_buttons_have_no_mask():
    level = _build(level11)
    upper = [b for b in level.buttons if b.y == -4.5]
    lower = [b for b in level.buttons if b.y == -11.5]
    assert all(b.mask == 0 for b in upper)
    assert [b.x for b in upper] == [b.x for b in lower]


def test_level12_reversed_wall_is_normalised():
    level = _build(level12)
    assert Wall(Rect(11.0, 21.0, -5.0, -2.0)) in level.walls


def test_level12_direction_boxes_fight_their_gravity():
    level = _build(level12)
    stacked = [b for b in level.boxes if b.x == -10.5]
    assert stacked
    for placement in stacked:
        box = placement.combobox
        assert isinstance(box.box_type, Direction)
        gx, gy = box.local_gravity
        dx, dy = box.box_type.direction
        assert (gx, gy) == (-dx, -dy)


def test_level12_hints_and_buff():
    level = _build(level12)
    images = [h.image for h in level.hints]
    assert images == [
        "images/final.png",
        "images/choose-wisely.png",
        "images/you-did-it.png",
    ]
    assert any(b.combobox.box_type == Buff(4.0) for b in level.boxes)
    groups = {b.combobox.box_type.group for b in level.boxes
              if isinstance(b.combobox.box_type, Standard)}
    assert groups == {1, 2, 3}
    assert level.boundaries == Rect(-13.0, 28.0, -48.0, 10.0)