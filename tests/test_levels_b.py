import pytest

from combobox.direction import SceneDirection
from combobox.levels_b import level7, level8, level9
from combobox.scene import Color, Gravity, Lamp, Level, Standard, Undo

SETUPS = [level7, level8, level9]


def build(setup):
    level = Level()
    setup(level)
    return level


def strictly_inside(rect, x, y):
    return rect.min_x < x < rect.max_x and rect.min_y < y < rect.max_y


@pytest.mark.parametrize(
    "setup, audio",
    [
        (level7, "audio/level7.ogg"),
        (level8, "audio/level8.ogg"),
        (level9, "audio/level9.ogg"),
    ],
)
def test_audio_track(setup, audio):
    assert build(setup).audio == audio


@pytest.mark.parametrize("setup", SETUPS)
def test_building_twice_gives_equal_levels(setup):
    first = Level()
    setup(first)
    second = Level()
    setup(second)
    assert first == second
    assert first.walls == second.walls
    assert len(first.walls) > 0
    assert Level() != first


@pytest.mark.parametrize("setup", SETUPS)
def test_background_is_dark_grey(setup):
    assert build(setup).background_color == Color(0.03, 0.03, 0.03)


@pytest.mark.parametrize("setup", SETUPS)
def test_spawn_points_cover_one_and_two_players(setup):
    level = build(setup)
    counts = sorted(p.index.number_of_players() for p in level.spawn_points)
    assert counts == [1, 2, 2]
    slots = {p.index.slot for p in level.spawn_points if p.index.players == 2}
    assert slots == {0, 1}


@pytest.mark.parametrize("setup", SETUPS)
def test_walls_are_ordered_and_within_bounds(setup):
    level = build(setup)
    assert level.walls
    for wall in level.walls:
        r = wall.rect
        assert r.min_x <= r.max_x
        assert r.min_y <= r.max_y
        assert all(abs(v) <= 60.0 for v in (r.min_x, r.max_x, r.min_y, r.max_y))


@pytest.mark.parametrize("setup", SETUPS)
def test_spawn_and_finish_are_not_inside_walls(setup):
    level = Level()
    setup(level)
    points = [(p.x, p.y) for p in level.spawn_points] + [tuple(level.finish_point)]
    assert len(points) == 4
    blocked = [
        (x, y, wall.rect)
        for x, y in points
        for wall in level.walls
        if strictly_inside(wall.rect, x, y)
    ]
    assert blocked == []


@pytest.mark.parametrize("setup", SETUPS)
def test_door_masks_are_served_by_buttons(setup):
    level = build(setup)
    button_bits = 0
    for button in level.buttons:
        button_bits |= button.mask
    for door in level.doors:
        assert door.open_mask & door.close_mask == 0
        assert (door.open_mask | door.close_mask) & ~button_bits == 0


@pytest.mark.parametrize("setup", SETUPS)
def test_elevators_move_and_loop(setup):
    for elevator in build(setup).elevators:
        assert elevator.start != elevator.end
        assert elevator.kind.period > 0
        assert elevator.kind.current == 0.0


@pytest.mark.parametrize(
    "setup, gravity",
    [(level7, SceneDirection.RIGHT), (level9, SceneDirection.UP)],
)
def test_single_undo_box_with_local_gravity(setup, gravity):
    level = build(setup)
    pulled = [b for b in level.boxes if b.combobox.local_gravity is not None]
    assert len(pulled) == 1
    assert isinstance(pulled[0].combobox.box_type, Undo)
    assert pulled[0].combobox.local_gravity == gravity.vec()


def test_level7_button_has_box_on_it():
    level = build(level7)
    positions = {(b.x, b.y) for b in level.boxes}
    assert all((btn.x, btn.y) in positions for btn in level.buttons)
    assert any(isinstance(b.combobox.box_type, Gravity) for b in level.boxes)


def test_level7_and_level9_share_view_range():
    assert build(level7).min_view_range == build(level9).min_view_range
    assert build(level8).ambient_light == Color.BLACK
    assert build(level7).ambient_light is None


def test_level8_code_hints():
    images = [h.image for h in build(level8).hints]
    assert images == ["images/enter-the-code.png", "images/code.png"]


def test_level8_lower_buttons_use_distinct_bits():
    level = build(level8)
    masks = [b.mask for b in level.buttons if b.mask]
    assert len(masks) == len(set(masks))
    assert all(m & (m - 1) == 0 for m in masks)
    door = level.doors[0]
    combined = 0
    for m in masks:
        combined |= m
    assert door.open_mask | door.close_mask == combined


def test_level8_example_boxes_sit_on_upper_buttons():
    level = build(level8)
    upper = {(b.x, b.y) for b in level.buttons if b.mask == 0}
    examples = [
        b for b in level.boxes
        if isinstance(b.combobox.box_type, Standard) and b.combobox.box_type.group == 0
    ]
    assert examples
    assert all((b.x, b.y) in upper for b in examples)
    lamps = [b for b in level.boxes if isinstance(b.combobox.box_type, Lamp)]
    assert Color.PURPLE * 2.0 in [b.combobox.box_type.color for b in lamps]


def test_level9_doors_face_three_ways():
    directions = {d.direction for d in build(level9).doors}
    assert directions == {SceneDirection.UP, SceneDirection.RIGHT, SceneDirection.LEFT}


def test_level9_elevators_are_vertical():
    for elevator in build(level9).elevators:
        assert elevator.start[0] == elevator.end[0]
        assert elevator.start[1] < elevator.end[1]