# combobox

The game logic of a 2D puzzle platformer in which players push and combine
boxes to reach the finish. The package holds the parts that need no
renderer: the twelve level layouts, the scene description they build, the
state machines behind menus, music, level and camera, and the rules for when
a level is finished or has to be restarted.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a level

`combobox.gameplay.build_level` returns a `combobox.scene.Level` holding the
walls, boxes, doors, buttons, elevators, hints, spawn points and finish point
of a level. A number outside 1 to 12 gives an empty `Level`.

```python
from combobox.gameplay import build_level

level = build_level(3)
print(level.audio)            # audio/level3.ogg
print(len(level.walls), len(level.boxes), len(level.elevators))
```

A level can be laid out by hand with the same builder methods the shipped
levels use:

```python
from combobox.scene import Combobox, Level, PlayerIndex, Standard

level = Level()
level.set_spawn_point(1.5, 1.0, PlayerIndex.single())
level.spawn_wall(-60.0, 60.0, -60.0, 0.0)
level.spawn_box(Combobox(1.0, Standard(group=1)), 3.5, 0.5)
level.set_finish_point(10.0, 2.0)
```

Box kinds are the dataclasses `Standard`, `Lamp`, `Direction`, `Gravity`,
`Undo` and `Buff`; elevators take an `ElevatorLoop`. Colours are `Color`
values, with named constants such as `Color.RED` and `*` to scale them.
Setting a spawn point a second time for the same `PlayerIndex` replaces the
earlier one.

The layouts themselves are the functions `level1` … `level6` in
`combobox.levels_a`, `level7` … `level9` in `combobox.levels_b` and
`level10` … `level12` in `combobox.levels_c`; each takes a `Level` and fills
it in.

## Game states

`combobox.states.GameStates` groups the GUI, audio, level and camera state
machines (`GuiState`, `AudioState`, `LevelState`, `CameraState`) together
with the number of the selected level, which starts at 3. Each machine is a
`StateCell`: `set` moves to another state and records the move in `history`,
`restart` counts a restart of the current state. Setting a machine to the
state it is already in raises `StateError`.

The menu handlers move between states the way the game's buttons do:

```python
from combobox.level_completed_menu import LevelCompleteButton, handle_level_completed
from combobox.level_menu import select_level
from combobox.states import GameStates, GuiState

states = GameStates()
select_level(states, 5)
states.gui.set(GuiState.LEVEL_COMPLETED)
handle_level_completed(states, LevelCompleteButton.NEXT_LEVEL)
print(states.current_level)   # 6
```

After level 12, `NEXT_LEVEL` returns to the level selection screen instead.

- `combobox.main_menu` — `handle_main_menu` for `MainMenuButton` and
  `preview_images` with the robot preview image paths.
- `combobox.level_menu` — `select_level`, `leave_level_selection` and
  `level_button_images`, the 3 × 4 grid of level buttons.
- `combobox.game_menu` — `handle_game_menu` for `GameMenuButton` (restart or
  back to level selection).
- `combobox.level_completed_menu` — `handle_level_completed` for
  `LevelCompleteButton`.
- `combobox.credits_menu` — `handle_credits` for `CreditsButton`.

## Other pieces

- `combobox.gameplay` — `out_of_bounds` (every player has left the scene's
  boundaries by more than 100 units, or is more than 10000 from the origin
  when there are none), `all_players_finished` (every player within 120 of a
  finish point), `active_spawn_points` and `FinishTimer`, which completes a
  level after all players have stayed at the finish for more than a second.
- `combobox.direction.SceneDirection` — the four scene directions with
  their vectors, opposites, perpendiculars, indices and lookup from a
  gravity vector.
- `combobox.fps.FpsCounter` — a smoothed frames-per-second label, refreshed
  every 0.05 seconds.
- `combobox.buttons.button_style` — the button tint and `Cursor` for an
  `Interaction`.

## What the package does not do

There is no game to run here: no window, drawing, physics, sound playback or
input handling, and no command to start anything. The package describes
levels and decides state changes; showing the scene, moving players and boxes,
and playing the audio files a level names are left to whatever engine uses it.
Player robots and their choice on the main screen are not modelled beyond the
list of preview images.