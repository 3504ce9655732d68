"""The level selection screen."""

from __future__ import annotations

from combobox.states import AudioState, CameraState, GameStates, GuiState, LevelState

BACK_IMAGE = "images/buttons/levels/back.png"
TITLE_IMAGE = "images/buttons/levels/levels.png"
ROWS = 3
COLUMNS = 4


def select_level(states: GameStates, level: int) -> None:
    """Start playing ``level``."""
    states.current_level = level
    states.level.set(LevelState.LEVEL)
    states.audio.set(AudioState.LEVEL)
    states.gui.set(GuiState.LEVEL)
    states.camera.set(CameraState.FOLLOW_PLAYERS)


def leave_level_selection(states: GameStates) -> None:
    """Go back to the main screen."""
    states.gui.set(GuiState.MAIN_SCREEN)


def level_button_images() -> list[list[tuple[int, str]]]:
    """The grid of level buttons, row by row, as (level, image path) pairs."""
    return [
        [
            (level, f"images/buttons/levels/level-{level}.png")
            for level in range(row * COLUMNS + 1, (row + 1) * COLUMNS + 1)
        ]
        for row in range(ROWS)
    ]