"""The screen shown when a level has been completed."""

from __future__ import annotations

from enum import Enum, auto

from combobox.states import GameStates, GuiState

LAST_LEVEL = 12
DONE_IMAGE = "images/buttons/done-2.png"
NEXT_LEVEL_IMAGE = "images/buttons/next-level.png"


class LevelCompleteButton(Enum):
    """Buttons on the level completed screen."""

    RESTART = auto()
    BACK = auto()
    NEXT_LEVEL = auto()


def _replay(states: GameStates) -> None:
    states.level.restart()
    states.gui.set(GuiState.LEVEL)


def handle_level_completed(states: GameStates, button: LevelCompleteButton) -> None:
    """React to a click on a level completed screen button."""
    if button is LevelCompleteButton.RESTART:
        _replay(states)
    elif button is LevelCompleteButton.BACK:
        states.leave_level()
    elif button is LevelCompleteButton.NEXT_LEVEL:
        if states.current_level != LAST_LEVEL:
            states.current_level = states.current_level % LAST_LEVEL + 1
            _replay(states)
        else:
            states.leave_level()
    else:
        raise ValueError(f"unknown level completed button: {button!r}")