"""The buttons shown while a level is being played."""

from __future__ import annotations

from enum import Enum, auto

from combobox.states import GameStates

BACK_IMAGE = "images/buttons/back.png"
RESTART_IMAGE = "images/buttons/restart.png"


class GameMenuButton(Enum):
    """Buttons on the in-game menu."""

    RESTART = auto()
    BACK = auto()


def handle_game_menu(states: GameStates, button: GameMenuButton) -> None:
    """React to a click on an in-game menu button."""
    if button is GameMenuButton.RESTART:
        states.level.restart()
    elif button is GameMenuButton.BACK:
        states.leave_level()
    else:
        raise ValueError(f"unknown game menu button: {button!r}")