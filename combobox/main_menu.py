"""The main screen: play, credits and the choice of player robots."""

from __future__ import annotations

from enum import Enum, auto

from combobox.states import GameStates, GuiState

PLAYER_COLORS_NUM = 7
PLAY_IMAGE = "images/buttons/play-button.png"
CREDITS_IMAGE = "images/buttons/credits-button.png"
PREV_IMAGE = "images/buttons/prev.png"
NEXT_IMAGE = "images/buttons/next.png"


class MainMenuButton(Enum):
    """Buttons on the main screen."""

    PLAY = auto()
    PLAY2 = auto()
    SETTINGS = auto()
    CREDITS = auto()


def handle_main_menu(states: GameStates, button: MainMenuButton) -> None:
    """React to a click on a main screen button."""
    if button is MainMenuButton.PLAY:
        states.gui.set(GuiState.LEVEL_SELECTION)
    elif button is MainMenuButton.CREDITS:
        states.gui.set(GuiState.CREDITS)
    elif button in (MainMenuButton.PLAY2, MainMenuButton.SETTINGS):
        return
    else:
        raise ValueError(f"unknown main menu button: {button!r}")


def preview_images() -> list[str]:
    """Paths of the robot preview images, one per player colour."""
    return [f"images/robot-preview-{i}.png" for i in range(PLAYER_COLORS_NUM)]