"""The credits screen."""

from __future__ import annotations

from enum import Enum, auto

from combobox.states import GameStates, GuiState

BACK_IMAGE = "images/buttons/levels/back.png"
CREDITS_IMAGE = "images/credits.png"


class CreditsButton(Enum):
    """Buttons on the credits screen."""

    BACK = auto()


def handle_credits(states: GameStates, button: CreditsButton) -> None:
    """React to a click on a credits screen button."""
    if button is CreditsButton.BACK:
        states.gui.set(GuiState.MAIN_SCREEN)
    else:
        raise ValueError(f"unknown credits button: {button!r}")