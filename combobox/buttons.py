"""Menu button colours and the cursor shown while pointing at a button."""

from __future__ import annotations

from enum import Enum, auto

from combobox.scene import Color

BASE_ARROW_COLOR = Color.WHITE
HOVER_ARROW_COLOR = Color(0.9, 0.9, 0.9)
CLICKED_ARROW_COLOR = Color(0.75, 0.75, 0.75)
TRANSPARENT_COLOR = Color(0.0, 0.0, 0.0, 0.0)


class Interaction(Enum):
    """How the pointer is interacting with a button."""

    CLICKED = auto()
    HOVERED = auto()
    NONE = auto()


class Cursor(Enum):
    """The shape of the mouse cursor."""

    DEFAULT = auto()
    HAND = auto()


_STYLES: dict[Interaction, tuple[Color, Cursor]] = {
    Interaction.CLICKED: (CLICKED_ARROW_COLOR, Cursor.HAND),
    Interaction.HOVERED: (HOVER_ARROW_COLOR, Cursor.HAND),
    Interaction.NONE: (BASE_ARROW_COLOR, Cursor.DEFAULT),
}


def button_style(interaction: Interaction) -> tuple[Color, Cursor]:
    """The tint of a button and the cursor to show for ``interaction``."""
    return _STYLES[interaction]