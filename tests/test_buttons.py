import pytest

from combobox.buttons import (
    BASE_ARROW_COLOR,
    CLICKED_ARROW_COLOR,
    HOVER_ARROW_COLOR,
    TRANSPARENT_COLOR,
    Cursor,
    Interaction,
    button_style,
)
from combobox.scene import Color


@pytest.mark.parametrize(
    "interaction, color, cursor",
    [
        (Interaction.CLICKED, Color(0.75, 0.75, 0.75), Cursor.HAND),
        (Interaction.HOVERED, Color(0.9, 0.9, 0.9), Cursor.HAND),
        (Interaction.NONE, Color.WHITE, Cursor.DEFAULT),
    ],
)
def test_style_for_interaction(interaction, color, cursor):
    assert button_style(interaction) == (color, cursor)


def test_every_interaction_has_a_style():
    colors = [button_style(i)[0] for i in Interaction]
    assert colors == [CLICKED_ARROW_COLOR, HOVER_ARROW_COLOR, BASE_ARROW_COLOR]


def test_colors_get_darker_with_stronger_interaction():
    base = button_style(Interaction.NONE)[0]
    hover = button_style(Interaction.HOVERED)[0]
    clicked = button_style(Interaction.CLICKED)[0]
    assert base.r > hover.r > clicked.r


def test_button_colors_are_opaque_unlike_transparent_color():
    assert TRANSPARENT_COLOR.a == 0.0
    alphas = [button_style(i)[0].a for i in Interaction]
    assert all(alpha > 0.0 for alpha in alphas)