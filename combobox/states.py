"""Game state machines: which menu is shown, which music plays, and so on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Generic, TypeVar


class GuiState(Enum):
    """Which screen of the interface is shown."""

    NONE = auto()
    MAIN_SCREEN = auto()
    LEVEL_SELECTION = auto()
    LEVEL = auto()
    LEVEL_COMPLETED = auto()
    CREDITS = auto()


class AudioState(Enum):
    """Which background music is playing."""

    MENU = auto()
    LEVEL = auto()


class LevelState(Enum):
    """Whether a level is loaded."""

    NONE = auto()
    LEVEL = auto()


class CameraState(Enum):
    """How the camera moves."""

    NONE = auto()
    FOLLOW_PLAYERS = auto()


class StateError(Exception):
    """Raised when a state transition is not allowed."""


S = TypeVar("S", bound=Enum)


class StateCell(Generic[S]):
    """Holds the current value of one state machine and records its transitions."""

    def __init__(self, initial: S) -> None:
        self.current: S = initial
        self.restarts = 0
        self.history: list[tuple[S, S]] = []

    def set(self, state: S) -> None:
        """Move to another state; moving to the current one is an error."""
        if type(state) is not type(self.current):
            raise TypeError(
                f"expected {type(self.current).__name__}, got {type(state).__name__}"
            )
        if state == self.current:
            raise StateError(f"already in state {state.name}")
        self.history.append((self.current, state))
        self.current = state

    def restart(self) -> None:
        """Leave and enter the current state again."""
        self.restarts += 1

    def __repr__(self) -> str:
        return f"StateCell({self.current!r})"


@dataclass
class GameStates:
    """All state machines of the game together with the selected level."""

    gui: StateCell[GuiState] = field(
        default_factory=lambda: StateCell(GuiState.MAIN_SCREEN)
    )
    audio: StateCell[AudioState] = field(
        default_factory=lambda: StateCell(AudioState.MENU)
    )
    level: StateCell[LevelState] = field(
        default_factory=lambda: StateCell(LevelState.NONE)
    )
    camera: StateCell[CameraState] = field(
        default_factory=lambda: StateCell(CameraState.NONE)
    )
    current_level: int = 3

    def leave_level(self) -> None:
        """Unload the level and return to the level selection screen."""
        self.level.set(LevelState.NONE)
        self.audio.set(AudioState.MENU)
        self.gui.set(GuiState.LEVEL_SELECTION)
        self.camera.set(CameraState.NONE)