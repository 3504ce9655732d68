"""Level description: colours, boxes and the builder that lays out a scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from combobox.direction import SceneDirection


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float components."""

    r: float
    g: float
    b: float
    a: float = 1.0

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    CYAN: ClassVar[Color]
    ORANGE: ClassVar[Color]
    ORANGE_RED: ClassVar[Color]
    LIME_GREEN: ClassVar[Color]
    PURPLE: ClassVar[Color]

    def scaled(self, factor: float) -> Color:
        """Multiply the colour channels, keeping alpha."""
        return Color(self.r * factor, self.g * factor, self.b * factor, self.a)

    def __mul__(self, factor: float) -> Color:
        return self.scaled(factor)


Color.WHITE = Color(1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)
Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 1.0, 0.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.YELLOW = Color(1.0, 1.0, 0.0)
Color.CYAN = Color(0.0, 1.0, 1.0)
Color.ORANGE = Color(1.0, 0.65, 0.0)
Color.ORANGE_RED = Color(1.0, 0.27, 0.0)
Color.LIME_GREEN = Color(0.2, 0.8, 0.2)
Color.PURPLE = Color(0.5, 0.0, 0.5)


@dataclass(frozen=True)
class Standard:
    """A plain box; boxes of one group combine."""

    group: int


@dataclass(frozen=True)
class Lamp:
    color: Color


@dataclass(frozen=True)
class Direction:
    direction: tuple[float, float]


@dataclass(frozen=True)
class Gravity:
    pass


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Buff:
    value: float


BoxType = Union[Standard, Lamp, Direction, Gravity, Undo, Buff]


@dataclass
class Combobox:
    """A box placed in a level."""

    weight: float
    box_type: BoxType
    combined_from: list[Combobox] = field(default_factory=list)
    local_gravity: tuple[float, float] | None = None


@dataclass(frozen=True)
class ElevatorLoop:
    """An elevator going back and forth with the given period in seconds."""

    period: float
    current: float = 0.0


@dataclass(frozen=True)
class PlayerIndex:
    """Which player a spawn point is for, in a game of one or two players."""

    players: int
    slot: int = 0

    @classmethod
    def single(cls) -> PlayerIndex:
        return cls(1, 0)

    @classmethod
    def two(cls, index: int) -> PlayerIndex:
        if index not in (0, 1):
            raise ValueError(f"player index must be 0 or 1, got {index}")
        return cls(2, index)

    def number_of_players(self) -> int:
        return self.players


@dataclass(frozen=True)
class Rect:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def from_corners(cls, x1: float, x2: float, y1: float, y2: float) -> Rect:
        return cls(min(x1, x2), max(x1, x2), min(y1, y2), max(y1, y2))

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


@dataclass(frozen=True)
class Wall:
    rect: Rect


@dataclass(frozen=True)
class BoxPlacement:
    combobox: Combobox
    x: float
    y: float


@dataclass(frozen=True)
class Door:
    x: float
    y: float
    length: float
    direction: SceneDirection
    open_mask: int
    close_mask: int


@dataclass(frozen=True)
class Button:
    x: float
    y: float
    direction: SceneDirection
    mask: int


@dataclass(frozen=True)
class Elevator:
    start: tuple[float, float]
    end: tuple[float, float]
    kind: ElevatorLoop


@dataclass(frozen=True)
class Hint:
    x: float
    y: float
    image: str


@dataclass(frozen=True)
class SpawnPoint:
    x: float
    y: float
    index: PlayerIndex


@dataclass
class Level:
    """Everything a level places in the scene, collected by its setup function."""

    audio: str | None = None
    min_view_range: float | None = None
    background_color: Color | None = None
    ambient_light: Color | None = None
    boundaries: Rect | None = None
    finish_point: tuple[float, float] | None = None
    spawn_points: list[SpawnPoint] = field(default_factory=list)
    hints: list[Hint] = field(default_factory=list)
    walls: list[Wall] = field(default_factory=list)
    boxes: list[BoxPlacement] = field(default_factory=list)
    buttons: list[Button] = field(default_factory=list)
    doors: list[Door] = field(default_factory=list)
    elevators: list[Elevator] = field(default_factory=list)

    def set_audio(self, path: str) -> None:
        self.audio = path

    def set_min_view_range(self, value: float) -> None:
        self.min_view_range = value

    def set_background_color(self, color: Color) -> None:
        self.background_color = color

    def set_ambient_light(self, color: Color) -> None:
        self.ambient_light = color

    def set_boundaries(
        self, min_x: float, max_x: float, min_y: float, max_y: float
    ) -> None:
        self.boundaries = Rect.from_corners(min_x, max_x, min_y, max_y)

    def set_spawn_point(self, x: float, y: float, index: PlayerIndex) -> None:
        """Place the spawn point for ``index``, replacing an earlier one."""
        self.spawn_points = [p for p in self.spawn_points if p.index != index]
        self.spawn_points.append(SpawnPoint(x, y, index))

    def set_finish_point(self, x: float, y: float) -> None:
        self.finish_point = (x, y)

    def spawn_hint(self, x: float, y: float, image: str) -> None:
        self.hints.append(Hint(x, y, image))

    def spawn_wall(
        self, min_x: float, max_x: float, min_y: float, max_y: float
    ) -> None:
        self.walls.append(Wall(Rect.from_corners(min_x, max_x, min_y, max_y)))

    def spawn_box(self, combobox: Combobox, x: float, y: float) -> None:
        self.boxes.append(BoxPlacement(combobox, x, y))

    def spawn_button(
        self, x: float, y: float, direction: SceneDirection, mask: int
    ) -> None:
        self.buttons.append(Button(x, y, direction, mask))

    def spawn_door(
        self,
        x: float,
        y: float,
        length: float,
        direction: SceneDirection,
        open_mask: int,
        close_mask: int,
    ) -> None:
        self.doors.append(Door(x, y, length, direction, open_mask, close_mask))

    def spawn_elevator(
        self,
        from_x: float,
        from_y: float,
        to_x: float,
        to_y: float,
        kind: ElevatorLoop,
    ) -> None:
        self.elevators.append(Elevator((from_x, from_y), (to_x, to_y), kind))