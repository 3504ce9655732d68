"""Game logic for a box-combining platform puzzle: levels, scene layout, menu flow and states."""

__version__ = "0.1.0"