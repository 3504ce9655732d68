"""A smoothed frames-per-second readout."""

from __future__ import annotations

from dataclasses import dataclass

PREFIX = "FPS: "


@dataclass
class FpsCounter:
    """Refreshes an FPS label on a repeating timer, smoothing the value."""

    interval: float = 0.05
    average_fps: float = 60.0
    text: str = PREFIX
    _elapsed: float = 0.0

    def update(self, delta: float, fps: float | None) -> str | None:
        """Advance by ``delta`` seconds; return the new label when it refreshes."""
        self._elapsed += delta
        if self._elapsed < self.interval:
            return None
        self._elapsed %= self.interval
        if fps is None:
            self.text = PREFIX
        else:
            self.average_fps = self.average_fps * 0.95 + fps * 0.05
            self.text = f"{PREFIX}{self.average_fps:.0f}"
        return self.text