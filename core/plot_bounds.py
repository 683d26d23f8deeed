"""
Plot coordinates and bounds clamping.

A plot is a 512x512 grid. Every coordinate the search strategies produce
goes through clamp_to_plot, so an off-plot coordinate reaching a probe is a
logic defect rather than a runtime condition.
"""

from dataclasses import dataclass

PLOT_SIZE = 512
MAX_COORD = PLOT_SIZE - 1


@dataclass(frozen=True)
class Coord:
    """Immutable plot coordinate, compared and hashed by value."""
    x: int
    y: int

    def is_on_plot(self) -> bool:
        return 0 <= self.x <= MAX_COORD and 0 <= self.y <= MAX_COORD


def clamp_to_plot(z: int) -> int:
    """Limit a single axis value to [0, 511]."""
    if z < 0:
        return 0
    if z > MAX_COORD:
        return MAX_COORD
    return z


def clamped_coord(x: int, y: int) -> Coord:
    return Coord(clamp_to_plot(int(x)), clamp_to_plot(int(y)))
