"""
Cardinal directions in a fixed cycle: NORTH -> EAST -> SOUTH -> WEST -> NORTH.

NORTH/SOUTH move along y (+/-), EAST/WEST along x (+/-).
"""

from enum import Enum
from typing import Iterator

from core.plot_bounds import Coord, clamped_coord


class CardinalDirection(Enum):
    """Compass step; value is the (dx, dy) unit offset."""
    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)

    def next(self) -> "CardinalDirection":
        """Successor in the fixed cycle."""
        i = _CYCLE.index(self)
        return _CYCLE[(i + 1) % len(_CYCLE)]

    def step(self, coord: Coord, stride: int) -> Coord:
        """Neighbour `stride` cells away in this direction, clamped to the plot."""
        dx, dy = self.value
        return clamped_coord(coord.x + dx * stride, coord.y + dy * stride)


_CYCLE = (
    CardinalDirection.NORTH,
    CardinalDirection.EAST,
    CardinalDirection.SOUTH,
    CardinalDirection.WEST,
)


def cycle_from(start: CardinalDirection) -> Iterator[CardinalDirection]:
    """Yield all four directions once, beginning at `start`."""
    direction = start
    for _ in range(len(_CYCLE)):
        yield direction
        direction = direction.next()
