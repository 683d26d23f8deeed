"""
Search Algorithm: Grid Seed + Steepest-Ascent Walk

SEARCH STRATEGY:
1. GRID SEED - query an evenly spaced grid_dim x grid_dim lattice covering the
   whole plot (corners included). Every sample goes into the ranked backlog.
2. REFINE - while queries remain, pop the best unexpanded sample and probe
   its four cardinal neighbours `stride` cells away. The first neighbour that
   strictly beats the popped value goes back into the backlog and the walk
   ends; it gets expanded on a later iteration if it is still the best.
   A sample with no better neighbour is dropped.

DIRECTIONAL MEMORY:
The scan starts at the direction that produced the last improvement. Plots
tend to keep rising the same way for a while, so repeating the last good
direction usually finds the next improvement with one query.

KEY PARAMETERS:
- grid_dim: 8 (64 seed queries out of a budget of 100)
- stride: 12 cells between a sample and the neighbours it probes
- Equal values never count as an improvement, so plateaus drain instead of
  being re-expanded forever.
"""

from typing import Dict, Optional

import numpy as np

from core.directions import CardinalDirection, cycle_from
from core.plot_bounds import MAX_COORD, Coord, clamped_coord
from core.probe import Probe
from core.ranked_backlog import RankedBacklog


def grid_axis(grid_dim: int) -> np.ndarray:
    """Seed positions along one axis: ceil(i * 511 / (grid_dim - 1)), clamped."""
    if grid_dim < 2:
        raise ValueError(f"grid_dim must be at least 2, got {grid_dim}")
    steps = np.ceil(np.arange(grid_dim) * MAX_COORD / (grid_dim - 1))
    return np.clip(steps, 0, MAX_COORD).astype(int)


class ProspectSession:
    """
    State for one prospect() call on one plot.
    Created fresh per plot and thrown away afterwards.
    """

    def __init__(self, probe: Probe, grid_dim: int, stride: int, debug: bool = False):
        self.probe = probe
        self.grid_dim = grid_dim
        self.stride = stride
        self.debug = debug

        self.backlog = RankedBacklog()
        self.last_pop_value = 0
        self.last_direction = CardinalDirection.NORTH

        # Reporting only
        self.seed_queries = 0
        self.walks = 0
        self.improvements = 0
        self.best_value: Optional[int] = None
        self.best_coord: Optional[Coord] = None

    # --- phases ---

    def run(self):
        """Init -> Refine until the budget is spent."""
        self.sample_grid()
        while self.probe.queries_remaining > 0:
            value, coord = self.backlog.pop_best()
            self.last_pop_value = value
            self.walk_from(coord)

    def sample_grid(self):
        """Seed the backlog with the coarse lattice. Duplicates cost nothing."""
        axis = grid_axis(self.grid_dim)
        for x in axis:
            for y in axis:
                if self.probe.queries_remaining <= 0:
                    if self.debug:
                        print(f"GRID_ASCENT: budget spent during grid seed ({self.seed_queries} samples)")
                    return
                coord = clamped_coord(x, y)
                value = self._query_new(coord)
                if value is None:
                    continue
                self.backlog.insert(value, coord)
                self.seed_queries += 1

    def walk_from(self, start: Coord) -> Optional[CardinalDirection]:
        """
        Probe the four neighbours of `start`, beginning with the last
        successful direction. Returns the improving direction, or None if the
        point was a local non-improving node.
        """
        self.walks += 1
        for direction in cycle_from(self.last_direction):
            if self.probe.queries_remaining <= 0:
                return None
            neighbour = direction.step(start, self.stride)
            value = self._query_new(neighbour)
            if value is None:
                continue
            if value > self.last_pop_value:
                self.backlog.insert(value, neighbour)
                self.last_direction = direction
                self.improvements += 1
                if self.debug:
                    print(f"GRID_ASCENT: {direction.name} ({start.x},{start.y})->({neighbour.x},{neighbour.y}) "
                          f"{self.last_pop_value}->{value}")
                return direction
        return None

    # --- internals ---

    def _query_new(self, coord: Coord) -> Optional[int]:
        """Query coord unless it was already queried (None in that case)."""
        if self.probe.has_queried(coord):
            return None
        value = self.probe.query(coord)
        if self.best_value is None or value > self.best_value:
            self.best_value = value
            self.best_coord = coord
        return value

    def stats(self) -> Dict[str, object]:
        return {
            'seed_queries': self.seed_queries,
            'walks': self.walks,
            'improvements': self.improvements,
            'backlog_size': len(self.backlog),
            'best_value': self.best_value,
            'best_coord': self.best_coord,
            'queries_remaining': self.probe.queries_remaining,
        }


class GridAscentProspector:
    """
    Coarse grid scan followed by a steepest-ascent walk with directional memory.
    One instance can prospect any number of plots; each call gets its own session.
    """

    def __init__(self, grid_dim: int = 8, stride: int = 12, debug: bool = False, **kwargs):
        if grid_dim < 2:
            raise ValueError(f"grid_dim must be at least 2, got {grid_dim}")
        if stride < 1:
            raise ValueError(f"stride must be positive, got {stride}")
        self.grid_dim = grid_dim
        self.stride = stride
        self.debug = debug
        self.last_session: Optional[ProspectSession] = None
        if self.debug:
            print(f"GRID_ASCENT: initialized | grid={grid_dim}x{grid_dim} | stride={stride}")

    def prospect(self, probe: Probe) -> ProspectSession:
        """Spend the probe's whole budget looking for the highest value."""
        session = ProspectSession(probe, self.grid_dim, self.stride, debug=self.debug)
        self.last_session = session
        session.run()
        if self.debug:
            s = session.stats()
            print(f"GRID_ASCENT: done | best={s['best_value']} at {s['best_coord']} | "
                  f"seed={s['seed_queries']} walks={s['walks']} improvements={s['improvements']}")
        return session

    def get_search_stats(self) -> Dict[str, object]:
        """Stats of the most recent prospect() call."""
        if self.last_session is None:
            return {}
        return self.last_session.stats()

    def reset(self):
        self.last_session = None
