"""
Search Algorithm: Random Restart Climber

SEARCH STRATEGY:
1. START - sample random coordinates (kept apart from everything already
   queried) until one reaches min_start_value. Low starts are not worth
   climbing from.
2. CLIMB - query the ring of up to eight points around the current best
   (axis points at axis_distance, diagonals at diag_distance) and move to the
   best value seen. Ring points that crowd an earlier query are skipped.
3. When a ring comes back empty, the climb is over: go back to START.

Runs until the budget is spent, or until no fresh random point can be found.
"""

from typing import List, Optional

import numpy as np

from core.plot_bounds import MAX_COORD, PLOT_SIZE, Coord
from core.probe import Probe


class RandomRestartProspector:
    """Threshold-gated random starts, each followed by an 8-neighbour climb."""

    MAX_DRAW_ATTEMPTS = 2000  # per random start; the plot is saturated beyond this

    def __init__(self, min_start_value: int = 300, axis_distance: int = 10,
                 diag_distance: int = 7, min_point_distance: float = 10.0,
                 seed: Optional[int] = None, debug: bool = False, **kwargs):
        self.min_start_value = min_start_value
        self.axis_distance = axis_distance
        self.diag_distance = diag_distance
        self.min_point_distance = min_point_distance
        self.rng = np.random.default_rng(seed)
        self.debug = debug

        self.restarts = 0
        self.climb_steps = 0
        if self.debug:
            print(f"RANDOM_RESTART: initialized | start>={min_start_value} | "
                  f"axis={axis_distance} diag={diag_distance}")

    def prospect(self, probe: Probe):
        self.restarts = 0
        self.climb_steps = 0
        while probe.queries_remaining > 0:
            start = self._find_starting_coord(probe)
            if start is None:
                if self.debug:
                    print("RANDOM_RESTART: no fresh start point left, stopping early")
                return
            self.restarts += 1
            self._climb_from(start, probe)

    # --- internals ---

    def _find_starting_coord(self, probe: Probe) -> Optional[Coord]:
        coord = None
        value = None
        while probe.queries_remaining > 0 and (value is None or value < self.min_start_value):
            coord = self._random_unique_coord(probe)
            if coord is None:
                return None
            value = probe.query(coord)
        return coord

    def _random_unique_coord(self, probe: Probe) -> Optional[Coord]:
        for _ in range(self.MAX_DRAW_ATTEMPTS):
            x, y = self.rng.integers(0, PLOT_SIZE, size=2)
            coord = Coord(int(x), int(y))
            if self._is_unique(coord, probe):
                return coord
        return None

    def _climb_from(self, coord: Coord, probe: Probe):
        best_coord = coord
        best_value = 0
        while probe.queries_remaining > 0:
            ring = self._surrounding_coords(best_coord, probe)
            if not ring:
                return
            for candidate in ring:
                if probe.queries_remaining <= 0:
                    return
                value = probe.query(candidate)
                if value > best_value:
                    best_value = value
                    best_coord = candidate
            self.climb_steps += 1
            if self.debug:
                print(f"RANDOM_RESTART: climb step -> ({best_coord.x},{best_coord.y}) = {best_value}")

    def _surrounding_coords(self, coord: Coord, probe: Probe) -> List[Coord]:
        a = self.axis_distance
        d = self.diag_distance
        lo_x, hi_x = coord.x >= a, coord.x <= MAX_COORD - a
        lo_y, hi_y = coord.y >= a, coord.y <= MAX_COORD - a

        ring = []
        if lo_x:
            ring.append(Coord(coord.x - a, coord.y))
        if lo_y:
            ring.append(Coord(coord.x, coord.y - a))
        if hi_x:
            ring.append(Coord(coord.x + a, coord.y))
        if hi_y:
            ring.append(Coord(coord.x, coord.y + a))
        if lo_x and lo_y:
            ring.append(Coord(coord.x - d, coord.y - d))
        if hi_x and hi_y:
            ring.append(Coord(coord.x + d, coord.y + d))
        if lo_x and hi_y:
            ring.append(Coord(coord.x - d, coord.y + d))
        if lo_y and hi_x:
            ring.append(Coord(coord.x + d, coord.y - d))

        return [c for c in ring if self._is_unique(c, probe)]

    def _is_unique(self, coord: Coord, probe: Probe) -> bool:
        """True if coord is at least min_point_distance from every queried coord."""
        history = probe.query_history
        if not history:
            return True
        queried = np.array([(c.x, c.y) for c in history], dtype=float)
        dist = np.hypot(queried[:, 0] - coord.x, queried[:, 1] - coord.y)
        return bool(np.all(dist >= self.min_point_distance))

    def get_search_stats(self):
        return {'restarts': self.restarts, 'climb_steps': self.climb_steps}

    def reset(self):
        self.restarts = 0
        self.climb_steps = 0
