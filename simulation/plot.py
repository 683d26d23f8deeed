"""
Simulated plots and a budgeted probe for running search strategies offline.

A plot is a 512x512 grid of hidden integer values. The search strategies only
ever see it through SimulatedProbe, which enforces the query budget the same
way the real prospecting harness does.
"""

import numpy as np
from typing import Dict, Optional, Tuple

from core.plot_bounds import PLOT_SIZE, Coord
from core.probe import Probe

DEFAULT_BUDGET = 100


class Plot:
    """Hidden 512x512 value grid, indexed as values[x, y]."""

    def __init__(self, values: np.ndarray):
        values = np.asarray(values)
        if values.shape != (PLOT_SIZE, PLOT_SIZE):
            raise ValueError(f"plot must be {PLOT_SIZE}x{PLOT_SIZE}, got {values.shape}")
        self.values = values.astype(np.int64)

    def value_at(self, coord: Coord) -> int:
        return int(self.values[coord.x, coord.y])

    @property
    def max_value(self) -> int:
        return int(self.values.max())

    @property
    def argmax(self) -> Coord:
        x, y = np.unravel_index(np.argmax(self.values, axis=None), self.values.shape)
        return Coord(int(x), int(y))


def flat_plot(value: int = 1) -> Plot:
    """Every cell holds the same value."""
    return Plot(np.full((PLOT_SIZE, PLOT_SIZE), value, dtype=np.int64))


def single_peak_plot(center: Tuple[int, int] = (256, 256), peak: int = 100, base: int = 1) -> Plot:
    """`base` everywhere except a single cell holding `peak`."""
    values = np.full((PLOT_SIZE, PLOT_SIZE), base, dtype=np.int64)
    values[center[0], center[1]] = peak
    return Plot(values)


def cone_plot(center: Tuple[int, int] = (256, 256), peak: int = 1000) -> Plot:
    """Single smooth hill: value falls off linearly with distance from center."""
    xs, ys = np.meshgrid(np.arange(PLOT_SIZE), np.arange(PLOT_SIZE), indexing='ij')
    dist = np.hypot(xs - center[0], ys - center[1])
    return Plot(np.clip(peak - dist, 0, None).astype(np.int64))


def random_hills_plot(rng: Optional[np.random.Generator] = None, hills: int = 6,
                      max_height: int = 1000) -> Plot:
    """Sum of Gaussian hills at random centres with random widths and heights."""
    if rng is None:
        rng = np.random.default_rng()
    xs, ys = np.meshgrid(np.arange(PLOT_SIZE), np.arange(PLOT_SIZE), indexing='ij')
    terrain = np.zeros((PLOT_SIZE, PLOT_SIZE), dtype=float)
    for _ in range(hills):
        cx, cy = rng.uniform(0, PLOT_SIZE, size=2)
        sigma = rng.uniform(15.0, 90.0)
        height = rng.uniform(0.2, 1.0)
        terrain += height * np.exp(-((xs - cx) ** 2 + (ys - cy) ** 2) / (2 * sigma ** 2))
    top = terrain.max()
    if top > 0:
        terrain = terrain / top
    return Plot(np.rint(terrain * max_height).astype(np.int64))


class SimulatedProbe(Probe):
    """
    Budgeted access to a Plot.
    Off-plot coordinates raise ValueError; once the budget is spent queries
    return 0 and are not recorded.
    """

    def __init__(self, plot: Plot, budget: int = DEFAULT_BUDGET):
        if budget < 0:
            raise ValueError(f"budget must be non-negative, got {budget}")
        self.plot = plot
        self.budget = budget
        self._remaining = budget
        self._history: Dict[Coord, int] = {}
        self.query_log = []  # every query() call in order, including no-ops

    @property
    def queries_remaining(self) -> int:
        return self._remaining

    @property
    def query_history(self) -> Dict[Coord, int]:
        return self._history

    @property
    def queries_used(self) -> int:
        return self.budget - self._remaining

    @property
    def best_value(self) -> int:
        return max(self._history.values(), default=0)

    def query(self, coord: Coord) -> int:
        if not coord.is_on_plot():
            raise ValueError(f"coordinate off plot: ({coord.x}, {coord.y})")
        self.query_log.append(coord)
        if self._remaining <= 0:
            return 0
        self._remaining -= 1
        value = self.plot.value_at(coord)
        self._history[coord] = value
        return value
