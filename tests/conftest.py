from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from core.plot_bounds import Coord
from simulation.plot import SimulatedProbe, flat_plot, single_peak_plot


class FunctionProbe(SimulatedProbe):
    """SimulatedProbe over a value function instead of a stored plot."""

    def __init__(self, fn, budget=100):
        super().__init__(flat_plot(0), budget=budget)
        self.fn = fn

    def query(self, coord: Coord) -> int:
        if not coord.is_on_plot():
            raise ValueError(f"coordinate off plot: ({coord.x}, {coord.y})")
        self.query_log.append(coord)
        if self._remaining <= 0:
            return 0
        self._remaining -= 1
        value = self.fn(coord.x, coord.y)
        self._history[coord] = value
        return value


@pytest.fixture
def flat_probe():
    return SimulatedProbe(flat_plot(5), budget=100)


@pytest.fixture
def peak_probe():
    return SimulatedProbe(single_peak_plot((256, 256), peak=100, base=1), budget=100)


@pytest.fixture
def function_probe():
    return FunctionProbe
