"""
Probe - the query capability a search strategy is handed for one plot.

Contract:
  queries_remaining  non-negative, drops by one per query, stops at 0
  query(coord)       value at coord; spends one query and records coord.
                     Once the budget is gone it returns 0 and records nothing.
  query_history      Coord -> value for everything queried on this plot

Coordinates must satisfy 0 <= x < 512 and 0 <= y < 512.
"""

from typing import Dict

from core.plot_bounds import Coord


class Probe:
    """Base class for query capabilities. Subclasses supply the plot."""

    @property
    def queries_remaining(self) -> int:
        raise NotImplementedError

    @property
    def query_history(self) -> Dict[Coord, int]:
        raise NotImplementedError

    def query(self, coord: Coord) -> int:
        raise NotImplementedError

    def has_queried(self, coord: Coord) -> bool:
        return coord in self.query_history
