"""
Core — Bounded-Query Plot Search

A search strategy gets a Probe for one 512x512 plot and a budget of point
queries, and tries to make the query that returns the highest value.

  plot_bounds.py            Coord + clamping to the plot
  directions.py             N/E/S/W cycle used by the local walk
  ranked_backlog.py         value-ranked stack of samples waiting to be expanded
  probe.py                  query capability handed to a strategy
  search_grid_ascent.py     grid seed + steepest-ascent walk (default)
  search_random_restart.py  threshold random starts + 8-neighbour climb

Strategy selection lives in algorithm_config.py.
"""

from core.plot_bounds import Coord, PLOT_SIZE, MAX_COORD, clamp_to_plot, clamped_coord
from core.directions import CardinalDirection, cycle_from
from core.ranked_backlog import RankedBacklog, EmptyBacklogError
from core.probe import Probe
from core.search_grid_ascent import GridAscentProspector, ProspectSession
from core.search_random_restart import RandomRestartProspector

__all__ = [
    "Coord", "PLOT_SIZE", "MAX_COORD", "clamp_to_plot", "clamped_coord",
    "CardinalDirection", "cycle_from",
    "RankedBacklog", "EmptyBacklogError",
    "Probe",
    "GridAscentProspector", "ProspectSession",
    "RandomRestartProspector",
]
