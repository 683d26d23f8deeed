"""
Simulation — offline stand-ins for the prospecting harness.

plot.py generates hidden 512x512 plots and wraps them in a budgeted probe.
"""

from simulation.plot import (
    Plot, SimulatedProbe, DEFAULT_BUDGET,
    flat_plot, single_peak_plot, cone_plot, random_hills_plot,
)

__all__ = [
    "Plot", "SimulatedProbe", "DEFAULT_BUDGET",
    "flat_plot", "single_peak_plot", "cone_plot", "random_hills_plot",
]
