#!/usr/bin/env python3
"""
Prospector Search - Simulation Entry Point

Runs the configured search strategy against a batch of randomly generated
plots and reports the best value it found on each.

Search Algorithm:
- Configured in algorithm_config.py (default: search_grid_ascent)
- Override with --algorithm, e.g. --algorithm search_random_restart

Usage:
  python simulation_main.py --plots 20 --seed 7
"""

import argparse
import importlib
import sys
from typing import List, Optional

import numpy as np

from algorithm_config import ALGORITHM, ALGORITHM_INFO, PLOT_CONFIG, SEARCH_CONFIG
from simulation.plot import SimulatedProbe, random_hills_plot


def load_search_class(module_name: str):
    """Load a strategy class from core.<module_name>.
    The class name comes from ALGORITHM_INFO; otherwise the first class in the
    module with a prospect() method is used.
    """
    module = importlib.import_module(f"core.{module_name}")
    info = ALGORITHM_INFO.get(module_name, {})
    class_name = info.get("class")
    if class_name and hasattr(module, class_name):
        return getattr(module, class_name)
    for attr in dir(module):
        obj = getattr(module, attr)
        if isinstance(obj, type) and obj.__module__ == module.__name__ and hasattr(obj, "prospect"):
            return obj
    raise ImportError(f"no search strategy class found in core.{module_name}")


def run_batch(search_algorithm, plots: int, rng: np.random.Generator,
              budget: int = PLOT_CONFIG["budget"]) -> List[dict]:
    results = []
    for i in range(plots):
        plot = random_hills_plot(rng, hills=PLOT_CONFIG["hills"], max_height=PLOT_CONFIG["max_height"])
        probe = SimulatedProbe(plot, budget=budget)
        search_algorithm.prospect(probe)
        results.append({
            "plot": i,
            "best_value": probe.best_value,
            "plot_max": plot.max_value,
            "queries_used": probe.queries_used,
        })
    return results


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run a prospecting strategy on simulated plots")
    parser.add_argument("--algorithm", default=ALGORITHM, help="core.search_* module to load")
    parser.add_argument("--plots", type=int, default=10, help="number of plots to prospect")
    parser.add_argument("--seed", type=int, default=None, help="random seed for plot generation")
    parser.add_argument("--budget", type=int, default=PLOT_CONFIG["budget"], help="queries per plot")
    parser.add_argument("--debug", action="store_true", help="print per-step search output")
    args = parser.parse_args(argv)

    try:
        search_class = load_search_class(args.algorithm)
    except ImportError as e:
        print(f"Failed to load {args.algorithm}: {e}")
        return 1

    search_algorithm = search_class(debug=args.debug, **SEARCH_CONFIG)
    name = ALGORITHM_INFO.get(args.algorithm, {}).get("name", args.algorithm)
    print(f"Using search method: {name} ({args.algorithm})")

    rng = np.random.default_rng(args.seed)
    results = run_batch(search_algorithm, args.plots, rng, budget=args.budget)

    for r in results:
        pct = 100.0 * r["best_value"] / r["plot_max"] if r["plot_max"] else 100.0
        print(f"  plot {r['plot']:3d}: best={r['best_value']:5d}  max={r['plot_max']:5d}  "
              f"({pct:5.1f}%)  queries={r['queries_used']}")
    if results:
        avg = sum(r["best_value"] for r in results) / len(results)
        print(f"Average best value over {len(results)} plots: {avg:.1f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
