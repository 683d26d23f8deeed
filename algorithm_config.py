#!/usr/bin/env python3
"""
ALGORITHM SELECTION
===================

The search strategy spends a 100-query budget on a 512x512 plot and is
scored by the best value it queried.

Default strategy (grid ascent):
1. Query an 8x8 lattice spread over the whole plot
2. Keep every sample in a backlog ranked by value
3. Pop the best sample, probe its 4 neighbours 12 cells away
4. First strictly better neighbour goes back in the backlog
5. Repeat until the budget is spent
"""

ALGORITHM = "search_grid_ascent"

ALGORITHM_INFO = {
    "search_grid_ascent": {
        "name": "Grid Ascent",
        "class": "GridAscentProspector",
        "description": "8x8 grid seed + steepest-ascent walk with directional memory.",
        "recommended": True
    },
    "search_random_restart": {
        "name": "Random Restart Climber",
        "class": "RandomRestartProspector",
        "description": "Random starts above a value threshold + 8-neighbour climb.",
        "recommended": False
    }
}

# Passed to the strategy as keyword arguments (unused keys are ignored)
SEARCH_CONFIG = {
    "grid_dim": 8,
    "stride": 12,
    "min_start_value": 300,
}

PLOT_CONFIG = {
    "budget": 100,
    "hills": 6,
    "max_height": 1000,
}
