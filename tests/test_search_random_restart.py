import numpy as np

from core.plot_bounds import Coord
from core.search_random_restart import RandomRestartProspector
from simulation.plot import SimulatedProbe, cone_plot, flat_plot, random_hills_plot


def _pairwise_min_distance(coords):
    pts = np.array([(c.x, c.y) for c in coords], dtype=float)
    diff = pts[:, None, :] - pts[None, :, :]
    dist = np.hypot(diff[..., 0], diff[..., 1])
    np.fill_diagonal(dist, np.inf)
    return dist.min()


def test_stays_within_budget_and_never_requeries():
    probe = SimulatedProbe(random_hills_plot(np.random.default_rng(11)), budget=100)
    RandomRestartProspector(seed=5).prospect(probe)
    assert probe.queries_used == 100
    assert len(probe.query_log) == 100
    assert len(set(probe.query_log)) == 100
    assert all(c.is_on_plot() for c in probe.query_log)


def test_low_plot_keeps_sampling_spread_out_starts():
    probe = SimulatedProbe(flat_plot(5), budget=100)
    prospector = RandomRestartProspector(min_start_value=300, seed=1)
    prospector.prospect(probe)
    assert probe.queries_used == 100
    assert prospector.climb_steps == 0
    assert _pairwise_min_distance(probe.query_log) >= 10


def test_stops_early_when_plot_is_saturated():
    probe = SimulatedProbe(flat_plot(5), budget=100)
    RandomRestartProspector(min_point_distance=400, seed=2).prospect(probe)
    assert 0 < probe.queries_used < 100


def test_zero_budget_issues_no_queries():
    probe = SimulatedProbe(flat_plot(5), budget=0)
    RandomRestartProspector(seed=3).prospect(probe)
    assert probe.query_log == []


def test_surrounding_ring_stays_on_plot():
    probe = SimulatedProbe(flat_plot(5), budget=100)
    prospector = RandomRestartProspector()
    ring = prospector._surrounding_coords(Coord(0, 0), probe)
    assert ring == [Coord(10, 0), Coord(0, 10), Coord(7, 7)]


def test_ring_skips_points_crowding_earlier_queries():
    probe = SimulatedProbe(flat_plot(5), budget=100)
    probe.query(Coord(100, 100))
    ring = RandomRestartProspector()._surrounding_coords(Coord(100, 100), probe)
    # diagonals sit 9.9 away from the centre, closer than min_point_distance
    assert ring == [Coord(90, 100), Coord(100, 90), Coord(110, 100), Coord(100, 110)]


def test_climb_walks_up_a_hill():
    plot = cone_plot((256, 256), peak=1000)
    probe = SimulatedProbe(plot, budget=100)
    prospector = RandomRestartProspector()
    probe.query(Coord(200, 256))

    prospector._climb_from(Coord(200, 256), probe)

    assert probe.best_value == 996
    assert Coord(260, 256) in probe.query_history
    assert probe.queries_remaining > 0
