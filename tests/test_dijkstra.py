import random

import pytest

from kpaths.core.dijkstra import DijkstraAlgo, shortest_path
from kpaths.core.walls import random_walls
from kpaths.core.types import Grid

from conftest import bfs_cost, grid_from, is_contiguous


def test_straight_line():
    g = grid_from("...", "...", "...")
    p = shortest_path(g, (0, 0), (2, 0))
    assert p.cost == 2
    assert p.points == [(0, 0), (1, 0), (2, 0)]


def test_detours_around_wall():
    g = grid_from(".#.", "...", "...")
    p = shortest_path(g, (0, 0), (2, 0))
    assert p.cost == 4
    assert p.points[0] == (0, 0) and p.points[-1] == (2, 0)
    assert p.cost == p.length - 1
    assert is_contiguous(p.points)


def test_unreachable_sink_reports_not_found():
    g = grid_from(".#.")
    p = shortest_path(g, (0, 0), (2, 0))
    assert p.cost == -1
    assert p.points == []


@pytest.mark.parametrize("block", ["wall", "rank"])
def test_blocked_source_fails_immediately(block):
    g = grid_from("#..") if block == "wall" else grid_from("...")
    if block == "rank":
        g.mark((0, 0), 1)
    algo = DijkstraAlgo()
    algo.init(g, (0, 0), (2, 0))
    res = algo.step()
    assert res.status == "no_path"
    assert res.metrics["popped"] == 0
    assert algo.run().cost == -1


@pytest.mark.parametrize("block", ["wall", "rank"])
def test_sink_exception(block):
    g = grid_from("..#") if block == "wall" else grid_from("...")
    if block == "rank":
        g.mark((2, 0), 1)
    p = shortest_path(g, (0, 0), (2, 0))
    assert p.cost == 2
    assert p.points[-1] == (2, 0)


def test_ranked_cells_are_not_expanded_through():
    g = grid_from("...", "...")
    g.mark((1, 0), 1)
    p = shortest_path(g, (0, 0), (2, 0))
    assert p.cost == 4
    assert (1, 0) not in p.points


def test_source_equals_sink():
    g = grid_from("...")
    p = shortest_path(g, (1, 0), (1, 0))
    assert p.cost == 0
    assert p.points == [(1, 0)]


def test_defaults_to_grid_endpoints():
    g = grid_from("....")
    g.start, g.end = (0, 0), (3, 0)
    assert shortest_path(g).cost == 3


def test_missing_endpoints_is_no_path():
    assert shortest_path(grid_from("...")).cost == -1


def test_search_does_not_touch_the_grid():
    g = grid_from("..#.", "....", ".#..")
    g.mark((1, 1), 3)
    before = ([row[:] for row in g.cells], [row[:] for row in g.ranks])
    shortest_path(g, (0, 0), (3, 2))
    assert (g.cells, g.ranks) == before


def test_step_api_reports_progress():
    g = grid_from("...", "...")
    algo = DijkstraAlgo()
    algo.init(g, (0, 0), (2, 1))
    first = algo.step()
    assert first.status == "running"
    assert first.closed == [(0, 0)]
    assert set(first.opened) == {(1, 0), (0, 1)}

    res = first
    while res.status == "running":
        res = algo.step()
    assert res.status == "done"
    assert res.metrics["path_len"] == 4
    assert res.metrics["total_cost"] == 3
    # finished searches keep answering "done"
    assert algo.step().status == "done"


@pytest.mark.parametrize("seed", range(15))
def test_matches_bfs_distance_on_random_boards(seed):
    rng = random.Random(seed)
    mask = random_walls(12, 9, density=0.3, seed=seed)
    g = Grid.from_mask(mask)
    for _ in range(3):
        g.mark((rng.randrange(12), rng.randrange(9)), 1)
    source = (rng.randrange(12), rng.randrange(9))
    sink = (rng.randrange(12), rng.randrange(9))

    p = shortest_path(g, source, sink)
    assert p.cost == bfs_cost(g, source, sink)
    if p.found:
        assert p.points[0] == source and p.points[-1] == sink
        assert p.cost == p.length - 1
        assert is_contiguous(p.points)
        assert all(not g.is_blocked(c) for c in p.points[1:-1])
