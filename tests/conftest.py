from collections import deque
from pathlib import Path as FsPath

import pytest

from kpaths.core.types import Grid

MAPS_DIR = FsPath(__file__).resolve().parents[1] / "maps"


def grid_from(*rows: str) -> Grid:
    """'#' is a wall, anything else is empty."""
    return Grid.from_mask([[ch == "#" for ch in row] for row in rows])


def bfs_cost(grid: Grid, source, sink) -> int:
    """Reference distance with the same blocking rules; -1 if unreachable."""
    if source != sink and grid.is_blocked(source):
        return -1
    dist = {source: 0}
    queue = deque([source])
    while queue:
        cur = queue.popleft()
        if cur == sink:
            return dist[cur]
        x, y = cur
        for n in ((x, y - 1), (x + 1, y), (x, y + 1), (x - 1, y)):
            if n not in dist and grid.is_passable(n, sink):
                dist[n] = dist[cur] + 1
                queue.append(n)
    return -1


def is_contiguous(points) -> bool:
    return all(abs(ax - bx) + abs(ay - by) == 1
               for (ax, ay), (bx, by) in zip(points, points[1:]))


@pytest.fixture
def maps_dir():
    return MAPS_DIR
