# kpaths/core/orchestrator.py
#!/usr/bin/env python3
"""
Greedy k disjoint shortest paths.

Runs Dijkstra up to k times between the same source and sink. After each
hit, every interior cell of the path is stamped with the path's rank so the
next search cannot reuse it. Source and sink are never stamped and stay
usable as endpoints. Stops early (no error) the first time the sink becomes
unreachable, so fewer than k paths may come back even when k disjoint routes
exist: earlier paths are not chosen with later ones in mind.
"""

from typing import List, Optional

from kpaths._logger import logger  # noqa
from kpaths.core.dijkstra import DijkstraAlgo
from kpaths.core.types import Cell, Grid, RankedPath


def find_disjoint_paths(grid: Grid, k: int,
                        source: Optional[Cell] = None,
                        sink: Optional[Cell] = None) -> List[RankedPath]:
    source = grid.start if source is None else source
    sink = grid.end if sink is None else sink

    logger.info(f"Finding {k} shortest disjoint paths from {source} to {sink}")
    found: List[RankedPath] = []
    algo = DijkstraAlgo()
    for rank in range(1, k + 1):
        algo.init(grid, source, sink)
        path = algo.run()
        if not path.found:
            logger.info("No more paths found.")
            break

        logger.info(f"  Path {rank} Cost: {path.cost}")
        found.append(RankedPath(rank=rank, path=path))
        for p in path.interior(source, sink):
            grid.mark(p, rank)

    logger.info(f"Path search complete: {len(found)}/{k} paths")
    return found
