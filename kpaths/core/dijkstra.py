# kpaths/core/dijkstra.py
#!/usr/bin/env python3
"""
Dijkstra on a 4-connected unit-cost grid, one expansion per step().

API (shared with the viewer):
- init(grid, source, sink) - reset() - step() -> StepResult - run() -> Path

Blocking:
- A cell is expandable if it is in bounds and either the sink or neither a
  wall nor carrying a path rank. The sink is always reachable so that every
  search in a k-path run can still end on it.
- A blocked source fails at once (unless it is the sink itself).

The PQ holds (g, seq, cell) and is never deduplicated; stale entries are
dropped on pop when the cell is already closed. Ties go FIFO by seq.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple, List, Optional
import heapq
from math import inf

from kpaths.core.types import StepResult, Grid, Path, Cell

# up, right, down, left
MOVES: Tuple[Cell, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass
class DijkstraAlgo:
    name: str = "Dijkstra"

    grid: Optional[Grid] = None
    source: Optional[Cell] = None
    sink: Optional[Cell] = None
    open_pq: List[Tuple[int, int, Cell]] = field(default_factory=list)   # (g, seq, cell)
    open_set: set = field(default_factory=set)
    closed_set: set = field(default_factory=set)
    g: Dict[Cell, int] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    seq: int = 0

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, source: Optional[Cell] = None, sink: Optional[Cell] = None) -> None:
        """Bind to a grid; source/sink default to the grid's start/end."""
        self.grid = grid
        self.source = source if source is not None else grid.start
        self.sink = sink if sink is not None else grid.end
        self.reset()

    def reset(self) -> None:
        if self.grid is None:
            return
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.g.clear()
        self.parent.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.seq = 0

        s = self.source
        if s is None or self.sink is None or not self.grid.in_bounds(s):
            self.no_path = True
            return
        if s != self.sink and self.grid.is_blocked(s):
            self.no_path = True
            return

        self.g[s] = 0
        heapq.heappush(self.open_pq, (0, self._bump(), s))
        self.open_set.add(s)

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _neighbors4(self, c: Cell) -> List[Cell]:
        x, y = c
        out: List[Cell] = []
        for dx, dy in MOVES:
            n = (x + dx, y + dy)
            if self.grid.is_passable(n, self.sink):
                out.append(n)
        return out

    def _reconstruct_path(self, end: Cell) -> List[Cell]:
        path: List[Cell] = []
        cur = end
        while True:
            path.append(cur)
            if cur == self.source:
                break
            cur = self.parent[cur]
        path.reverse()
        return path

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self._reconstruct_path(self.sink)
            return StepResult(status="done", path=path,
                              metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.open_pq:
            self.no_path = True
            return StepResult(status="no_path", metrics=self._metrics())

        g_u, _, u = heapq.heappop(self.open_pq)
        # stale entry: u was already finalized with a smaller g
        if u in self.closed_set:
            return StepResult(status="running", current=u, metrics=self._metrics())

        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)

        if u == self.sink:
            self.done = True
            path = self._reconstruct_path(u)
            return StepResult(status="done", closed=[u], current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        opened_now: List[Cell] = []
        for v in self._neighbors4(u):
            if v in self.closed_set:
                continue
            alt = self.g[u] + 1
            if alt < self.g.get(v, inf):
                self.g[v] = alt
                self.parent[v] = u
                heapq.heappush(self.open_pq, (alt, self._bump(), v))
                if v not in self.open_set:
                    self.open_set.add(v)
                    opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> Path:
        """Step until the search settles; cost -1 if the sink is unreachable."""
        res = self.step()
        while res.status == "running":
            res = self.step()
        if res.status != "done" or res.path is None:
            return Path()
        return Path(points=res.path, cost=len(res.path) - 1)

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": self.g.get(self.sink) if self.done else None,
        }


def shortest_path(grid: Grid, source: Optional[Cell] = None, sink: Optional[Cell] = None) -> Path:
    algo = DijkstraAlgo()
    algo.init(grid, source, sink)
    return algo.run()
