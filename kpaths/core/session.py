# kpaths/core/session.py
#!/usr/bin/env python3
"""
Session-level operations on a Grid.

Designation problems are returned as values (InvalidStart / InvalidEnd),
never raised; the caller decides whether to log or ignore them. An exhausted
search just means fewer paths in the returned list.

Phases:
    IDLE -> AWAITING_START -> AWAITING_END -> SEARCHING -> DONE
DONE refuses further clicks until reset() puts the session back to
AWAITING_START.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional, Union

from kpaths._logger import logger  # noqa
from kpaths.core.orchestrator import find_disjoint_paths
from kpaths.core.types import Cell, CellKind, Grid, RankedPath

WallPredicate = Union[Callable[[int, int], bool], Iterable[bool]]


@dataclass
class InvalidStart:
    point: Cell
    reason: str


@dataclass
class InvalidEnd:
    point: Cell
    reason: str


class Phase(Enum):
    IDLE = "idle"
    AWAITING_START = "awaiting_start"
    AWAITING_END = "awaiting_end"
    SEARCHING = "searching"
    DONE = "done"


def _build_mask(width: int, height: int, wall_predicate: Optional[WallPredicate]) -> List[List[bool]]:
    if wall_predicate is None:
        return [[False] * width for _ in range(height)]
    if callable(wall_predicate):
        return [[bool(wall_predicate(x, y)) for x in range(width)] for y in range(height)]
    it = iter(wall_predicate)
    try:
        return [[bool(next(it)) for _ in range(width)] for _ in range(height)]
    except StopIteration:
        raise ValueError(f"wall source ran out before filling {width}x{height} cells") from None


def initialize(width: int, height: int, wall_predicate: Optional[WallPredicate] = None) -> Grid:
    """New grid; wall_predicate is f(x, y) -> bool or a row-major stream of bools."""
    if width < 1 or height < 1:
        raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
    return Grid.from_mask(_build_mask(width, height, wall_predicate))


def designate_start(grid: Grid, point: Cell) -> Optional[InvalidStart]:
    if grid.start is not None:
        return InvalidStart(point, "start already designated")
    if not grid.in_bounds(point):
        return InvalidStart(point, "out of bounds")
    if grid.is_wall(point):
        return InvalidStart(point, "cell is a wall")
    grid.start = point
    grid.set_kind(point, CellKind.START)
    logger.info(f"Start set at {point}")
    return None


def designate_end(grid: Grid, point: Cell, k: int) -> Union[List[RankedPath], InvalidEnd]:
    """Place End and run the full k-path search; returns the ranked paths."""
    if grid.start is None:
        return InvalidEnd(point, "start not designated")
    if grid.end is not None:
        return InvalidEnd(point, "end already designated")
    if not grid.in_bounds(point):
        return InvalidEnd(point, "out of bounds")
    if point == grid.start:
        return InvalidEnd(point, "end equals start")
    if grid.is_wall(point):
        return InvalidEnd(point, "cell is a wall")
    grid.end = point
    grid.set_kind(point, CellKind.END)
    logger.info(f"End set at {point}")
    return find_disjoint_paths(grid, k)


def reset(grid: Grid, hard: bool = False, wall_predicate: Optional[WallPredicate] = None) -> None:
    """Soft: clear ranks and endpoints. Hard: also replace the walls."""
    grid.clear_marks()
    if hard:
        fresh = Grid.from_mask(_build_mask(grid.width, grid.height, wall_predicate))
        grid.cells = fresh.cells
        grid.ranks = fresh.ranks


@dataclass
class Session:
    width: int
    height: int
    k: int = 5
    wall_factory: Optional[Callable[[], WallPredicate]] = None
    grid: Optional[Grid] = None
    phase: Phase = Phase.IDLE
    paths: List[RankedPath] = field(default_factory=list)

    def start(self) -> Grid:
        walls = self.wall_factory() if self.wall_factory else None
        self.grid = initialize(self.width, self.height, walls)
        self.paths = []
        self.phase = Phase.AWAITING_START
        return self.grid

    def click(self, cell: Cell) -> Union[None, InvalidStart, InvalidEnd, List[RankedPath]]:
        if self.phase is Phase.IDLE:
            self.start()
        if self.phase is Phase.DONE:
            logger.info("Paths already found. Press 'C' or 'R' to reset.")
            return InvalidEnd(cell, "search already done")

        if self.phase is Phase.AWAITING_START:
            err = designate_start(self.grid, cell)
            if err is None:
                self.phase = Phase.AWAITING_END
            else:
                logger.info(f"Start refused at {cell}: {err.reason}")
            return err

        self.phase = Phase.SEARCHING
        result = designate_end(self.grid, cell, self.k)
        if isinstance(result, InvalidEnd):
            logger.info(f"End refused at {cell}: {result.reason}")
            self.phase = Phase.AWAITING_END
            return result
        self.paths = result
        self.phase = Phase.DONE
        return result

    def reset(self, hard: bool = False) -> None:
        if self.grid is None:
            self.start()
            return
        if hard:
            reset(self.grid, hard=True,
                  wall_predicate=self.wall_factory() if self.wall_factory else None)
            logger.info("Grid randomized and reset.")
        else:
            reset(self.grid)
            logger.info("Grid cleared for new pathfinding.")
        self.paths = []
        self.phase = Phase.AWAITING_START
