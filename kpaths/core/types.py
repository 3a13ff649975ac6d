# kpaths/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional, Dict, Any, Sequence

Cell = Tuple[int, int]  # (col, row)


class CellKind(Enum):
    EMPTY = 0
    WALL = 1
    START = 2
    END = 3


@dataclass
class Grid:
    width: int
    height: int
    cells: List[List[CellKind]]                 # [row][col]
    ranks: List[List[Optional[int]]]            # [row][col], rank of the path that consumed the cell
    start: Optional[Cell] = None
    end: Optional[Cell] = None

    @classmethod
    def from_mask(cls, mask: Sequence[Sequence[bool]]) -> "Grid":
        height = len(mask)
        width = len(mask[0]) if height else 0
        if any(len(row) != width for row in mask):
            raise ValueError("wall mask rows have different lengths")
        cells = [[CellKind.WALL if v else CellKind.EMPTY for v in row] for row in mask]
        ranks: List[List[Optional[int]]] = [[None] * width for _ in range(height)]
        return cls(width, height, cells, ranks)

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def kind_of(self, c: Cell) -> CellKind:
        x, y = c
        return self.cells[y][x]

    def is_wall(self, c: Cell) -> bool:
        return self.kind_of(c) is CellKind.WALL

    def rank_of(self, c: Cell) -> Optional[int]:
        x, y = c
        return self.ranks[y][x]

    def is_blocked(self, c: Cell) -> bool:
        """Wall, or already consumed by an earlier path."""
        return self.is_wall(c) or self.rank_of(c) is not None

    def is_passable(self, c: Cell, sink: Optional[Cell] = None) -> bool:
        # the sink stays a legal target whatever its wall/rank status
        if not self.in_bounds(c):
            return False
        return c == sink or not self.is_blocked(c)

    def mark(self, c: Cell, rank: int) -> None:
        x, y = c
        self.ranks[y][x] = rank

    def set_kind(self, c: Cell, kind: CellKind) -> None:
        x, y = c
        self.cells[y][x] = kind

    def clear_marks(self) -> None:
        """Drop ranks and endpoints; walls stay."""
        for row in range(self.height):
            for col in range(self.width):
                if self.cells[row][col] is not CellKind.WALL:
                    self.cells[row][col] = CellKind.EMPTY
                self.ranks[row][col] = None
        self.start = None
        self.end = None

    def wall_mask(self) -> List[List[bool]]:
        return [[k is CellKind.WALL for k in row] for row in self.cells]


@dataclass
class Path:
    points: List[Cell] = field(default_factory=list)   # source -> sink
    cost: int = -1                                     # -1 means not found

    @property
    def found(self) -> bool:
        return self.cost != -1

    @property
    def length(self) -> int:
        return len(self.points)

    def interior(self, start: Optional[Cell], end: Optional[Cell]) -> List[Cell]:
        return [p for p in self.points if p != start and p != end]


@dataclass
class RankedPath:
    rank: int          # 1-based, discovery order
    path: Path


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
