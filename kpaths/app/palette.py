# kpaths/app/palette.py
"""Cell colours. Path ranks go from darkest (1) to lightest blue."""

from typing import Optional, Tuple

from kpaths.core.types import CellKind

RGB = Tuple[int, int, int]

EMPTY_GRAY  = (200, 200, 200)
WALL_DARK   = ( 50,  50,  50)
START_GREEN = (  0, 255,   0)
END_RED     = (255,   0,   0)
GRID_LINE   = (100, 100, 100)

RANK_BLUES: Tuple[RGB, ...] = (
    (  2, 136, 209),   # rank 1, shortest
    ( 41, 182, 246),
    (129, 212, 250),
    (179, 229, 252),
    (224, 247, 250),   # rank 5
)

KIND_COLORS = {
    CellKind.EMPTY: EMPTY_GRAY,
    CellKind.WALL:  WALL_DARK,
    CellKind.START: START_GREEN,
    CellKind.END:   END_RED,
}


def rank_color(rank: int) -> RGB:
    if rank < 1:
        raise ValueError(f"rank must be >= 1, got {rank}")
    return RANK_BLUES[(rank - 1) % len(RANK_BLUES)]


def cell_color(kind: CellKind, rank: Optional[int]) -> RGB:
    # a rank label paints over the base kind
    if rank is not None:
        return rank_color(rank)
    return KIND_COLORS[kind]
