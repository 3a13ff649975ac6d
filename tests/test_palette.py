import pytest

from kpaths.app.palette import (
    END_RED,
    RANK_BLUES,
    START_GREEN,
    WALL_DARK,
    cell_color,
    rank_color,
)
from kpaths.core.types import CellKind


def test_ranks_get_lighter():
    assert rank_color(1) == (2, 136, 209)
    assert rank_color(5) == (224, 247, 250)
    assert [sum(rank_color(r)) for r in range(1, 6)] == sorted(sum(c) for c in RANK_BLUES)


def test_ranks_wrap_after_five():
    assert rank_color(6) == rank_color(1)


def test_rank_zero_is_rejected():
    with pytest.raises(ValueError):
        rank_color(0)


def test_cell_color():
    assert cell_color(CellKind.WALL, None) == WALL_DARK
    assert cell_color(CellKind.START, None) == START_GREEN
    assert cell_color(CellKind.END, None) == END_RED
    assert cell_color(CellKind.EMPTY, 2) == rank_color(2)
