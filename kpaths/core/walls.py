# kpaths/core/walls.py
#!/usr/bin/env python3
"""Wall masks: random generation and JSON map files (1 = wall)."""

import json
import random
from pathlib import Path
from typing import List, Optional, Tuple, Union

from kpaths.core.types import Cell, Grid

WallMask = List[List[bool]]  # [row][col]


def random_walls(width: int, height: int, density: float = 0.25,
                 seed: Optional[int] = None) -> WallMask:
    rng = random.Random(seed)
    return [[rng.random() < density for _ in range(width)] for _ in range(height)]


def _parse_cell(path, label: str, raw) -> Optional[Cell]:
    if raw is None:
        return None
    try:
        x, y = (int(v) for v in raw)
    except (TypeError, ValueError):
        raise ValueError(f"{path}: {label} must be a pair of integers, got {raw!r}") from None
    return (x, y)


def load_map(path: Union[str, Path]) -> Tuple[WallMask, Optional[Cell], Optional[Cell]]:
    with open(path, "r") as f:
        data = json.load(f)
    try:
        width = int(data["width"])
        height = int(data["height"])
        cells = data["cells"]
    except (KeyError, TypeError) as ex:
        raise ValueError(f"{path}: missing map field {ex}") from None
    if width < 1 or height < 1:
        raise ValueError(f"{path}: map must be at least 1x1")
    if len(cells) != height or any(len(r) != width for r in cells):
        raise ValueError(f"{path}: cells size mismatch")

    start = _parse_cell(path, "start", data.get("start"))
    goal = _parse_cell(path, "goal", data.get("goal"))
    for label, c in (("start", start), ("goal", goal)):
        if c is None:
            continue
        x, y = c
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"{path}: {label} out of bounds")

    mask = [[v == 1 for v in row] for row in cells]
    return mask, start, goal


def save_map(path: Union[str, Path], grid: Grid) -> None:
    data = {
        "width": grid.width,
        "height": grid.height,
        "cells": [[1 if w else 0 for w in row] for row in grid.wall_mask()],
    }
    if grid.start is not None:
        data["start"] = list(grid.start)
    if grid.end is not None:
        data["goal"] = list(grid.end)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
