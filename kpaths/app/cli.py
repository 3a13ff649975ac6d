# kpaths/app/cli.py
#!/usr/bin/env python3
"""
Headless k-path runner.

    kpaths-cli --start=0,0 --end=19,14 [--map=maps/corridors.json] [--k=5] [--seed=7]
               [--save=board.json]

Settings flags (--width, --height, --k, --wall-density, --seed, --map,
--log-level) are shared with the viewer. With --map, start/end default to
the map's start/goal. --save writes the board (walls + endpoints)
in the same JSON map format.
"""

import sys
from typing import List, Optional, Sequence

from kpaths._logger import set_level
from kpaths.core.config import resolve_settings
from kpaths.core.session import InvalidEnd, designate_end, designate_start, initialize
from kpaths.core.types import Cell, CellKind, Grid, RankedPath
from kpaths.core.walls import load_map, random_walls, save_map


def parse_cell(raw: str) -> Cell:
    try:
        x, y = (int(v) for v in raw.split(","))
    except ValueError:
        raise ValueError(f"expected x,y but got {raw!r}") from None
    return (x, y)


def render_ascii(grid: Grid) -> str:
    """'#' wall, 'S'/'E' endpoints, rank digit (mod 10) on consumed cells, '.' empty."""
    lines: List[str] = []
    for row in range(grid.height):
        chars = []
        for col in range(grid.width):
            kind = grid.cells[row][col]
            rank = grid.ranks[row][col]
            if kind is CellKind.START:
                chars.append("S")
            elif kind is CellKind.END:
                chars.append("E")
            elif kind is CellKind.WALL:
                chars.append("#")
            elif rank is not None:
                chars.append(str(rank % 10))
            else:
                chars.append(".")
        lines.append("".join(chars))
    return "\n".join(lines)


def format_report(paths: Sequence[RankedPath], k: int) -> str:
    lines = [f"found {len(paths)} of {k} paths"]
    for rp in paths:
        lines.append(f"  Path {rp.rank} Cost: {rp.path.cost}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = resolve_settings(argv)
        set_level(settings.log_level)
        start: Optional[Cell] = None
        end: Optional[Cell] = None
        save_path: Optional[str] = None
        for arg in argv:
            if arg.startswith("--start="):
                start = parse_cell(arg.split("=", 1)[1])
            elif arg.startswith("--end="):
                end = parse_cell(arg.split("=", 1)[1])
            elif arg.startswith("--save="):
                save_path = arg.split("=", 1)[1]

        if settings.map_path:
            mask, map_start, map_goal = load_map(settings.map_path)
            start = start if start is not None else map_start
            end = end if end is not None else map_goal
        else:
            mask = random_walls(settings.width, settings.height,
                                settings.wall_density, settings.seed)
    except (ValueError, OSError) as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 2

    if start is None or end is None:
        print("error: --start=x,y and --end=x,y are required", file=sys.stderr)
        return 2

    grid = initialize(len(mask[0]), len(mask), lambda x, y: mask[y][x])
    err = designate_start(grid, start)
    if err is not None:
        print(f"error: invalid start {err.point}: {err.reason}", file=sys.stderr)
        return 1
    result = designate_end(grid, end, settings.k)
    if isinstance(result, InvalidEnd):
        print(f"error: invalid end {result.point}: {result.reason}", file=sys.stderr)
        return 1

    print(format_report(result, settings.k))
    print(render_ascii(grid))
    if save_path:
        try:
            save_map(save_path, grid)
        except OSError as ex:
            print(f"error: could not save {save_path}: {ex}", file=sys.stderr)
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
