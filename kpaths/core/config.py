# kpaths/core/config.py
#!/usr/bin/env python3
"""
Runtime settings.

Resolution order (later wins):
- dataclass defaults
- ENV: KPATHS_WIDTH, KPATHS_HEIGHT, KPATHS_CELL_SIZE, KPATHS_K,
       KPATHS_WALL_DENSITY, KPATHS_SEED, KPATHS_MAP, KPATHS_LOG_LEVEL
- CLI: --width=.. --height=.. --cell-size=.. --k=.. --wall-density=..
       --seed=.. --map=.. --log-level=..
"""

import os
import sys
from dataclasses import dataclass, replace
from typing import Dict, Mapping, Optional, Sequence


@dataclass
class Settings:
    width: int = 20
    height: int = 15
    cell_size: int = 40
    k: int = 5
    wall_density: float = 0.25
    seed: Optional[int] = None
    map_path: Optional[str] = None
    log_level: str = "INFO"


_ENV_KEYS = {
    "KPATHS_WIDTH": "width",
    "KPATHS_HEIGHT": "height",
    "KPATHS_CELL_SIZE": "cell_size",
    "KPATHS_K": "k",
    "KPATHS_WALL_DENSITY": "wall_density",
    "KPATHS_SEED": "seed",
    "KPATHS_MAP": "map_path",
    "KPATHS_LOG_LEVEL": "log_level",
}

_CLI_KEYS = {
    "width": "width",
    "height": "height",
    "cell-size": "cell_size",
    "k": "k",
    "wall-density": "wall_density",
    "seed": "seed",
    "map": "map_path",
    "log-level": "log_level",
}


def _coerce(name: str, raw: str):
    try:
        if name in ("width", "height", "cell_size", "k"):
            return int(raw)
        if name == "seed":
            return None if raw.lower() in ("", "none") else int(raw)
        if name == "wall_density":
            return float(raw)
    except ValueError:
        raise ValueError(f"invalid value for {name}: {raw!r}") from None
    return raw


def _validate(s: Settings) -> Settings:
    if s.width < 1 or s.height < 1:
        raise ValueError(f"grid must be at least 1x1, got {s.width}x{s.height}")
    if s.cell_size < 4:
        raise ValueError(f"cell_size too small: {s.cell_size}")
    if s.k < 1:
        raise ValueError(f"k must be >= 1, got {s.k}")
    if not 0.0 <= s.wall_density <= 1.0:
        raise ValueError(f"wall_density must be in [0, 1], got {s.wall_density}")
    return s


def resolve_settings(argv: Optional[Sequence[str]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    updates: Dict[str, object] = {}
    for env_key, name in _ENV_KEYS.items():
        if env_key in environ:
            updates[name] = _coerce(name, environ[env_key])

    for arg in argv:
        if not arg.startswith("--") or "=" not in arg:
            continue
        key, raw = arg[2:].split("=", 1)
        name = _CLI_KEYS.get(key)
        if name is not None:
            updates[name] = _coerce(name, raw)

    return _validate(replace(Settings(), **updates))


