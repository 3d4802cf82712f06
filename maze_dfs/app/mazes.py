# maze_dfs/app/mazes.py
#!/usr/bin/env python3
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from maze_dfs.core.types import Grid, Cell

@dataclass
class Maze:
    name: str
    title: str
    grid: Grid
    entry: Cell
    exit: Cell

# ---------- Loader ----------
def load_maze(data: Dict[str, Any]) -> Maze:
    """Build a Maze from a map dict. Endpoints are not checked here."""
    grid  = Grid.from_rows(data["cells"])
    entry = tuple(data["entry"])
    exit  = tuple(data["exit"])
    if len(entry) != 2 or len(exit) != 2:
        raise ValueError("entry and exit must be (row, col) pairs")
    name = str(data["name"])
    return Maze(name, str(data.get("title", name)), grid, entry, exit)

# ---------- Sample maps ----------
# 0: open, 1: wall
_MAP_DATA: Tuple[Dict[str, Any], ...] = (
    {
        "name": "01_path_exists",
        "title": "Test Case 1: Path Exists",
        "cells": [
            [1, 1, 1, 1, 1, 1],
            [1, 0, 0, 0, 0, 1],
            [1, 0, 1, 1, 0, 1],
            [1, 0, 0, 1, 0, 1],
            [1, 1, 0, 0, 0, 1],
            [1, 1, 1, 1, 1, 1],
        ],
        "entry": (1, 1),
        "exit": (4, 4),
    },
    {
        "name": "02_no_path",
        "title": "Test Case 2: No Path",
        "cells": [
            [1, 1, 1, 1, 1, 1],
            [1, 0, 1, 0, 0, 1],
            [1, 0, 1, 1, 0, 1],
            [1, 0, 0, 1, 0, 1],
            [1, 1, 1, 1, 0, 1],   # exit sealed off from the entry
            [1, 1, 1, 1, 1, 1],
        ],
        "entry": (1, 1),
        "exit": (4, 4),
    },
)

SAMPLE_MAZES: "OrderedDict[str, Maze]" = OrderedDict(
    (d["name"], load_maze(d)) for d in _MAP_DATA
)
