# maze_dfs/app/render.py
#!/usr/bin/env python3
from typing import Iterable

from maze_dfs.core.types import Grid, Cell

WALL_CH  = "1"
OPEN_CH  = "0"
ENTRY_CH = "S"
EXIT_CH  = "E"

def format_cell(c: Cell) -> str:
    return f"({c[0]},{c[1]})"

def format_maze(grid: Grid, entry: Cell, exit: Cell) -> str:
    """One line per row, cells space-separated. Entry wins over exit."""
    lines = []
    for row in range(grid.rows):
        out = []
        for col in range(grid.cols):
            c = (row, col)
            if c == entry:
                out.append(ENTRY_CH)
            elif c == exit:
                out.append(EXIT_CH)
            else:
                out.append(WALL_CH if grid.is_wall(c) else OPEN_CH)
        lines.append(" ".join(out))
    return "\n".join(lines)

def format_path(path: Iterable[Cell]) -> str:
    return "\n".join(format_cell(c) for c in path)
