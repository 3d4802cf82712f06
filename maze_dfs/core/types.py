# maze_dfs/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any, Sequence

Cell = Tuple[int, int]  # (row, col)

OPEN = 0
WALL = 1

@dataclass
class Grid:
    cells: List[List[int]]             # [row][col]

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        cells = [list(r) for r in rows]
        if not cells or not cells[0]:
            raise ValueError("grid must have at least one row and one column")
        width = len(cells[0])
        if any(len(r) != width for r in cells):
            raise ValueError("cells size mismatch")
        return cls(cells)

    def in_bounds(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def is_wall(self, c: Cell) -> bool:
        r, col = c
        return self.cells[r][col] != OPEN

    def is_open(self, c: Cell) -> bool:
        return self.in_bounds(c) and not self.is_wall(c)

@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.status in ("done", "no_path")
