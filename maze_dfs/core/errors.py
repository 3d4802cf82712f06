# maze_dfs/core/errors.py
#!/usr/bin/env python3
from typing import Tuple

Cell = Tuple[int, int]  # (row, col)


class MazeError(Exception):
    """Base class for solver errors."""


class InvalidEndpointError(MazeError, ValueError):
    """Entry or exit is out of bounds or on a wall."""

    def __init__(self, entry: Cell, exit: Cell):
        self.entry = entry
        self.exit = exit
        super().__init__(
            f"Invalid start {entry} or end {exit} (wall or out of bounds)"
        )


class PathReconstructionError(MazeError, RuntimeError):
    """A cell on the way back to the entry has no recorded predecessor."""

    def __init__(self, cell: Cell):
        self.cell = cell
        super().__init__(
            f"Path reconstruction failed. Predecessor not found for ({cell[0]},{cell[1]})"
        )
