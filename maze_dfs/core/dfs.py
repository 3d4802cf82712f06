#!/usr/bin/env python3
"""
Depth-first search over an 8-connected grid, one expansion per step().

Algorithm API (same shape as the other workshop solvers):
- init(grid, entry, exit) - reset() - step() -> StepResult - run()

Frontier is a plain list used as a LIFO stack. A cell is marked visited when
it is pushed, not when it is popped, so each open cell enters the frontier at
most once and the search ends after at most rows*cols pops.

Neighbours are pushed in NEIGHBOR_OFFSETS order (NW, N, NE, W, E, SW, S, SE),
so the last one pushed (SE) is the first one explored.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from maze_dfs.core.errors import InvalidEndpointError, PathReconstructionError
from maze_dfs.core.types import Grid, StepResult

Cell = Tuple[int, int]  # (row, col)

logger = logging.getLogger(__name__)

# (drow, dcol)
NEIGHBOR_OFFSETS: Tuple[Cell, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def validate_endpoints(grid: Grid, entry: Cell, exit: Cell) -> bool:
    """True when both entry and exit are inside the grid and open."""
    return grid.is_open(entry) and grid.is_open(exit)


def is_valid_move(grid: Grid, c: Cell, visited: Set[Cell]) -> bool:
    # bounds first, is_wall indexes the grid
    if not grid.in_bounds(c):
        return False
    return not grid.is_wall(c) and c not in visited


def reconstruct_path(parent: Dict[Cell, Cell], entry: Cell, exit: Cell) -> List[Cell]:
    """Walk predecessors back from exit to entry and return entry -> exit.

    Raises PathReconstructionError if the chain breaks before the entry.
    """
    path: List[Cell] = []
    cur = exit
    while cur != entry:
        path.append(cur)
        if cur not in parent:
            raise PathReconstructionError(cur)
        cur = parent[cur]
    path.append(entry)
    path.reverse()
    return path


@dataclass
class DFSAlgo:
    name: str = "DFS"

    # Internal state
    grid: Optional[Grid] = None
    entry: Optional[Cell] = None
    exit: Optional[Cell] = None
    frontier: List[Cell] = field(default_factory=list)     # LIFO
    visited: Set[Cell] = field(default_factory=set)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    path: Optional[List[Cell]] = None
    popped_count: int = 0
    done: bool = False
    no_path: bool = False

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, entry: Cell, exit: Cell) -> None:
        """Attach to a grid and endpoints, then reset."""
        self.grid = grid
        self.entry = entry
        self.exit = exit
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed the frontier with the entry."""
        if self.grid is None:
            return
        self.frontier.clear()
        self.visited.clear()
        self.parent.clear()
        self.path = None
        self.popped_count = 0
        self.done = False
        self.no_path = False

        self.visited.add(self.entry)
        self.frontier.append(self.entry)

    # -------------------- helpers --------------------

    def _neighbors8(self, c: Cell) -> List[Cell]:
        """Unvisited open neighbours of c, in NEIGHBOR_OFFSETS order."""
        r, col = c
        out: List[Cell] = []
        for dr, dc in NEIGHBOR_OFFSETS:
            n = (r + dr, col + dc)
            if is_valid_move(self.grid, n, self.visited):
                out.append(n)
        return out

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE DFS expansion:
          - Pop the most recently pushed cell.
          - If it is the exit, reconstruct the path and finish.
          - Else mark, link and push every valid neighbour.
        """
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            return StepResult(status="done", path=self.path,
                              metrics=self._metrics(path_len=len(self.path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.frontier:
            self.no_path = True
            logger.debug("%s: frontier exhausted after %d pops, no path to %s",
                         self.name, self.popped_count, self.exit)
            return StepResult(status="no_path", metrics=self._metrics())

        u = self.frontier.pop()
        self.popped_count += 1

        if u == self.exit:
            self.path = reconstruct_path(self.parent, self.entry, self.exit)
            self.done = True
            logger.debug("%s: reached %s after %d pops, path length %d",
                         self.name, u, self.popped_count, len(self.path))
            return StepResult(status="done", closed=[u], current=u, path=self.path,
                              metrics=self._metrics(path_len=len(self.path)))

        opened_now: List[Cell] = []
        for v in self._neighbors8(u):
            self.visited.add(v)
            self.parent[v] = u
            self.frontier.append(v)
            opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> StepResult:
        """Step until done or no_path and return the final result."""
        res = self.step()
        while not res.finished and res.status != "idle":
            res = self.step()
        return res

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "frontier_size": len(self.frontier),
            "visited_count": len(self.visited),
            "path_len": path_len,
        }


def solve(grid: Grid, entry: Cell, exit: Cell) -> Optional[List[Cell]]:
    """Path from entry to exit, or None when the exit is unreachable.

    Endpoints are assumed valid; check them with validate_endpoints first.
    """
    logger.debug("DFS from %s to %s on %dx%d grid", entry, exit, grid.rows, grid.cols)
    algo = DFSAlgo()
    algo.init(grid, entry, exit)
    res = algo.run()
    return res.path if res.status == "done" else None


def find_path(grid: Grid, entry: Cell, exit: Cell) -> Optional[List[Cell]]:
    """Like solve(), but raises InvalidEndpointError for bad endpoints."""
    if not validate_endpoints(grid, entry, exit):
        raise InvalidEndpointError(entry, exit)
    return solve(grid, entry, exit)
