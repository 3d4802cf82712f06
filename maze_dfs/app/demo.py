#!/usr/bin/env python3
"""
Rat-in-a-maze console demo — DFS on the fixed sample mazes.

For each sample maze:
    print the layout (S = entry, E = exit, 1 = wall, 0 = open)
    -> check the endpoints
    -> run DFS
    -> print the path, "no path", or the error

Logging:
- ENV: MAZE_DFS_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR (default WARNING)
"""

import logging
import os
import sys
from typing import Callable

from maze_dfs.app.mazes import SAMPLE_MAZES, Maze
from maze_dfs.app.render import format_cell, format_maze, format_path
from maze_dfs.core.dfs import solve, validate_endpoints
from maze_dfs.core.errors import PathReconstructionError

logger = logging.getLogger(__name__)

SEPARATOR = "\n-----------------------------------\n"
DEFAULT_LOG_LEVEL = "WARNING"

# ---------- Log level resolution ----------
def resolve_log_level() -> int:
    name = os.getenv("MAZE_DFS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.getLevelName(DEFAULT_LOG_LEVEL)

def configure_logging() -> None:
    logging.basicConfig(
        level=resolve_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

# ---------- One case ----------
def run_case(maze: Maze, echo: Callable[[str], None] = print) -> str:
    """Print layout and outcome for one maze.

    Returns "found", "no_path", "invalid" or "error".
    """
    logger.info("Running case %s", maze.name)
    echo(f"--- {maze.title} ---")
    echo("Maze Layout:")
    echo(format_maze(maze.grid, maze.entry, maze.exit))

    if not validate_endpoints(maze.grid, maze.entry, maze.exit):
        logger.warning("Invalid endpoints for %s: entry=%s exit=%s",
                       maze.name, maze.entry, maze.exit)
        echo("\nInvalid start or end point (e.g., wall or out of bounds).")
        return "invalid"

    echo(f"\nAttempting to find path from {format_cell(maze.entry)} "
         f"to {format_cell(maze.exit)}...")
    try:
        path = solve(maze.grid, maze.entry, maze.exit)
    except PathReconstructionError as ex:
        logger.error("Case %s: %s", maze.name, ex)
        echo(f"Error: {ex}")
        return "error"

    if path is None:
        echo("\nNo path to the exit found.")
        return "no_path"

    echo("\nA path to the exit has been found!")
    echo("Path coordinates (Start to Exit):")
    echo(format_path(path))
    return "found"

# ---------- main ----------
def main() -> int:
    configure_logging()
    for maze in SAMPLE_MAZES.values():
        outcome = run_case(maze)
        logger.info("Case %s finished: %s", maze.name, outcome)
        print(SEPARATOR)
    return 0

if __name__ == "__main__":
    sys.exit(main())
