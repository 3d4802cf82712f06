"""Shared fixtures: the two sample mazes and a few small grids."""

import pytest

from maze_dfs.app.mazes import SAMPLE_MAZES
from maze_dfs.core.types import Grid


@pytest.fixture
def path_maze():
    """6x6 maze with a corridor from (1,1) to (4,4)."""
    return SAMPLE_MAZES["01_path_exists"]


@pytest.fixture
def blocked_maze():
    """6x6 maze where (4,4) cannot be reached from (1,1)."""
    return SAMPLE_MAZES["02_no_path"]


@pytest.fixture
def open_grid():
    """5x5 grid with no walls."""
    return Grid.from_rows([[0] * 5 for _ in range(5)])


@pytest.fixture
def diagonal_grid():
    """Only reachable through diagonal moves."""
    return Grid.from_rows([
        [0, 1, 1],
        [1, 0, 1],
        [1, 1, 0],
    ])
