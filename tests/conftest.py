import pytest

from grid_astar.core.grid import Grid


MAZE = [
    [1, 1, 1, 1, 1, 1],
    [0, 0, 0, 0, 1, 0],
    [1, 1, 1, 0, 1, 1],
    [1, 0, 1, 1, 1, 0],
    [1, 0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1],
]


@pytest.fixture
def maze() -> Grid:
    return Grid(MAZE)


@pytest.fixture
def maze_matrix() -> list[list[int]]:
    return [row[:] for row in MAZE]


@pytest.fixture
def open_grid() -> Grid:
    return Grid([[1] * 7 for _ in range(5)])


@pytest.fixture
def open_diagonal_grid() -> Grid:
    return Grid([[1] * 7 for _ in range(5)], diagonal=True)
