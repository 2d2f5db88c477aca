"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from env import Grid, GridGenerator, Position
from pathfinding import ALGORITHM_ORDER, get_algorithm


@pytest.fixture
def open_grid() -> Grid:
    """3x3 grid, start (0,0), end (2,2), no obstacles."""
    return Grid.new(3, 3)


@pytest.fixture
def sealed_grid() -> Grid:
    """3x3 grid whose start corner is walled off."""
    grid = Grid.new(3, 3)
    for pos in (Position(0, 1), Position(1, 0), Position(1, 1)):
        grid.add_obstacle(pos)
    return grid


@pytest.fixture
def generator() -> GridGenerator:
    return GridGenerator(seed=1234)


@pytest.fixture(params=ALGORITHM_ORDER)
def algorithm(request):
    """Each registered algorithm in turn."""
    return get_algorithm(request.param)


def assert_valid_path(grid: Grid, path) -> None:
    assert path[0] == grid.start
    assert path[-1] == grid.end
    for pos in path:
        assert grid.is_valid_position(pos)
    for a, b in zip(path, path[1:]):
        assert a.manhattan_distance_to(b) == 1
