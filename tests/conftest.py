"""Shared pytest fixtures for reachability tests."""

from pathlib import Path

import pytest

from tilereach.formats.obstacle_grid import ObstacleGrid

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path():
    """Directory holding map fixtures."""
    return FIXTURES


@pytest.fixture
def open_3x3():
    """3x3 map with no obstacles and the start in the middle."""
    return ObstacleGrid.load(FIXTURES / "open_3x3.txt")


@pytest.fixture
def open_5x5():
    """5x5 map with no obstacles (even half-width)."""
    return ObstacleGrid.load(FIXTURES / "open_5x5.txt")


@pytest.fixture
def rocks_11x11():
    """11x11 map with isolated rocks and a clear start row, column and border."""
    return ObstacleGrid.load(FIXTURES / "rocks_11x11.txt")


@pytest.fixture
def pocket_9x9():
    """9x9 map with a walled-in cell, a few rocks, and an even half-width."""
    return ObstacleGrid.load(FIXTURES / "pocket_9x9.txt")


@pytest.fixture
def blocked_row_11x11():
    """Same as rocks_11x11 but with a rock in the start row."""
    return ObstacleGrid.load(FIXTURES / "blocked_row_11x11.txt")


@pytest.fixture
def isolated_start():
    """Start cell boxed in by obstacles on all sides."""
    return ObstacleGrid.parse("###\n#S#\n###\n")
