"""
Unit tests for ObstacleGrid parsing and queries.
"""

import numpy as np
import pytest

from tilereach.formats.obstacle_grid import (
    GridParseError,
    ObstacleGrid,
    StartNotFoundError,
)


class TestParse:
    """Test ObstacleGrid.parse()."""

    def test_dimensions(self):
        """Width is the line length, height the line count."""
        grid = ObstacleGrid.parse("....\n.S..\n..#.\n")
        assert grid.dimensions() == (4, 3)
        assert grid.width == 4
        assert grid.height == 3

    def test_trailing_newlines_ignored(self):
        grid = ObstacleGrid.parse("..\n.S\n\n\n")
        assert grid.dimensions() == (2, 2)

    def test_ragged_lines_raise_error(self):
        """Lines of differing length are a parse error naming the line."""
        with pytest.raises(GridParseError, match="Line 2") as exc_info:
            ObstacleGrid.parse("...\n..\n...\n")
        assert exc_info.value.line == 2

    def test_unknown_marker_raises_error(self):
        with pytest.raises(GridParseError, match="Invalid marker 'x'"):
            ObstacleGrid.parse("...\n.x.\n...\n")

    def test_empty_text_raises_error(self):
        with pytest.raises(GridParseError, match="empty"):
            ObstacleGrid.parse("")

    def test_str_reproduces_text(self):
        text = "..#\n.S.\n#.."
        assert str(ObstacleGrid.parse(text)) == text

    def test_load_from_file(self, tmp_path):
        """load() reads and parses a map file."""
        path = tmp_path / "map.txt"
        path.write_text(".#.\n.S.\n...\n")
        grid = ObstacleGrid.load(path)
        assert grid.dimensions() == (3, 3)
        assert grid.get((1, 0)) == "#"

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ObstacleGrid.load(tmp_path / "missing.txt")


class TestQueries:
    """Test cell lookups on a parsed grid."""

    @pytest.fixture
    def grid(self):
        return ObstacleGrid.parse("..#.\n.S..\n#...\n")

    def test_get_uses_x_then_y(self, grid):
        assert grid.get((2, 0)) == "#"
        assert grid.get((0, 2)) == "#"
        assert grid.get((1, 1)) == "S"
        assert grid.get((3, 2)) == "."

    def test_get_outside_returns_none(self, grid):
        assert grid.get((-1, 0)) is None
        assert grid.get((4, 0)) is None
        assert grid.get((0, 3)) is None

    def test_is_blocked(self, grid):
        assert grid.is_blocked((2, 0))
        assert not grid.is_blocked((1, 1))
        assert not grid.is_blocked((0, 0))

    def test_outside_counts_as_blocked(self, grid):
        assert grid.is_blocked((10, 10))

    def test_find_returns_first_in_row_major_order(self, grid):
        assert grid.find("#") == (2, 0)
        assert grid.find("S") == (1, 1)

    def test_find_missing_marker_returns_none(self):
        grid = ObstacleGrid.parse("...\n...\n")
        assert grid.find("#") is None

    def test_find_start(self, grid):
        assert grid.find_start() == (1, 1)

    def test_find_start_missing(self):
        grid = ObstacleGrid.parse("...\n.#.\n")
        with pytest.raises(StartNotFoundError):
            grid.find_start()

    def test_find_start_duplicate(self):
        grid = ObstacleGrid.parse("S..\n..S\n")
        with pytest.raises(GridParseError, match="2 start markers"):
            grid.find_start()

    def test_missing_start_is_a_parse_error(self):
        """Callers catching GridParseError also see a missing start."""
        assert issubclass(StartNotFoundError, GridParseError)

    def test_row_and_column_clear(self, grid):
        assert grid.row_is_clear(1)
        assert not grid.row_is_clear(0)
        assert grid.column_is_clear(1)
        assert not grid.column_is_clear(2)


class TestImmutability:
    """Grids are shared between traversals and must stay read-only."""

    def test_blocked_mask_is_read_only(self, rocks_11x11):
        with pytest.raises(ValueError):
            rocks_11x11.blocked_mask[0, 0] = True

    def test_source_array_not_aliased(self):
        """Changing the array a grid was built from does not change the grid."""
        cells = np.array([list(".S."), list("...")], dtype="<U1")
        grid = ObstacleGrid(cells)
        cells[0, 0] = "#"
        assert grid.get((0, 0)) == "."
