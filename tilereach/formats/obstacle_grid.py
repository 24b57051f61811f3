"""
Tile Reach - Obstacle Grid

Immutable rectangular map of free, blocked and start cells.
Handles parsing from map text and loading from map files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import numpy as np

from ..core.constants import BLOCKED, MARKERS, START
from ..core.directions import Coord


class GridParseError(ValueError):
    """Raised when map text cannot be turned into a rectangular grid."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"Line {line}: {message}"
        super().__init__(message)


class StartNotFoundError(GridParseError):
    """Raised when a map that needs a start marker has none."""

    def __init__(self):
        super().__init__(f"No start marker '{START}' in map")


class ObstacleGrid:
    """
    Read-only 2D buffer of map markers.

    Cells are addressed as (x, y) with x the column and y the row. The
    backing numpy array is marked non-writeable so a grid can be shared
    freely between traversals.
    """

    def __init__(self, cells: np.ndarray):
        """
        Wrap a 2D array of single-character markers.

        Args:
            cells: Array of shape (height, width) holding marker strings

        Raises:
            GridParseError: If the array is not 2D, is empty, or holds an
                unknown marker.
        """
        if cells.ndim != 2 or cells.size == 0:
            raise GridParseError("Grid must be a non-empty 2D array")

        unknown = set(np.unique(cells).tolist()) - MARKERS
        if unknown:
            raise GridParseError(
                f"Unknown marker(s): {', '.join(repr(m) for m in sorted(unknown))}"
            )

        self._cells = cells.copy()
        self._cells.setflags(write=False)
        self._blocked = self._cells == BLOCKED
        self._blocked.setflags(write=False)
        self.height, self.width = self._cells.shape

    @classmethod
    def parse(cls, text: str) -> ObstacleGrid:
        """
        Parse line-oriented map text.

        Trailing blank lines are ignored; every other line must have the
        same length as the first.

        Args:
            text: Map text using '.', '#' and 'S'

        Returns:
            Parsed grid

        Raises:
            GridParseError: If the text is empty, ragged, or contains
                characters other than the known markers.
        """
        lines = text.rstrip("\n").splitlines()
        if not lines or not lines[0]:
            raise GridParseError("Map text is empty")

        width = len(lines[0])
        for line_idx, line in enumerate(lines):
            if len(line) != width:
                raise GridParseError(
                    f"Expected {width} cells, got {len(line)}", line=line_idx + 1
                )
            for col_idx, marker in enumerate(line):
                if marker not in MARKERS:
                    raise GridParseError(
                        f"Invalid marker {marker!r} at column {col_idx + 1}",
                        line=line_idx + 1,
                    )

        return cls(np.array([list(line) for line in lines], dtype="<U1"))

    @classmethod
    def load(cls, path: str | Path) -> ObstacleGrid:
        """Load and parse a map file."""
        with open(path) as f:
            return cls.parse(f.read())

    def dimensions(self) -> tuple[int, int]:
        """Return (width, height)."""
        return (self.width, self.height)

    def is_inside(self, pos: Coord) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, pos: Coord) -> str | None:
        """Return the marker at pos, or None outside the grid."""
        if not self.is_inside(pos):
            return None
        x, y = pos
        return str(self._cells[y, x])

    def is_blocked(self, pos: Coord) -> bool:
        """Cells outside the grid count as blocked."""
        if not self.is_inside(pos):
            return True
        x, y = pos
        return bool(self._blocked[y, x])

    def find(self, marker: str) -> Coord | None:
        """Return the first cell holding marker in row-major order."""
        hits = np.argwhere(self._cells == marker)
        if len(hits) == 0:
            return None
        y, x = hits[0]
        return (int(x), int(y))

    def find_start(self) -> Coord:
        """
        Locate the unique start marker.

        Raises:
            StartNotFoundError: If there is no start marker
            GridParseError: If there is more than one
        """
        hits = np.argwhere(self._cells == START)
        if len(hits) == 0:
            raise StartNotFoundError()
        if len(hits) > 1:
            raise GridParseError(f"Found {len(hits)} start markers, expected 1")
        y, x = hits[0]
        return (int(x), int(y))

    @property
    def blocked_mask(self) -> np.ndarray:
        """Read-only boolean array, True where a cell is blocked."""
        return self._blocked

    def row_is_clear(self, y: int) -> bool:
        return not self._blocked[y, :].any()

    def column_is_clear(self, x: int) -> bool:
        return not self._blocked[:, x].any()

    def rows(self) -> Iterator[str]:
        for row in self._cells:
            yield "".join(row.tolist())

    def __str__(self) -> str:
        return "\n".join(self.rows())

    def __repr__(self) -> str:
        return f"ObstacleGrid(width={self.width}, height={self.height})"
