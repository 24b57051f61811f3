"""
Tile Reach - Bounded Flood Fill

Breadth-first traversal of a single map tile that classifies every
reachable cell by the parity of its shortest step count.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from .constants import UNVISITED
from .directions import STEPS, Coord

if TYPE_CHECKING:
    from ..formats.obstacle_grid import ObstacleGrid


class InvalidStartError(ValueError):
    """Raised when a traversal is asked to start outside the grid."""

    def __init__(self, start: Coord, dimensions: tuple[int, int]):
        self.start = start
        self.dimensions = dimensions
        width, height = dimensions
        super().__init__(
            f"Start {start} is outside the {width}x{height} grid"
        )


class ParityCounts(NamedTuple):
    """Reachable cell counts indexed by distance % 2."""

    even: int
    odd: int

    @property
    def total(self) -> int:
        return self.even + self.odd

    @classmethod
    def from_distances(cls, distances: np.ndarray, budget: int) -> ParityCounts:
        """
        Count cells of a distance map whose distance is within budget.

        Args:
            distances: Distance map from BoundedFloodFill.distances()
            budget: Largest distance to count. Must not exceed the budget
                the map was traversed with. Negative budgets count nothing.

        Returns:
            Counts of reached cells with distance <= budget, split by parity
        """
        if budget < 0:
            return cls(0, 0)
        within = (distances != UNVISITED) & (distances <= budget)
        odd = int(np.count_nonzero(within & (distances % 2 == 1)))
        return cls(int(np.count_nonzero(within)) - odd, odd)


class BoundedFloodFill:
    """
    Breadth-first flood fill confined to the grid bounds.

    Cells outside the grid are never visited, which makes a single tile
    stand in for one copy of the map inside an infinite tiling when the
    start and budget are chosen to match how a walker enters that copy.
    """

    def annotate(self, description: str) -> BoundedFloodFill:
        """
        Describe the next traversal. No-op here; see InstrumentedFloodFill.

        Returns:
            self (for method chaining)
        """
        return self

    def fill(self, grid: ObstacleGrid, start: Coord, max_steps: int) -> ParityCounts:
        """
        Count cells reachable from start within max_steps, by parity.

        Args:
            grid: Map to traverse (not modified)
            start: Starting cell
            max_steps: Longest path length considered

        Returns:
            ParityCounts where [p] is the number of cells whose shortest
            distance from start is <= max_steps and congruent to p mod 2

        Raises:
            InvalidStartError: If start is outside the grid
            ValueError: If max_steps is negative
        """
        distances = self.distances(grid, start, max_steps)
        return ParityCounts.from_distances(distances, max_steps)

    def distances(self, grid: ObstacleGrid, start: Coord, max_steps: int) -> np.ndarray:
        """
        Shortest distance from start to every cell reachable within max_steps.

        Args:
            grid: Map to traverse (not modified)
            start: Starting cell
            max_steps: Longest path length considered

        Returns:
            Int array of shape (height, width) indexed [y, x]. Unreached
            cells hold UNVISITED.

        Raises:
            InvalidStartError: If start is outside the grid
            ValueError: If max_steps is negative
        """
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        if not grid.is_inside(start):
            raise InvalidStartError(start, grid.dimensions())

        width, height = grid.dimensions()
        blocked = grid.blocked_mask
        visited = np.full((height, width), UNVISITED, dtype=np.int64)

        sx, sy = start
        if blocked[sy, sx]:
            return visited

        visited[sy, sx] = 0
        queue = deque([(0, start)])

        while queue:
            dist, (x, y) = queue.popleft()
            if dist >= max_steps:
                continue

            for dx, dy in STEPS:
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height:
                    if visited[ny, nx] == UNVISITED and not blocked[ny, nx]:
                        visited[ny, nx] = dist + 1
                        queue.append((dist + 1, (nx, ny)))

        return visited


def count_reachable_in_tile(
    grid: ObstacleGrid,
    steps: int,
    flood_fill: BoundedFloodFill | None = None,
) -> int:
    """
    Count cells the walker can occupy after exactly `steps` steps without
    leaving the map.

    Revisits are allowed, so a cell qualifies when its shortest distance
    from the start marker is within steps and has the same parity.

    Args:
        grid: Map with a single start marker
        steps: Exact number of steps taken
        flood_fill: Traversal to use (defaults to a plain BoundedFloodFill)

    Returns:
        Number of qualifying cells

    Raises:
        StartNotFoundError: If the map has no start marker
    """
    if flood_fill is None:
        flood_fill = BoundedFloodFill()

    start = grid.find_start()
    counts = flood_fill.annotate("bounded tile").fill(grid, start, steps)
    return counts[steps % 2]
