"""
Tile Reach - Tiling Extrapolator

Counts the cells reachable in exactly N steps on an infinite tiling of a
map without simulating N steps.

The reachable tiles form a diamond around the start tile. Every tile in
that diamond falls into one of a few classes:

    - interior tiles, fully covered, in two parity flavours
    - four tip tiles at the far end of each cardinal direction
    - outer wedges on each diagonal edge of the diamond (h per diagonal)
    - inner wedges one ring further in (h - 1 per diagonal)

Each class is represented by one bounded flood fill over the base tile,
started where a walker enters such a tile and budgeted with the steps it
has left on arrival. Class counts are then multiplied by how many tiles
of that class the diamond holds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .directions import (
    DIRECTION_NAMES,
    DIRECTIONS,
    QUADRANTS,
    Coord,
    entry_corner,
    entry_midpoint,
    quadrant_name,
)
from .flood_fill import BoundedFloodFill, ParityCounts

if TYPE_CHECKING:
    from ..formats.obstacle_grid import ObstacleGrid


class TilingPreconditionError(ValueError):
    """Raised when a map does not have the shape the tiling formula needs."""

    def __init__(self, reasons: list[str]):
        self.reasons = reasons
        super().__init__(str(self))

    def __str__(self) -> str:
        lines = ["Map does not support tiling extrapolation:"]
        for reason in self.reasons:
            lines.append(f"  - {reason}")
        return "\n".join(lines)


class ParitySelect(Enum):
    """Which parity bucket of a flood fill a tile class reads."""

    EVEN = 0
    ODD = 1

    @classmethod
    def of(cls, value: int) -> ParitySelect:
        return cls.EVEN if value % 2 == 0 else cls.ODD

    def opposite(self) -> ParitySelect:
        return ParitySelect.ODD if self is ParitySelect.EVEN else ParitySelect.EVEN

    def pick(self, counts: ParityCounts) -> int:
        return counts[self.value]


def select_parity(tiles_across: int, total_steps: int) -> ParitySelect:
    """
    Parity read by the outer wedges and the larger interior tile group.

    Args:
        tiles_across: Number of tile widths spanned by the diamond (odd)
        total_steps: Total step count

    Returns:
        The parity of total_steps when tiles_across % 4 == 3, otherwise
        the opposite parity
    """
    if tiles_across % 4 == 3:
        return ParitySelect.of(total_steps)
    return ParitySelect.of(total_steps).opposite()


@dataclass(frozen=True)
class TilingGeometry:
    """Numbers derived from the tile size and the step count."""

    size: int
    half: int
    tiles_across: int
    h: int
    selected: ParitySelect


@dataclass(frozen=True)
class TileClass:
    """
    One class of tiles in the reachable diamond.

    Attributes:
        name: Class label, e.g. "tip-north" or "outer-northeast"
        start: Traversal start on the base tile
        budget: Steps left when a walker enters a tile of this class
        parity: Bucket of the truncated counts that this class contributes
        multiplicity: Number of tiles of this class in the diamond
        traversal_budget: Budget of the traversal this class reads from.
            Classes sharing (start, traversal_budget) share one traversal.
    """

    name: str
    start: Coord
    budget: int
    parity: ParitySelect
    multiplicity: int
    traversal_budget: int

    @property
    def traversal_key(self) -> tuple[Coord, int]:
        return (self.start, self.traversal_budget)

    def contribution(self, counts: ParityCounts) -> int:
        return self.multiplicity * self.parity.pick(counts)


class TilingExtrapolator:
    """
    Exact reachable-cell count on the infinite tiling of a map.

    Usage:
        extrapolator = TilingExtrapolator()
        extrapolator.count_reachable(grid, 26501365)
    """

    def __init__(self, flood_fill: BoundedFloodFill | None = None):
        """
        Args:
            flood_fill: Traversal used for the per-class counts. Pass an
                InstrumentedFloodFill to record a trace.
        """
        self.flood_fill = flood_fill if flood_fill is not None else BoundedFloodFill()

    def validate(self, grid: ObstacleGrid, total_steps: int) -> Coord:
        """
        Check the map shape the tiling formula relies on.

        Args:
            grid: Map with a single start marker
            total_steps: Total step count

        Returns:
            The start coordinate

        Raises:
            StartNotFoundError: If the map has no start marker
            TilingPreconditionError: If any geometric precondition fails
        """
        start = grid.find_start()
        sx, sy = start
        width, height = grid.dimensions()
        reasons: list[str] = []

        if width != height:
            reasons.append(f"Map is {width}x{height}, expected a square map")

        if 2 * sx + 1 != width or 2 * sy + 1 != height:
            reasons.append(f"Start {start} is not at the center of a {width}x{height} map")

        if not grid.row_is_clear(sy):
            reasons.append(f"Start row {sy} contains an obstacle")

        if not grid.column_is_clear(sx):
            reasons.append(f"Start column {sx} contains an obstacle")

        if total_steps < 0:
            reasons.append(f"Step count must be non-negative, got {total_steps}")
        elif (total_steps - sx) % width != 0:
            reasons.append(
                f"Step count {total_steps} does not end on a tile boundary "
                f"(expected {sx} + k*{width})"
            )

        if reasons:
            raise TilingPreconditionError(reasons)

        return start

    def geometry(self, grid: ObstacleGrid, total_steps: int) -> TilingGeometry:
        """Validate the map, then derive the tiling geometry."""
        self.validate(grid, total_steps)
        size = grid.width
        tiles_across = (2 * total_steps + 1) // size
        return TilingGeometry(
            size=size,
            half=size // 2,
            tiles_across=tiles_across,
            h=tiles_across // 2,
            selected=select_parity(tiles_across, total_steps),
        )

    def tile_classes(self, grid: ObstacleGrid, total_steps: int) -> list[TileClass]:
        """
        List the tile classes of the reachable diamond.

        Args:
            grid: Map satisfying the tiling preconditions
            total_steps: Total step count

        Returns:
            Tile classes with their representative starts, budgets and
            multiplicities

        Raises:
            TilingPreconditionError: If the map or step count is unsuitable
        """
        geo = self.geometry(grid, total_steps)
        size, half, h = geo.size, geo.half, geo.h
        center = (half, half)

        if h == 0:
            # The diamond ends inside the start tile
            return [
                TileClass(
                    "base",
                    center,
                    total_steps,
                    ParitySelect.of(total_steps),
                    1,
                    total_steps,
                )
            ]

        sel = geo.selected
        interior_budget = 2 * size
        wedge_budget = 3 * half
        classes = [
            TileClass(
                f"interior-{sel.name.lower()}",
                center,
                interior_budget,
                sel,
                h * h,
                interior_budget,
            ),
            TileClass(
                f"interior-{sel.opposite().name.lower()}",
                center,
                interior_budget,
                sel.opposite(),
                (h - 1) * (h - 1),
                interior_budget,
            ),
        ]

        # Tips are entered at an edge midpoint with an even number of steps
        # left, so they read the even bucket.
        for heading in DIRECTIONS:
            classes.append(
                TileClass(
                    f"tip-{DIRECTION_NAMES[heading]}",
                    entry_midpoint(size, heading),
                    2 * half,
                    ParitySelect.EVEN,
                    1,
                    2 * half,
                )
            )

        for quadrant in QUADRANTS:
            corner = entry_corner(size, quadrant)
            name = quadrant_name(quadrant)
            classes.append(
                TileClass(f"outer-{name}", corner, half - 1, sel, h, wedge_budget)
            )
            classes.append(
                TileClass(
                    f"inner-{name}",
                    corner,
                    wedge_budget,
                    sel.opposite(),
                    h - 1,
                    wedge_budget,
                )
            )

        return classes

    def count_reachable(self, grid: ObstacleGrid, total_steps: int) -> int:
        """
        Count cells reachable in exactly total_steps on the infinite tiling.

        Args:
            grid: Square map with a centered start whose row and column
                are free of obstacles
            total_steps: Total step count; must equal start.x + k * width

        Returns:
            Exact number of cells the walker can occupy after total_steps

        Raises:
            StartNotFoundError: If the map has no start marker
            TilingPreconditionError: If any geometric precondition fails
        """
        classes = self.tile_classes(grid, total_steps)

        # One traversal per distinct (start, budget)
        groups: dict[tuple[Coord, int], list[TileClass]] = {}
        for tile_class in classes:
            groups.setdefault(tile_class.traversal_key, []).append(tile_class)

        total = 0
        for (start, traversal_budget), members in groups.items():
            self.flood_fill.annotate(", ".join(m.name for m in members))
            distances = self.flood_fill.distances(grid, start, traversal_budget)
            for tile_class in members:
                counts = ParityCounts.from_distances(distances, tile_class.budget)
                total += tile_class.contribution(counts)

        return total
