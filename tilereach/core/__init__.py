"""
Tile Reach - Core

Contains the bounded flood fill, the infinite-tiling extrapolator, and
the instrumented flood fill used for tracing.
"""

from .flood_fill import (
    BoundedFloodFill,
    InvalidStartError,
    ParityCounts,
    count_reachable_in_tile,
)
from .instrumented import InstrumentedFloodFill
from .tiling import (
    ParitySelect,
    TileClass,
    TilingExtrapolator,
    TilingGeometry,
    TilingPreconditionError,
    select_parity,
)

__all__ = [
    "BoundedFloodFill",
    "InvalidStartError",
    "ParityCounts",
    "count_reachable_in_tile",
    "InstrumentedFloodFill",
    "ParitySelect",
    "TileClass",
    "TilingExtrapolator",
    "TilingGeometry",
    "TilingPreconditionError",
    "select_parity",
]
