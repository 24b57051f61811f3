"""
Tile Reach - Instrumented Flood Fill

BoundedFloodFill subclass that logs every traversal with an annotation,
so a computation can be inspected after the fact or dumped to a JSON
trace file.
"""

import json
from pathlib import Path

import numpy as np

from .constants import UNVISITED
from .directions import Coord
from .flood_fill import BoundedFloodFill, ParityCounts


class InstrumentedFloodFill(BoundedFloodFill):
    """
    BoundedFloodFill that records each traversal it performs.

    Usage:
        flood_fill = InstrumentedFloodFill()
        TilingExtrapolator(flood_fill).count_reachable(grid, 5000)
        flood_fill.write_trace("fill_trace.json")
    """

    def __init__(self, require_annotations: bool = False):
        """
        Args:
            require_annotations: If True, raise error on unannotated traversals
        """
        super().__init__()
        self._pending_annotation: str | None = None
        self._require_annotations = require_annotations
        self._trace: list[dict] = []

    def annotate(self, description: str) -> "InstrumentedFloodFill":
        """
        Annotate the next traversal.

        Args:
            description: Human-readable description of the traversal

        Returns:
            self (for method chaining)
        """
        self._pending_annotation = description
        return self

    def _log_traversal(self, start: Coord, max_steps: int, distances: np.ndarray):
        """Log a traversal to the trace."""
        annotation = self._pending_annotation or "[no annotation]"
        if self._pending_annotation is None and self._require_annotations:
            raise RuntimeError(
                f"Traversal from {start} with budget {max_steps} without annotation"
            )

        counts = ParityCounts.from_distances(distances, max_steps)
        self._trace.append({
            "annotation": annotation,
            "start": list(start),
            "max_steps": max_steps,
            "even": counts.even,
            "odd": counts.odd,
            "visited": int(np.count_nonzero(distances != UNVISITED)),
        })
        self._pending_annotation = None

    def distances(self, grid, start: Coord, max_steps: int) -> np.ndarray:
        """Traverse from start with logging."""
        result = super().distances(grid, start, max_steps)
        self._log_traversal(start, max_steps, result)
        return result

    def get_trace(self) -> list[dict]:
        """Get the list of logged traversals."""
        return self._trace

    def clear_trace(self):
        self._trace = []
        self._pending_annotation = None

    def write_trace(self, path: str | Path):
        """
        Write trace to JSON file.

        Args:
            path: Output file path
        """
        with open(path, "w") as f:
            json.dump({"entries": self._trace}, f, indent=2)
        print(f"Wrote fill trace ({len(self._trace)} entries) to: {path}")
