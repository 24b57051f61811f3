"""
Tile Reach - Map Markers and Shared Constants

Shared constants for map markers used across the library and tools.
"""

# Cell markers as they appear in map text
FREE = "."
BLOCKED = "#"
START = "S"

MARKERS = frozenset({FREE, BLOCKED, START})

# Distance map value for cells a traversal never reached
UNVISITED = -1

# Step count used by the bounded mode of tools/reach.py
DEFAULT_STEPS = 64
