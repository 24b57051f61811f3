"""
Tile Reach

Counts the cells a walker can stand on after exactly N steps across an
obstacle map, either inside a single map tile or on the infinite tiling
of that map.
"""

__version__ = "0.1.0"
