"""
Tile Reach - Map Formats

Map text parsing and the obstacle grid buffer.
"""

from .obstacle_grid import GridParseError, ObstacleGrid, StartNotFoundError

__all__ = ["GridParseError", "ObstacleGrid", "StartNotFoundError"]
