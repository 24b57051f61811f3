"""
Tile Reach - Directions and Coordinate Helpers

Cardinal step vectors and the named anchor points of a square tile
(edge midpoints and corners) used as traversal starts.

Coordinates are (x, y) tuples with x the column and y the row; row 0 is
the top of the map, so NORTH decreases y.
"""

Coord = tuple[int, int]

# Direction constants
NORTH, EAST, SOUTH, WEST = 0, 1, 2, 3
DIRECTIONS = (NORTH, EAST, SOUTH, WEST)
DIRECTION_DELTAS = {
    NORTH: (0, -1),
    EAST: (1, 0),
    SOUTH: (0, 1),
    WEST: (-1, 0),
}
DIRECTION_NAMES = {NORTH: "north", EAST: "east", SOUTH: "south", WEST: "west"}

# Step vectors in traversal order
STEPS: tuple[Coord, ...] = tuple(DIRECTION_DELTAS[d] for d in DIRECTIONS)

# Diagonal quadrants, each named by the two cardinal directions it spans
NORTHEAST = (NORTH, EAST)
NORTHWEST = (NORTH, WEST)
SOUTHEAST = (SOUTH, EAST)
SOUTHWEST = (SOUTH, WEST)
QUADRANTS = (NORTHEAST, NORTHWEST, SOUTHEAST, SOUTHWEST)


def entry_midpoint(size: int, heading: int) -> Coord:
    """
    Edge midpoint through which a walker heading in `heading` enters a tile.

    A walker travelling east enters the next tile on its west edge, so the
    returned cell lies on the edge opposite to the heading.

    Args:
        size: Side length of the square tile (odd)
        heading: Direction of travel

    Returns:
        Coordinate of the entry cell on the base tile
    """
    half = size // 2
    far = size - 1
    return {
        NORTH: (half, far),
        SOUTH: (half, 0),
        EAST: (0, half),
        WEST: (far, half),
    }[heading]


def entry_corner(size: int, quadrant: tuple[int, int]) -> Coord:
    """
    Corner through which a walker heading into a diagonal quadrant enters a tile.

    Args:
        size: Side length of the square tile
        quadrant: One of QUADRANTS

    Returns:
        Coordinate of the entry corner on the base tile
    """
    vertical, horizontal = quadrant
    far = size - 1
    x = 0 if horizontal == EAST else far
    y = far if vertical == NORTH else 0
    return (x, y)


def quadrant_name(quadrant: tuple[int, int]) -> str:
    vertical, horizontal = quadrant
    return DIRECTION_NAMES[vertical] + DIRECTION_NAMES[horizontal]
