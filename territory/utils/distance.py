"""Distance calculations for the grid."""


def manhattan_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Calculate Manhattan distance between two points.

    Units only move orthogonally, one tile per turn, so the Manhattan
    distance is the number of turns a unit needs to reach a tile on an
    open grid. All proximity decisions use it.

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Manhattan distance between the two points

    Examples:
        >>> manhattan_distance(0, 0, 3, 3)
        6
        >>> manhattan_distance(0, 4, 9, 4)
        9
    """
    return abs(x2 - x1) + abs(y2 - y1)
