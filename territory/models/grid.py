"""Rectangular tile grid."""

from collections.abc import Iterator
from typing import Optional

from .tile import Tile

# Neighbor probe order: right, left, down, up. Action selection depends on it.
NEIGHBOR_DELTAS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Grid:
    """Fixed-size 2D array of tiles.

    The grid is created once; tiles are mutated in place but never added
    or removed. Out-of-bounds lookups return None rather than raising,
    since movement and neighbor logic probe the edges constantly.
    """

    def __init__(self, width: int, height: int):
        """Create a grid of neutral tiles.

        Args:
            width: Number of columns (must be > 0)
            height: Number of rows (must be > 0)

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid grid size: {width}x{height} (dimensions must be > 0)")
        self.width = width
        self.height = height
        self.rows = [[Tile(x, y) for x in range(width)] for y in range(height)]

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Optional[Tile]:
        """Return the tile at (x, y), or None when out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self.rows[y][x]

    def neighbors(self, x: int, y: int) -> list[Tile]:
        """Return in-bounds orthogonal neighbors (right, left, down, up)."""
        result = []
        for dx, dy in NEIGHBOR_DELTAS:
            tile = self.tile_at(x + dx, y + dy)
            if tile is not None:
                result.append(tile)
        return result

    def tiles(self) -> Iterator[Tile]:
        """Iterate over all tiles row by row."""
        for row in self.rows:
            yield from row

    def count_owned_by(self, owner: Optional[str]) -> int:
        """Count tiles owned by a faction id, or neutral tiles for None."""
        return sum(1 for tile in self.tiles() if tile.owner == owner)
