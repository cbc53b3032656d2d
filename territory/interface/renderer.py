"""ASCII map rendering.

This module renders the grid as ASCII art, one character per tile. It is a
pure projection of the current state and never changes it.
"""

from ..models.game import Game
from ..models.tile import Tile

UNIT_SYMBOLS = {"red": "R", "blue": "B"}
OWNER_SYMBOLS = {None: ".", "red": "1", "blue": "2"}


class MapRenderer:
    """Renders the board as ASCII."""

    def render(self, game: Game) -> str:
        """Render the board.

        Output format (10x8 grid at turn 0):
        ..........
        ..........
        ..........
        ..........
        R........B
        ..........
        ...

        Legend:
        - 'R' / 'B' = a living red / blue unit stands on the tile
        - '1' / '2' = tile owned by red / blue
        - '.'       = neutral tile

        Args:
            game: Game to render

        Returns:
            Multi-line ASCII string, one line per row
        """
        lines = []
        for row in game.grid.rows:
            lines.append("".join(self._render_cell(game, tile) for tile in row))
        return "\n".join(lines)

    def _render_cell(self, game: Game, tile: Tile) -> str:
        unit = game.unit_at(tile.x, tile.y)
        if unit is not None:
            return UNIT_SYMBOLS[unit.owner]
        return OWNER_SYMBOLS[tile.owner]

    def render_with_coords(self, game: Game) -> str:
        """Render the board with coordinate labels.

        Column labels show x modulo 10.
        """
        map_str = self.render(game)

        header = "   " + "".join(str(x % 10) for x in range(game.grid.width))
        lines = map_str.split("\n")
        numbered_lines = [f"{y:2d} {line}" for y, line in enumerate(lines)]

        return header + "\n" + "\n".join(numbered_lines)
