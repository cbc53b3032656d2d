"""Game construction: grid, bases and starting rosters."""

from ..models.faction import Faction, FactionPair
from ..models.game import Game
from ..models.grid import Grid
from ..utils.constants import (
    BASE_DEFENSE,
    BASE_DEFENSE_BONUS,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    FACTION_NAMES,
    MAX_LEVEL,
    MIN_LEVEL,
)
from .spawn import spawn_rosters


def clamp_level(level: int) -> int:
    """Clamp a difficulty level to the supported range."""
    return max(MIN_LEVEL, min(level, MAX_LEVEL))


def create_game(
    level: int = MIN_LEVEL,
    cols: int = DEFAULT_COLS,
    rows: int = DEFAULT_ROWS,
    seed: int | None = None,
    jitter: bool = True,
    idle_wander: bool = False,
) -> Game:
    """Build a ready-to-run game.

    Algorithm:
    1. Create a cols x rows grid of neutral tiles
    2. Place the red base at the left-middle tile and the blue base at the
       right-middle tile; each base is owned by its faction and gets extra
       defense
    3. Spawn both rosters on their bases (red first, so red gets the lower ids)

    Args:
        level: Difficulty level, clamped to 1-100
        cols: Grid width
        rows: Grid height
        seed: RNG seed for reproducible runs (None seeds from the OS)
        jitter: Whether combat math gets random perturbation
        idle_wander: Whether units with nowhere to go wander randomly

    Returns:
        Game at turn 0

    Raises:
        ValueError: If cols or rows is not positive
    """
    grid = Grid(cols, rows)
    factions = _create_factions(cols, rows)

    game = Game(
        level=clamp_level(level),
        grid=grid,
        factions=factions,
        seed=seed,
        jitter=jitter,
        idle_wander=idle_wander,
    )

    _place_bases(game)
    spawn_rosters(game)
    return game


def _create_factions(cols: int, rows: int) -> FactionPair:
    """Create both factions with their fixed base positions."""
    base_y = rows // 2
    red = Faction(id="red", name=FACTION_NAMES["red"], base_x=0, base_y=base_y)
    blue = Faction(id="blue", name=FACTION_NAMES["blue"], base_x=cols - 1, base_y=base_y)
    return FactionPair(red=red, blue=blue)


def _place_bases(game: Game) -> None:
    """Hand each base tile to its faction and raise its defense."""
    for faction in game.factions:
        tile = game.grid.tile_at(faction.base_x, faction.base_y)
        tile.owner = faction.id
        tile.defense = BASE_DEFENSE + BASE_DEFENSE_BONUS
