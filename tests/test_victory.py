"""Tests for victory conditions and the final outcome."""

from territory.engine.setup import create_game
from territory.engine.victory import check_victory, determine_outcome, tile_counts
from territory.models import Faction, FactionPair, Game, Grid, Outcome, Unit


def create_board(cols=5, rows=3):
    """Board with both bases owned and one living unit per faction."""
    grid = Grid(cols, rows)
    factions = FactionPair(
        red=Faction(id="red", name="Red", base_x=0, base_y=rows // 2),
        blue=Faction(id="blue", name="Blue", base_x=cols - 1, base_y=rows // 2),
    )
    game = Game(level=1, grid=grid, factions=factions, seed=42, jitter=False)
    for faction in factions:
        grid.tile_at(faction.base_x, faction.base_y).owner = faction.id
        faction.units.append(
            Unit(id=game.next_unit_id(), owner=faction.id, x=faction.base_x, y=faction.base_y)
        )
    return game


def claim(game, owner, positions):
    for x, y in positions:
        game.grid.tile_at(x, y).owner = owner


def test_fresh_game_continues():
    game = create_game(level=1, seed=1)
    assert check_victory(game) is None
    assert not game.finished


def test_strict_majority_ends_match():
    game = create_board()  # 15 tiles
    claim(game, "red", [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (1, 1), (2, 1)])
    assert tile_counts(game)["red"] == 8

    assert check_victory(game) == "majority"
    assert game.victory_condition == "majority"
    assert game.finished
    assert determine_outcome(game) == Outcome.RED_WINS


def test_exactly_half_is_not_majority():
    game = create_board(cols=4, rows=2)  # 8 tiles
    claim(game, "red", [(0, 0), (1, 0), (2, 0)])
    assert tile_counts(game) == {"red": 4, "blue": 1, "neutral": 3}

    assert check_victory(game) is None


def test_base_capture_ends_match():
    game = create_board()
    claim(game, "blue", [(0, 1)])

    assert check_victory(game) == "base_captured"
    assert determine_outcome(game) == Outcome.BLUE_WINS


def test_base_capture_with_level_tiles_is_draw():
    game = create_board()
    claim(game, "blue", [(0, 1)])
    claim(game, "red", [(2, 2), (3, 2)])

    assert check_victory(game) == "base_captured"
    assert determine_outcome(game) == Outcome.DRAW


def test_elimination_ends_match():
    game = create_board()
    game.factions.blue.units[0].hp = 0

    assert check_victory(game) == "elimination"


def test_mutual_elimination():
    game = create_board()
    for faction in game.factions:
        faction.units[0].hp = -4

    assert check_victory(game) == "elimination"
    assert determine_outcome(game) == Outcome.DRAW


def test_outcome_by_tile_count():
    game = create_board()
    assert determine_outcome(game) == Outcome.DRAW

    claim(game, "blue", [(3, 0)])
    assert determine_outcome(game) == Outcome.BLUE_WINS


def test_tile_counts_cover_whole_grid():
    game = create_game(level=20, cols=7, rows=5, seed=3)
    counts = tile_counts(game)
    assert counts == {"red": 1, "blue": 1, "neutral": 33}
    assert sum(counts.values()) == game.grid.size
