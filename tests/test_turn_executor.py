"""Tests for the turn executor and its phases."""

from territory.engine.setup import create_game
from territory.engine.turn_executor import TurnExecutor, TurnResults
from territory.models import Faction, FactionPair, Game, Grid, Unit


def create_board(cols=5, rows=3):
    grid = Grid(cols, rows)
    factions = FactionPair(
        red=Faction(id="red", name="Red", base_x=0, base_y=rows // 2),
        blue=Faction(id="blue", name="Blue", base_x=cols - 1, base_y=rows // 2),
    )
    game = Game(level=1, grid=grid, factions=factions, seed=42, jitter=False)
    for faction in factions:
        grid.tile_at(faction.base_x, faction.base_y).owner = faction.id
    return game


def add_unit(game, owner, x, y, **kwargs):
    unit = Unit(id=game.next_unit_id(), owner=owner, x=x, y=y, **kwargs)
    game.faction(owner).units.append(unit)
    return unit


class TestExecuteTurn:
    """Test full turns."""

    def test_turn_counter_incremented_first(self):
        game = create_game(level=1, seed=42, jitter=False)
        results = TurnExecutor().execute_turn(game)
        assert game.turn == 1
        assert results.turn == 1

    def test_first_turn_moves_everyone_toward_the_enemy(self):
        """On a 10x8 grid nobody is adjacent or off their base on turn 1."""
        game = create_game(level=1, seed=42, jitter=False)
        results = TurnExecutor().execute_turn(game)

        assert [action.kind for action in results.actions] == ["move"] * 6
        assert [action.unit.id for action in results.actions] == [1, 2, 3, 4, 5, 6]
        assert all((unit.x, unit.y) == (1, 4) for unit in game.factions.red.units)
        assert all((unit.x, unit.y) == (8, 4) for unit in game.factions.blue.units)
        assert game.log == []
        assert results.victory_condition is None

    def test_red_acts_before_blue(self):
        game = create_board()
        red = add_unit(game, "red", 1, 1)
        blue = add_unit(game, "blue", 2, 1)

        results = TurnExecutor().execute_turn(game)

        assert results.actions[0].unit is red
        assert results.actions[1].unit is blue
        assert game.log[0].startswith(f"Turn 1: Unit {red.id} (red) attacked")
        assert game.log[1].startswith(f"Turn 1: Unit {blue.id} (blue) attacked")

    def test_destroyed_units_do_not_act(self):
        game = create_board()
        add_unit(game, "red", 1, 1)
        blue = add_unit(game, "blue", 2, 1)
        blue.hp = 1

        results = TurnExecutor().execute_turn(game)

        assert len(results.actions) == 1
        assert len(results.combat_events) == 1
        assert results.combat_events[0].destroyed
        assert results.victory_condition == "elimination"

    def test_kill_capture_reported_with_combat(self):
        game = create_board()
        add_unit(game, "red", 1, 1)
        blue = add_unit(game, "blue", 2, 1)
        blue.hp = 1

        results = TurnExecutor().execute_turn(game)

        assert len(results.capture_events) == 1
        assert results.capture_events[0].via_combat
        # Credited 4 during the unit phase, then decayed by 0.5
        assert game.grid.tile_at(2, 1).capture_progress == 3.5


class TestPhases:
    """Each phase can run on its own."""

    def test_unit_phase_capture(self):
        game = create_board()
        unit = add_unit(game, "red", 2, 1)
        add_unit(game, "blue", 4, 1)
        game.turn = 1

        results = TurnExecutor().execute_phase_units(game, TurnResults(turn=1))

        assert results.actions[0].kind == "capture"
        assert results.capture_events[0].unit_id == unit.id
        assert game.grid.tile_at(2, 1).capture_progress == 4

    def test_maintenance_decays_progress(self):
        game = create_board()
        game.grid.tile_at(2, 0).capture_progress = 10.0

        decayed = TurnExecutor().execute_phase_maintenance(game)

        assert decayed == 1
        assert game.grid.tile_at(2, 0).capture_progress == 9.5

    def test_victory_phase(self):
        game = create_board()
        add_unit(game, "red", 0, 1)
        assert TurnExecutor().execute_phase_victory_check(game) == "elimination"

    def test_hold_changes_nothing(self):
        game = create_board()
        game.grid.tile_at(2, 1).owner = "red"
        unit = add_unit(game, "red", 2, 1)
        add_unit(game, "blue", 2, 1)

        action, combat_events, capture_events = TurnExecutor().execute_unit_action(game, unit)

        assert action.kind == "hold"
        assert combat_events == []
        assert capture_events == []
        assert (unit.x, unit.y) == (2, 1)
