"""Tests for the simulation driver."""

import pytest
from pydantic import ValidationError

from territory import Outcome, Simulation
from territory.engine.victory import count_tiles_owned_by
from territory.utils.constants import CAPTURE_THRESHOLD


class TestConstruction:
    """Test configuration handling."""

    def test_level_is_clamped(self):
        assert Simulation(level=500, seed=1).game.level == 100
        assert Simulation(level=-3, seed=1).game.level == 1

    @pytest.mark.parametrize("cols,rows", [(0, 8), (10, 0), (-2, 5)])
    def test_non_positive_dimensions_rejected(self, cols, rows):
        with pytest.raises(ValidationError):
            Simulation(cols=cols, rows=rows)

    def test_turn_cap_scales_with_level(self):
        assert Simulation(level=1, seed=1).game.max_turns == 302
        assert Simulation(level=10, seed=1).game.max_turns == 320
        assert Simulation(level=100, seed=1).game.max_turns == 500

    def test_rosters_placed_on_bases(self):
        sim = Simulation(level=45, cols=12, rows=6, seed=1)
        red, blue = sim.game.factions
        assert len(red.units) == len(blue.units) == 6
        assert all((unit.x, unit.y) == (0, 3) for unit in red.units)
        assert all((unit.x, unit.y) == (11, 3) for unit in blue.units)


class TestRun:
    """Test running matches to completion."""

    def test_same_seed_same_match(self):
        first = Simulation(level=40, seed=7).run()
        second = Simulation(level=40, seed=7).run()

        assert first.result == second.result
        assert first.turns == second.turns
        assert first.log == second.log
        assert first.tile_counts == second.tile_counts

    @pytest.mark.parametrize("level", [1, 15, 40, 77, 100])
    def test_no_jitter_match_ignores_seed(self, level):
        first = Simulation(level=level, seed=1, jitter=False).run()
        second = Simulation(level=level, seed=999, jitter=False).run()

        assert first.log == second.log
        assert first.result == second.result
        assert first.turns == second.turns
        assert first.tile_counts == second.tile_counts

    def test_terminates_within_turn_cap(self):
        sim = Simulation(level=60, seed=3)
        result = sim.run()
        assert 0 < result.turns <= sim.game.max_turns
        assert result.condition in ("majority", "base_captured", "elimination", "turn_limit")

    def test_summary_line_closes_log(self):
        result = Simulation(level=25, seed=11).run()
        assert result.log[-1] == (
            f"Level 25 finished in {result.turns} turns. Result: {result.result.label}"
        )
        assert all(line.startswith("Turn ") for line in result.log[:-1])

    def test_result_matches_tile_counts(self):
        result = Simulation(level=15, seed=5, jitter=False).run()
        red, blue = result.tile_counts["red"], result.tile_counts["blue"]
        if red > blue:
            assert result.result == Outcome.RED_WINS
        elif blue > red:
            assert result.result == Outcome.BLUE_WINS
        else:
            assert result.result == Outcome.DRAW

    def test_run_is_idempotent(self):
        sim = Simulation(level=5, seed=2)
        first = sim.run()
        second = sim.run()
        assert second is first
        assert len(sim.game.log) == len(first.log)

    def test_turn_limit(self):
        sim = Simulation(level=1, seed=1)
        sim.game.max_turns = 0

        result = sim.run()

        assert result.turns == 0
        assert result.condition == "turn_limit"
        assert result.result == Outcome.DRAW
        assert result.log == ["Level 1 finished in 0 turns. Result: Draw"]

    def test_single_tile_board_ends_immediately(self):
        """Both bases share the only tile; blue claims it last and holds a majority."""
        result = Simulation(cols=1, rows=1, seed=1).run()
        assert result.turns == 0
        assert result.condition == "majority"
        assert result.result == Outcome.BLUE_WINS

    def test_result_reports_level_and_seed(self):
        result = Simulation(level=33, seed=99).run()
        assert result.level == 33
        assert result.seed == 99


class TestTurnCallback:
    """Invariants observed after every turn."""

    def test_callback_runs_once_per_turn(self):
        turns = []

        def record(game, results):
            turns.append(results.turn)

        result = Simulation(level=20, seed=4).run(on_turn=record)
        assert turns == list(range(1, result.turns + 1))

    @pytest.mark.parametrize("level,seed", [(1, 5), (30, 12), (70, 21), (100, 3)])
    def test_board_invariants_hold_every_turn(self, level, seed):
        sim = Simulation(level=level, cols=9, rows=7, seed=seed)
        dead = set()

        def check(game, results):
            assert sum(1 for _ in game.grid.tiles()) == game.grid.size
            owned = sum(count_tiles_owned_by(game, owner) for owner in ("red", "blue", None))
            assert owned == game.grid.size
            for tile in game.grid.tiles():
                assert 0 <= tile.capture_progress < CAPTURE_THRESHOLD
            units = [unit for faction in game.factions for unit in faction.units]
            assert len({unit.id for unit in units}) == len(units)
            for unit in units:
                assert game.grid.in_bounds(unit.x, unit.y)
                assert unit.hp <= unit.max_hp
                if unit.id in dead:
                    assert not unit.is_alive
                if not unit.is_alive:
                    dead.add(unit.id)
            for event in results.combat_events:
                assert event.damage >= 1

        sim.run(on_turn=check)

    def test_independent_simulations_do_not_interfere(self):
        alone = Simulation(level=30, seed=8).run()

        a = Simulation(level=30, seed=8)
        b = Simulation(level=80, seed=9)
        # Interleave turns of two games
        while not (a.game.finished or a.game.turn >= a.game.max_turns):
            a.executor.execute_turn(a.game)
            if not (b.game.finished or b.game.turn >= b.game.max_turns):
                b.executor.execute_turn(b.game)

        interleaved = a.run()
        assert interleaved.turns == alone.turns
        assert interleaved.log == alone.log


def test_render_map_shows_bases():
    sim = Simulation(level=1, seed=1)
    lines = sim.render_map().split("\n")
    assert len(lines) == 8
    assert lines[4] == "R........B"
    assert sim.render_map(with_coords=True).startswith("   0123456789\n")
