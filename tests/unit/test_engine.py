"""Unit tests for SimulationEngine."""

import numpy as np
import pytest

from lifesim.core import Grid, GridConfig, OutOfBounds, SimulationEngine
from lifesim.patterns import BLINKER, BLOCK, GLIDER, L_TROMINO, TOAD, place_pattern


def alive_cells(grid):
    """Set of (row, col) for live cells."""
    return {(int(r), int(c)) for r, c in zip(*np.nonzero(grid.alive))}


class TestStep:
    """Tests for a single generation step."""

    def test_all_dead_stays_dead(self, engine):
        engine.step()
        assert engine.grid.is_empty()

    @pytest.mark.parametrize("rows, cols", [(1, 1), (1, 7), (3, 3), (10, 4)])
    def test_all_dead_stays_dead_any_size(self, rows, cols):
        eng = SimulationEngine(Grid(GridConfig(rows=rows, cols=cols)))
        eng.step()
        assert eng.grid.is_empty()

    def test_lonely_cell_dies(self, engine):
        engine.grid.set_alive(2, 2, True)
        engine.step()
        assert not engine.is_alive(2, 2)

    def test_l_tromino_births_missing_corner(self, engine):
        place_pattern(engine.grid, L_TROMINO, 1, 1)
        assert alive_cells(engine.grid) == {(1, 1), (1, 2), (2, 1)}

        engine.step()

        assert engine.is_alive(2, 2)
        assert alive_cells(engine.grid) == {(1, 1), (1, 2), (2, 1), (2, 2)}

    def test_block_is_stable(self, engine):
        place_pattern(engine.grid, BLOCK, 2, 2)
        before = engine.grid.snapshot()
        engine.step()
        assert np.array_equal(engine.grid.alive, before)

    def test_block_in_corner_is_stable(self, engine):
        place_pattern(engine.grid, BLOCK, 0, 0)
        before = engine.grid.snapshot()
        engine.step()
        assert np.array_equal(engine.grid.alive, before)

    def test_blinker_oscillates(self, engine):
        place_pattern(engine.grid, BLINKER, 2, 1)  # Horizontal at row 2
        horizontal = alive_cells(engine.grid)

        engine.step()
        assert alive_cells(engine.grid) == {(1, 2), (2, 2), (3, 2)}

        engine.step()
        assert alive_cells(engine.grid) == horizontal

    def test_toad_period_two(self, engine):
        place_pattern(engine.grid, TOAD, 2, 1)
        before = engine.grid.snapshot()

        engine.step()
        assert not np.array_equal(engine.grid.alive, before)

        engine.step()
        assert np.array_equal(engine.grid.alive, before)

    def test_glider_translates(self, large_engine):
        place_pattern(large_engine.grid, GLIDER, 1, 1)
        start = alive_cells(large_engine.grid)

        large_engine.run(4)

        assert large_engine.grid.population() == 5
        assert alive_cells(large_engine.grid) == {(r + 1, c + 1) for r, c in start}

    def test_mark_phase_uses_previous_generation(self):
        # In a single in-place row-major pass, (0, 1) would die before (1, 1)
        # is evaluated and (1, 1) would not be born.
        eng = SimulationEngine(Grid(GridConfig(rows=3, cols=3)))
        for r, c in [(0, 0), (0, 1), (0, 2)]:
            eng.grid.set_alive(r, c, True)

        eng.step()

        assert alive_cells(eng.grid) == {(0, 1), (1, 1)}

    def test_marks_match_state_after_step(self, engine):
        place_pattern(engine.grid, GLIDER, 1, 1)
        engine.step()
        assert np.array_equal(engine.grid.alive, engine.grid.marked_alive)

    def test_step_reports_changed_cells(self, engine):
        place_pattern(engine.grid, BLINKER, 2, 1)
        # Two ends die, two cells are born
        assert engine.step() == 4

    def test_step_counts_generations(self, engine):
        assert engine.generation == 0
        engine.step()
        engine.step()
        assert engine.generation == 2


class TestRun:
    """Tests for multi-step runs."""

    def test_run_returns_stats(self, engine):
        place_pattern(engine.grid, BLOCK, 2, 2)
        stats = engine.run(3)
        assert stats == {
            "n_steps": 3,
            "generation": 3,
            "population": 4,
            "changed": 0,
        }

    def test_run_zero_steps(self, engine):
        stats = engine.run(0)
        assert stats["generation"] == 0

    def test_run_negative_steps(self, engine):
        with pytest.raises(ValueError):
            engine.run(-1)


class TestReset:
    """Tests for reset."""

    def test_reset_clears_grid(self, engine):
        place_pattern(engine.grid, GLIDER, 1, 1)
        engine.step()

        engine.reset()

        assert engine.grid.is_empty()
        assert not engine.grid.marked_alive.any()
        assert engine.generation == 0

    def test_reset_then_step_is_idempotent(self, engine):
        place_pattern(engine.grid, BLOCK, 1, 1)
        engine.reset()
        after_reset = engine.grid.snapshot()

        engine.step()

        assert np.array_equal(engine.grid.alive, after_reset)
        assert engine.grid.is_empty()

    def test_reset_matches_step_on_dead_grid(self):
        a = SimulationEngine(Grid(GridConfig(rows=4, cols=4)))
        b = SimulationEngine(Grid(GridConfig(rows=4, cols=4)))
        a.grid.set_alive(1, 1, True)

        a.reset()
        b.step()

        assert np.array_equal(a.grid.alive, b.grid.alive)


class TestToggle:
    """Tests for single-cell toggling."""

    def test_toggle_flips_state(self, engine):
        assert engine.toggle(3, 4) is True
        assert engine.is_alive(3, 4)
        assert engine.grid.marked_alive[3, 4]

        assert engine.toggle(3, 4) is False
        assert not engine.is_alive(3, 4)
        assert not engine.grid.marked_alive[3, 4]

    def test_double_toggle_restores_state(self, engine):
        place_pattern(engine.grid, BLOCK, 2, 2)
        before = engine.grid.snapshot()

        engine.toggle(2, 2)
        engine.toggle(2, 2)

        assert np.array_equal(engine.grid.alive, before)

    def test_toggle_does_not_advance(self, engine):
        engine.toggle(0, 0)
        # A lonely cell only dies once a step runs
        assert engine.is_alive(0, 0)
        assert engine.generation == 0

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (6, 0), (0, 6)])
    def test_toggle_out_of_bounds_does_not_mutate(self, engine, row, col):
        place_pattern(engine.grid, BLOCK, 0, 0)
        before = engine.grid.snapshot()

        with pytest.raises(OutOfBounds):
            engine.toggle(row, col)

        assert np.array_equal(engine.grid.alive, before)
        assert np.array_equal(engine.grid.marked_alive, before)
