"""
SimulationEngine: advances a Grid one generation at a time.

Each step runs in two phases:
1. Mark: every cell's next state is computed from the previous generation
   and written to grid.marked_alive. Committed state is not touched.
2. Commit: grid.alive is overwritten with the marks.

Commit never starts before every mark is written, so no neighbor count can
see a partially updated generation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
import logging

import numpy as np

from lifesim.core.rules import apply_rule

if TYPE_CHECKING:
    from lifesim.core.grid import Grid

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """
    Applies Conway's rule to a grid it does not own.

    The caller must serialise step(), reset() and toggle() on the same grid.
    """

    grid: "Grid"

    generation: int = field(default=0, init=False)

    def step(self) -> int:
        """
        Advance the grid by exactly one generation.

        Returns:
            Number of cells whose committed state changed
        """
        self._mark()
        changed = int(np.count_nonzero(self.grid.alive != self.grid.marked_alive))
        self._commit()
        self.generation += 1

        logger.debug(
            "Generation %d: population=%d changed=%d",
            self.generation, self.grid.population(), changed,
        )
        return changed

    def run(self, n_steps: int) -> dict:
        """
        Run n_steps generations.

        Returns:
            Statistics dictionary
        """
        if n_steps < 0:
            raise ValueError(f"n_steps must be >= 0, got {n_steps}")

        changed = 0
        for _ in range(n_steps):
            changed += self.step()

        return {
            "n_steps": n_steps,
            "generation": self.generation,
            "population": self.grid.population(),
            "changed": changed,
        }

    def reset(self) -> None:
        """Mark every cell dead, then commit. Restarts the generation count."""
        self.grid.marked_alive.fill(False)
        self._commit()
        self.generation = 0
        logger.debug("Grid reset")

    def toggle(self, row: int, col: int) -> bool:
        """
        Flip a single cell. No neighbor counts are recomputed.

        Returns:
            The cell's new state
        """
        new_state = not self.grid.is_alive(row, col)
        self.grid.set_alive(row, col, new_state)
        return new_state

    def is_alive(self, row: int, col: int) -> bool:
        return self.grid.is_alive(row, col)

    def _mark(self):
        """Write every cell's next state into grid.marked_alive."""
        counts = self.grid.neighbor_counts()
        apply_rule(self.grid.alive, counts, out=self.grid.marked_alive)

    def _commit(self):
        """Copy marks into committed state, in place."""
        np.copyto(self.grid.alive, self.grid.marked_alive)
