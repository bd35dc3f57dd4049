"""
Base class for seed patterns.

A pattern is a small boolean array stamped onto the grid at an offset.
Patterns only write initial state: once placed, the engine owns what
happens to the cells.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from lifesim.core.exceptions import OutOfBounds

if TYPE_CHECKING:
    from lifesim.core.grid import Grid


@dataclass(frozen=True, eq=False)
class Pattern:
    """A named arrangement of live cells."""

    name: str
    cells: np.ndarray = field(repr=False)  # Boolean [height, width]
    period: int = 1  # 1 for still lifes

    @classmethod
    def from_rows(cls, name: str, rows: list[str], period: int = 1) -> Pattern:
        """
        Build a pattern from text rows, 'O' for alive and '.' for dead.

        Example:
            Pattern.from_rows("blinker", ["OOO"], period=2)
        """
        cells = np.array([[ch == "O" for ch in row] for row in rows], dtype=bool)
        cells.setflags(write=False)
        return cls(name=name, cells=cells, period=period)

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width) of the bounding box."""
        return self.cells.shape

    @property
    def population(self) -> int:
        return int(np.count_nonzero(self.cells))

    def live_cells(self, row: int = 0, col: int = 0) -> list[tuple[int, int]]:
        """Coordinates of live cells, offset by (row, col)."""
        rs, cs = np.nonzero(self.cells)
        return [(int(r) + row, int(c) + col) for r, c in zip(rs, cs)]


def place_pattern(grid: "Grid", pattern: Pattern, row: int, col: int) -> None:
    """
    Set a pattern's live cells alive with its top-left corner at (row, col).

    Dead cells of the pattern leave the grid untouched. The whole bounding
    box must fit; otherwise OutOfBounds is raised and nothing is written.
    """
    height, width = pattern.shape
    for r, c in ((row, col), (row + height - 1, col + width - 1)):
        grid.check_bounds(r, c)

    for r, c in pattern.live_cells(row, col):
        grid.set_alive(r, c, True)
