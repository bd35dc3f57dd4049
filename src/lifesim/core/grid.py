"""
Grid: the fixed-size board of cells the simulation runs on.

The grid stores ONLY cell state:
- alive: the committed state of every cell
- marked_alive: the next-state decision of every cell

Both are boolean arrays of shape (rows, cols), allocated once and mutated in
place for the lifetime of the grid. Outside a generation step the two arrays
are equal. The edges do not wrap: positions outside the grid count as dead.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator
import logging

import numpy as np
from scipy.ndimage import convolve

from lifesim.core.exceptions import ConfigurationError, OutOfBounds

logger = logging.getLogger(__name__)


@dataclass
class GridConfig:
    """Configuration for a grid."""

    rows: int  # Grid height in cells
    cols: int  # Grid width in cells

    def __post_init__(self):
        if self.rows < 1:
            raise ConfigurationError("rows", f"must be >= 1, got {self.rows}")
        if self.cols < 1:
            raise ConfigurationError("cols", f"must be >= 1, got {self.cols}")

    @classmethod
    def from_window(cls, width: int, height: int, cell_size: int) -> GridConfig:
        """
        Derive grid dimensions from a window size in pixels.

        A 600x600 window with 8 px cells gives a 75x75 grid. Partial cells at
        the right and bottom edges are dropped.

        Args:
            width, height: Window size in pixels
            cell_size: Side of one square cell in pixels
        """
        if cell_size < 1:
            raise ConfigurationError("cell_size", f"must be >= 1, got {cell_size}")
        if width < cell_size or height < cell_size:
            raise ConfigurationError(
                "window",
                f"{width}x{height} px window cannot hold a {cell_size} px cell",
            )
        return cls(rows=height // cell_size, cols=width // cell_size)


# Moore neighborhood offsets as (d_row, d_col), centre excluded
MOORE_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

# Convolution kernel equivalent to summing over MOORE_OFFSETS
_MOORE_KERNEL = np.array(
    [[1, 1, 1],
     [1, 0, 1],
     [1, 1, 1]],
    dtype=np.uint8,
)


@dataclass(frozen=True)
class Cell:
    """Snapshot of one cell. Holds no reference back to the grid."""

    row: int
    col: int
    alive: bool
    marked_alive: bool


class Grid:
    """
    Bounded storage of cell states with neighbor queries.

    Every coordinate-taking method raises OutOfBounds for a position outside
    [0, rows) x [0, cols). Negative indices are rejected, not wrapped.
    """

    def __init__(self, config: GridConfig):
        self.config = config
        rows, cols = config.rows, config.cols

        # Committed state: what a renderer sees
        self.alive = np.zeros((rows, cols), dtype=bool)

        # Next-state marks: only differ from `alive` inside a step
        self.marked_alive = np.zeros((rows, cols), dtype=bool)

        logger.info("Created %dx%d grid", rows, cols)

    @property
    def shape(self) -> tuple[int, int]:
        """Return (rows, cols) grid dimensions."""
        return self.config.rows, self.config.cols

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    def contains(self, row: int, col: int) -> bool:
        """True if (row, col) lies inside the grid."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def check_bounds(self, row: int, col: int) -> None:
        """Raise OutOfBounds unless (row, col) lies inside the grid."""
        if not self.contains(row, col):
            raise OutOfBounds(row, col, self.shape)

    def get(self, row: int, col: int) -> Cell:
        """Return a snapshot of the cell at (row, col)."""
        self.check_bounds(row, col)
        return Cell(
            row=row,
            col=col,
            alive=bool(self.alive[row, col]),
            marked_alive=bool(self.marked_alive[row, col]),
        )

    def is_alive(self, row: int, col: int) -> bool:
        """Committed state of the cell at (row, col)."""
        self.check_bounds(row, col)
        return bool(self.alive[row, col])

    def set_alive(self, row: int, col: int, alive: bool) -> None:
        """Set a cell's committed state directly. The mark follows."""
        self.check_bounds(row, col)
        self.alive[row, col] = alive
        self.marked_alive[row, col] = alive

    def neighbor_coords(self, row: int, col: int) -> list[tuple[int, int]]:
        """
        In-bounds Moore neighbors of (row, col).

        Interior cells have 8 neighbors, edge cells 5, corner cells 3.
        """
        self.check_bounds(row, col)
        return [
            (row + dr, col + dc)
            for dr, dc in MOORE_OFFSETS
            if self.contains(row + dr, col + dc)
        ]

    def count_live_neighbors(self, row: int, col: int) -> int:
        """Number of live cells among the in-bounds Moore neighbors (0..8)."""
        return sum(
            1 for r, c in self.neighbor_coords(row, col) if self.alive[r, c]
        )

    def neighbor_counts(self) -> np.ndarray:
        """
        Live-neighbor counts for every cell at once.

        Zero padding outside the grid matches count_live_neighbors: positions
        beyond the edge count as dead.

        Returns:
            Integer array of shape (rows, cols) with values in 0..8
        """
        return convolve(
            self.alive.astype(np.uint8),
            _MOORE_KERNEL,
            mode="constant",
            cval=0,
        )

    def iter_cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                yield Cell(
                    row=row,
                    col=col,
                    alive=bool(self.alive[row, col]),
                    marked_alive=bool(self.marked_alive[row, col]),
                )

    def population(self) -> int:
        """Number of live cells."""
        return int(np.count_nonzero(self.alive))

    def density(self) -> float:
        """Fraction of cells that are alive."""
        return self.population() / self.alive.size

    def is_empty(self) -> bool:
        return not self.alive.any()

    def snapshot(self) -> np.ndarray:
        """Copy of the committed state."""
        return self.alive.copy()

    def load(self, state: np.ndarray) -> None:
        """
        Replace the committed state with a boolean array of the grid's shape.

        Marks are set to the same values so the grid is at rest afterwards.
        """
        state = np.asarray(state)
        if state.shape != self.shape:
            raise ConfigurationError(
                "state",
                f"shape {state.shape} does not match grid shape {self.shape}",
            )
        np.copyto(self.alive, state.astype(bool))
        np.copyto(self.marked_alive, self.alive)

    def clear(self) -> None:
        """Set every cell dead, marks included."""
        self.alive.fill(False)
        self.marked_alive.fill(False)
