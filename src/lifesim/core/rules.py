"""
Conway's rule: the next state of a cell from its state and neighbor count.

- fewer than 2 live neighbors: dies (underpopulation)
- exactly 3: alive (birth, or survival)
- exactly 2: keeps its current state
- more than 3: dies (overpopulation)

The branches are mutually exclusive and cover every count from 0 to 8.
"""

from __future__ import annotations

import numpy as np

MAX_NEIGHBORS = 8


def next_state(alive: bool, live_neighbors: int) -> bool:
    """
    Apply the rule to a single cell.

    Args:
        alive: Current committed state
        live_neighbors: Live Moore neighbors, 0..8

    Returns:
        The state the cell should be marked with
    """
    if not 0 <= live_neighbors <= MAX_NEIGHBORS:
        raise ValueError(f"live_neighbors must be in 0..8, got {live_neighbors}")

    if live_neighbors < 2:
        return False
    if live_neighbors == 3:
        return True
    if live_neighbors == 2:
        return bool(alive)
    return False


def apply_rule(
    alive: np.ndarray,
    counts: np.ndarray,
    out: np.ndarray | None = None,
) -> np.ndarray:
    """
    Apply the rule to a whole grid.

    Equivalent to next_state() on every cell.

    Args:
        alive: Boolean array of committed states
        counts: Live-neighbor counts, same shape
        out: Optional boolean array to write the marks into

    Returns:
        The marks array (`out` if given)
    """
    if out is None:
        out = np.empty(alive.shape, dtype=bool)
    np.logical_or(counts == 3, np.logical_and(counts == 2, alive), out=out)
    return out
