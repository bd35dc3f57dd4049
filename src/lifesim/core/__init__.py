"""
Core engine primitives.

This layer knows NOTHING about windows, colors or input devices.
It only knows:
- Cells that are alive or dead
- A fixed-size grid with non-wrapping edges
- Counting live Moore neighbors
- Conway's rule
- Two-phase (mark, then commit) generation steps
- When to step (Driver: tick cadence and run/pause)
"""

from lifesim.core.exceptions import LifeSimError, OutOfBounds, ConfigurationError
from lifesim.core.grid import Cell, Grid, GridConfig, MOORE_OFFSETS
from lifesim.core.rules import next_state, apply_rule
from lifesim.core.engine import SimulationEngine
from lifesim.core.driver import Driver, DriverConfig

__all__ = [
    "LifeSimError",
    "OutOfBounds",
    "ConfigurationError",
    "Cell",
    "Grid",
    "GridConfig",
    "MOORE_OFFSETS",
    "next_state",
    "apply_rule",
    "SimulationEngine",
    "Driver",
    "DriverConfig",
]
