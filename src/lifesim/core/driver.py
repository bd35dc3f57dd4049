"""
Driver: headless control loop around a SimulationEngine.

Decides WHEN the engine advances:
- A timer calls tick() once per frame
- While running, one generation is computed every `generation_speed` ticks
- Toggle and reset requests arrive between ticks

Clicks arrive in pixel coordinates and are mapped to cells using the cell
size. Nothing here draws anything.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
import logging
import math

from lifesim.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from lifesim.core.engine import SimulationEngine

logger = logging.getLogger(__name__)


@dataclass
class DriverConfig:
    """Configuration for the driver."""

    cell_size: int = 8  # Pixels per cell side
    generation_speed: int = 5  # Ticks between generations

    def __post_init__(self):
        if self.cell_size < 1:
            raise ConfigurationError("cell_size", f"must be >= 1, got {self.cell_size}")
        if self.generation_speed < 1:
            raise ConfigurationError(
                "generation_speed", f"must be >= 1, got {self.generation_speed}"
            )


@dataclass
class Driver:
    """Owns the run/pause state and the tick counter for one engine."""

    engine: "SimulationEngine"
    config: DriverConfig = field(default_factory=DriverConfig)

    running: bool = field(default=False, init=False)
    tick_count: int = field(default=0, init=False)

    def toggle_running(self) -> bool:
        """Start or pause the simulation. Returns the new running flag."""
        self.running = not self.running
        logger.debug("Simulation %s", "running" if self.running else "paused")
        return self.running

    def tick(self) -> bool:
        """
        One timer frame.

        The tick counter only advances while running, so pausing and resuming
        keeps the cadence.

        Returns:
            True if a generation was computed on this tick
        """
        if not self.running:
            return False

        stepped = self.tick_count % self.config.generation_speed == 0
        if stepped:
            self.engine.step()
        self.tick_count += 1
        return stepped

    def run(self, n_ticks: int) -> dict:
        """Run n_ticks timer frames."""
        generations = 0
        for _ in range(n_ticks):
            if self.tick():
                generations += 1

        return {
            "n_ticks": n_ticks,
            "tick_count": self.tick_count,
            "generations": generations,
            "generation": self.engine.generation,
            "population": self.engine.grid.population(),
        }

    def reset(self) -> None:
        """Clear the grid. The running flag is left alone."""
        self.engine.reset()

    def cell_at(self, x: float, y: float) -> tuple[int, int]:
        """Map pixel coordinates to (row, col). Not bounds checked."""
        size = self.config.cell_size
        return math.floor(y / size), math.floor(x / size)

    def click(self, x: float, y: float) -> bool:
        """
        Toggle the cell under a click.

        Raises OutOfBounds if the click lands outside the grid.

        Returns:
            The clicked cell's new state
        """
        row, col = self.cell_at(x, y)
        new_state = self.engine.toggle(row, col)
        logger.debug("Click at (%s, %s) -> cell (%d, %d) alive=%s", x, y, row, col, new_state)
        return new_state
