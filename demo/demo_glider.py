"""
Demo: Run the Game of Life headlessly and report population over time.

The demo:
1. Builds a 75x75 grid from a 600x600 px window with 8 px cells
2. Seeds a glider, a blinker, a block and a random soup
3. Drives the engine through timer ticks, one generation every 5 ticks
4. Prints population and changed-cell counts as the soup settles
"""

import logging

import numpy as np

from lifesim.core import Driver, DriverConfig, Grid, GridConfig, SimulationEngine
from lifesim.logging_config import setup_logging
from lifesim.patterns import BLINKER, BLOCK, GLIDER, place_pattern


def main():
    """Run the headless demo."""
    setup_logging(level=logging.INFO)
    rng = np.random.default_rng(seed=42)  # For reproducibility

    print("=" * 60)
    print("Game of Life Demo")
    print("=" * 60)

    # Setup grid, engine and driver
    print("\n1. Setting up grid...")
    grid = Grid(GridConfig.from_window(width=600, height=600, cell_size=8))
    engine = SimulationEngine(grid)
    driver = Driver(engine, DriverConfig(cell_size=8, generation_speed=5))
    print(f"   Grid size: {grid.rows}x{grid.cols}")

    # Seed patterns, then a random soup in the bottom-right quadrant
    print("\n2. Seeding patterns...")
    place_pattern(grid, GLIDER, 2, 2)
    place_pattern(grid, BLINKER, 10, 40)
    place_pattern(grid, BLOCK, 20, 60)
    soup = grid.snapshot()
    soup[45:70, 45:70] |= rng.random((25, 25)) < 0.35
    grid.load(soup)
    print(f"   Initial population: {grid.population()}")

    # Simulate a few clicks: each toggles one cell
    driver.click(300.0, 300.0)
    driver.click(300.0, 300.0)

    print("\n3. Running...")
    driver.toggle_running()
    for _ in range(10):
        stats = driver.run(50)
        print(
            f"   Generation {stats['generation']:4d}: "
            f"population={stats['population']:4d}  "
            f"density={grid.density():.3f}"
        )

    print("\n4. Settling check...")
    changed = engine.step()
    print(f"   Cells changed in one more generation: {changed}")

    driver.reset()
    print(f"   After reset: population={grid.population()}, generation={engine.generation}")

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)

    return stats


if __name__ == "__main__":
    main()
