"""
Pytest configuration and shared fixtures.
"""

import pytest


@pytest.fixture
def small_grid_config():
    """Configuration for a small 6x6 test grid."""
    from lifesim.core import GridConfig
    return GridConfig(rows=6, cols=6)


@pytest.fixture
def small_grid(small_grid_config):
    """An all-dead 6x6 grid."""
    from lifesim.core import Grid
    return Grid(small_grid_config)


@pytest.fixture
def engine(small_grid):
    """Engine over the small grid."""
    from lifesim.core import SimulationEngine
    return SimulationEngine(small_grid)


@pytest.fixture
def large_engine():
    """Engine over a 20x20 grid, enough room for a glider to travel."""
    from lifesim.core import Grid, GridConfig, SimulationEngine
    return SimulationEngine(Grid(GridConfig(rows=20, cols=20)))
