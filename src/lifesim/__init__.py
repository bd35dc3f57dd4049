"""
lifesim: Conway's Game of Life simulation engine

A headless engine for the Game of Life on a fixed-size grid.

Core concepts:
- Each cell is alive or dead
- Cells outside the grid count as dead (no wrapping)
- A generation is computed from the previous one only
- Mark every cell first, then commit every cell

See DESIGN.md for the module layout.
"""

__version__ = "0.1.0"
