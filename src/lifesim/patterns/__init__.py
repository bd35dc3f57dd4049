"""
Patterns: named seed arrangements for the grid.

Patterns only write initial state. They don't know about the engine.
- Still lifes: BLOCK, BEEHIVE
- Oscillators: BLINKER, TOAD
- Spaceships: GLIDER
- L_TROMINO: smallest birth-rule demonstration
"""

from lifesim.patterns.base import Pattern, place_pattern
from lifesim.patterns.library import (
    BLOCK,
    BEEHIVE,
    BLINKER,
    TOAD,
    GLIDER,
    L_TROMINO,
    PATTERNS,
    get_pattern,
)

__all__ = [
    "Pattern",
    "place_pattern",
    "BLOCK",
    "BEEHIVE",
    "BLINKER",
    "TOAD",
    "GLIDER",
    "L_TROMINO",
    "PATTERNS",
    "get_pattern",
]
