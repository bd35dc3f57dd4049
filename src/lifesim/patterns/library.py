"""
Well-known Game of Life patterns.

Still lifes never change, oscillators repeat with their period, and the
glider repeats every 4 generations shifted one cell down and right.
"""

from __future__ import annotations

from lifesim.patterns.base import Pattern

BLOCK = Pattern.from_rows("block", [
    "OO",
    "OO",
])

BEEHIVE = Pattern.from_rows("beehive", [
    ".OO.",
    "O..O",
    ".OO.",
])

BLINKER = Pattern.from_rows("blinker", ["OOO"], period=2)

TOAD = Pattern.from_rows("toad", [
    ".OOO",
    "OOO.",
], period=2)

GLIDER = Pattern.from_rows("glider", [
    ".O.",
    "..O",
    "OOO",
], period=4)

# Three cells of a block; the missing corner is born next generation
L_TROMINO = Pattern.from_rows("l_tromino", [
    "OO",
    "O.",
])

PATTERNS: dict[str, Pattern] = {
    p.name: p for p in (BLOCK, BEEHIVE, BLINKER, TOAD, GLIDER, L_TROMINO)
}


def get_pattern(name: str) -> Pattern:
    """Look up a pattern by name. Raises KeyError for unknown names."""
    try:
        return PATTERNS[name]
    except KeyError:
        raise KeyError(f"Unknown pattern {name!r}; available: {sorted(PATTERNS)}") from None
