"""Core simulation engine."""

from .cell import Cell, next_cell_state
from .universe import Universe, DEFAULT_WIDTH, DEFAULT_HEIGHT, DEAD_GLYPH, ALIVE_GLYPH
from .patterns import Pattern, PatternLibrary

__all__ = [
    "Cell",
    "next_cell_state",
    "Universe",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEAD_GLYPH",
    "ALIVE_GLYPH",
    "Pattern",
    "PatternLibrary",
]
