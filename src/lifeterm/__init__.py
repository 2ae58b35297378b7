"""Terminal Conway's Game of Life on a fixed, hard-edged grid."""

__version__ = "0.1.0"

from .core.grid import Grid
from .core.game import GameOfLife
from .core.patterns import Pattern, GOSPER_GLIDER_GUN

__all__ = ["Grid", "GameOfLife", "Pattern", "GOSPER_GLIDER_GUN"]
