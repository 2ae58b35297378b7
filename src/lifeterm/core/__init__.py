"""Core simulation logic."""

from .grid import Grid
from .game import GameOfLife
from .patterns import Pattern, BUILTIN_PATTERNS, GOSPER_GLIDER_GUN, GLIDER_GUN_ANCHOR

__all__ = ["Grid", "GameOfLife", "Pattern", "BUILTIN_PATTERNS", "GOSPER_GLIDER_GUN", "GLIDER_GUN_ANCHOR"]
