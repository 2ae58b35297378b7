"""ANSI terminal renderer for Game of Life generations."""

import sys
from typing import Optional, TextIO

from ..core.game import GameOfLife

CLEAR_SCREEN = "\x1b[2J\x1b[H"


class TerminalRenderer:
    """Redraws the whole grid on every frame.

    Each cell is drawn as one of two glyphs. Output goes to ``stream``
    (stdout by default) and is flushed after every frame so the terminal
    never shows a partial generation.
    """

    def __init__(self, stream: Optional[TextIO] = None, alive: str = "██", dead: str = "  ") -> None:
        """Initialize the renderer.

        Args:
            stream: Text stream to write to; defaults to sys.stdout at render time
            alive: Glyph for living cells
            dead: Glyph for dead cells

        Raises:
            ValueError: If the glyphs are identical
        """
        if alive == dead:
            raise ValueError("Alive and dead glyphs must differ")

        self._stream = stream
        self.alive = alive
        self.dead = dead

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def format_grid(self, game: GameOfLife) -> str:
        """Format the current generation, one line per row."""
        lines = []
        for row in game.rows():
            lines.append("".join(self.alive if cell else self.dead for cell in row))
        return "\n".join(lines) + "\n"

    def clear(self) -> None:
        """Clear the terminal and move the cursor home."""
        self.stream.write(CLEAR_SCREEN)

    def render(self, game: GameOfLife) -> None:
        """Clear the terminal and draw the current generation."""
        self.clear()
        stream = self.stream
        stream.write(self.format_grid(game))
        stream.flush()
