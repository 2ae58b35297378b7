"""Terminal frontend."""

from .terminal import TerminalRenderer
from .cli import CLIGameOfLife

__all__ = ["TerminalRenderer", "CLIGameOfLife"]
