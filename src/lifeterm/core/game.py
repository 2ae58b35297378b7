"""Conway's Game of Life implementation."""

from typing import Iterator, Optional, Tuple
import numpy as np

from .grid import Grid, ALIVE, DEAD
from .patterns import Pattern, GOSPER_GLIDER_GUN, GLIDER_GUN_ANCHOR


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Owns the current and the previous generation, both of the dimensions
    given at construction. Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Mutating operations return the engine so calls can be chained::

        game = GameOfLife(40, 40).add_preset_pattern()
        game.next_generation().next_generation()
    """

    LIVE_PROBABILITY = 0.15

    def __init__(self, width: int, height: int) -> None:
        """Initialize the game with an all-dead grid.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not positive
        """
        self._grid = Grid(width, height)
        self._previous_grid = Grid(width, height)
        self._generation = 0

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def grid(self) -> Grid:
        """The current generation."""
        return self._grid

    @property
    def previous_grid(self) -> Grid:
        """The generation before the last transition."""
        return self._previous_grid

    @property
    def generation(self) -> int:
        """Number of transitions applied so far."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    def randomize(
        self, rng: Optional[np.random.Generator] = None, probability: Optional[float] = None
    ) -> "GameOfLife":
        """Overwrite every current cell at random.

        The previous grid is left as it is.

        Args:
            rng: Optional random generator, for reproducible fills
            probability: Chance each cell is alive; defaults to LIVE_PROBABILITY
        """
        if probability is None:
            probability = self.LIVE_PROBABILITY

        self._grid.randomize(probability, rng)
        return self

    def add_preset_pattern(
        self, pattern: Pattern = GOSPER_GLIDER_GUN, anchor: Tuple[int, int] = GLIDER_GUN_ANCHOR
    ) -> "GameOfLife":
        """Set a preset pattern's cells alive, by default the Gosper glider gun.

        Args:
            pattern: Pattern to place
            anchor: (row, col) added to every pattern offset

        Raises:
            ValueError: If the pattern does not fit in the grid at the anchor
        """
        pattern.apply_to_grid(self._grid, *anchor)
        return self

    add_glider_gun = add_preset_pattern

    def count_alive_neighbors(self, row: int, col: int) -> int:
        """Count live cells in the Moore neighborhood of (row, col).

        Off-grid neighbors count as dead.

        Raises:
            IndexError: If (row, col) itself is outside the grid
        """
        return self._grid.count_neighbors(row, col)

    def next_generation(self) -> "GameOfLife":
        """Advance the simulation by one generation.

        Every cell is evaluated against the pre-transition grid; the result
        is built in a new grid and only then replaces the current one.
        """
        neighbor_counts = self._grid.count_all_neighbors()
        cells = self._grid.cells

        survive = (cells == ALIVE) & ((neighbor_counts == 2) | (neighbor_counts == 3))
        birth = (cells == DEAD) & (neighbor_counts == 3)

        new_grid = Grid(self.width, self.height)
        new_grid.load(survive | birth)

        self._previous_grid = self._grid
        self._grid = new_grid
        self._generation += 1
        return self

    def rows(self) -> Iterator[Tuple[bool, ...]]:
        """Iterate over the current grid row by row, top to bottom."""
        return self._grid.rows()

    def __str__(self) -> str:
        return str(self._grid)
