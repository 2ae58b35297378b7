"""Grid data structure for the Game of Life."""

from typing import Iterator, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

DEAD = 0
ALIVE = 1

# Moore neighborhood, centre excluded
_NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


class Grid:
    """Represents a fixed-size 2D grid of cells.

    Cells are stored densely in a numpy array of shape (height, width) and
    addressed as (row, col). Edges are hard: positions outside the grid are
    never wrapped and count as dead for neighbor purposes.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self._cells = np.zeros((height, width), dtype=np.int8)

    @property
    def cells(self) -> np.ndarray:
        """Get the cell array, indexed [row, col]."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies inside the grid."""
        return 0 <= row < self.height and 0 <= col < self.width

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

        return bool(self._cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate
            alive: Whether the cell should be alive

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

        self._cells[row, col] = ALIVE if alive else DEAD

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(DEAD)

    def randomize(self, probability: float, rng: Optional[np.random.Generator] = None) -> None:
        """Overwrite every cell at random.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            rng: Random generator to draw from; a fresh unseeded one is used
                when omitted, so results differ from run to run
        """
        if rng is None:
            rng = np.random.default_rng()

        mask = rng.random((self.height, self.width)) < probability
        self._cells[mask] = ALIVE
        self._cells[~mask] = DEAD

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def count_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        Off-grid positions are skipped, so a corner cell has at most 3
        neighbors and an edge cell at most 5.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

        count = 0
        for dr in [-1, 0, 1]:
            for dc in [-1, 0, 1]:
                if dr == 0 and dc == 0:
                    continue

                nr, nc = row + dr, col + dc
                if self.in_bounds(nr, nc):
                    count += int(self._cells[nr, nc])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Zero padding keeps the edges hard.

        Returns:
            int8 array of shape (height, width) with neighbor counts
        """
        source = torch.from_numpy((self._cells > 0).astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(source, _NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def rows(self) -> Iterator[Tuple[bool, ...]]:
        """Iterate over rows top to bottom, each row left to right.

        Yields:
            Tuple of cell states for one row
        """
        for row in self._cells:
            yield tuple(bool(cell) for cell in row)

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        other = Grid(self.width, self.height)
        other._cells[:] = self._cells
        return other

    def load(self, data) -> None:
        """Load cell states from a nested list or array of rows.

        Args:
            data: 2D rows of cell states, shape (height, width)

        Raises:
            ValueError: If data dimensions don't match grid
        """
        arr = np.asarray(data, dtype=np.int8)
        if arr.shape != (self.height, self.width):
            raise ValueError(f"Data shape {arr.shape} doesn't match grid {self.height}x{self.width} (rows x cols)")

        self._cells[:] = (arr > 0).astype(np.int8)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self.rows())
