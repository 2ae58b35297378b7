"""Preset Game of Life patterns."""

from typing import Dict, List, Tuple

from .grid import Grid


class Pattern:
    """Represents a Game of Life pattern as a set of live-cell offsets."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) offsets for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def __len__(self) -> int:
        return len(self.cells)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (width, height)
        """
        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_col - min_col + 1, max_row - min_row + 1)

    def fits(self, grid: Grid, row: int = 0, col: int = 0) -> bool:
        """Check whether every cell lands inside the grid at the given anchor."""
        return all(grid.in_bounds(r + row, c + col) for r, c in self.cells)

    def apply_to_grid(self, grid: Grid, row: int = 0, col: int = 0) -> None:
        """Set this pattern's cells alive on a grid.

        Cells not covered by the pattern keep their current state.

        Args:
            grid: Target grid
            row: Row anchor added to every offset
            col: Column anchor added to every offset

        Raises:
            ValueError: If any cell would fall outside the grid. Nothing is
                written in that case.
        """
        if not self.fits(grid, row, col):
            _, _, max_row, max_col = self.get_bounding_box()
            raise ValueError(
                f"Pattern '{self.name}' at ({row}, {col}) needs a grid of at least "
                f"{col + max_col + 1}x{row + max_row + 1}, got {grid.width}x{grid.height}"
            )

        for r, c in self.cells:
            grid.set_cell(r + row, c + col, True)


GLIDER_GUN_ANCHOR = (5, 1)

GOSPER_GLIDER_GUN = Pattern(
    "Gosper glider gun",
    [
        (0, 24),
        (1, 22),
        (1, 24),
        (2, 12),
        (2, 13),
        (2, 20),
        (2, 21),
        (2, 34),
        (2, 35),
        (3, 11),
        (3, 15),
        (3, 20),
        (3, 21),
        (3, 34),
        (3, 35),
        (4, 0),
        (4, 1),
        (4, 10),
        (4, 16),
        (4, 20),
        (4, 21),
        (5, 0),
        (5, 1),
        (5, 10),
        (5, 14),
        (5, 16),
        (5, 17),
        (5, 22),
        (5, 24),
        (6, 10),
        (6, 16),
        (6, 24),
        (7, 11),
        (7, 15),
        (8, 12),
        (8, 13),
    ],
    "Period-30 gun emitting a glider every cycle",
)

BUILTIN_PATTERNS: Dict[str, Pattern] = {
    pattern.name: pattern
    for pattern in [
        GOSPER_GLIDER_GUN,
        Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"),
        Pattern("Blinker", [(0, 0), (0, 1), (0, 2)], "Period-2 oscillator"),
        Pattern("Glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)], "Smallest spaceship, period-4"),
    ]
}
