"""Tests for the Grid class."""

import numpy as np
import pytest
from lifeterm.core.grid import Grid


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.width == 10
        assert grid.height == 20
        assert grid.shape == (10, 20)
        assert grid.cells.shape == (20, 10)
        assert grid.population == 0

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 5), (5, -3), (0, 0)])
    def test_invalid_dimensions(self, width, height):
        """Test that degenerate dimensions are rejected."""
        with pytest.raises(ValueError):
            Grid(width, height)

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        grid = Grid(5, 4)

        assert not grid.get_cell(0, 0)
        assert not grid.get_cell(3, 4)

        grid.set_cell(1, 1, True)
        grid.set_cell(3, 4, True)

        assert grid.get_cell(1, 1)
        assert grid.get_cell(3, 4)
        assert not grid.get_cell(0, 0)

        grid.set_cell(1, 1, False)
        assert not grid.get_cell(1, 1)

    def test_out_of_bounds(self):
        """Test that coordinates never wrap."""
        grid = Grid(3, 3)

        with pytest.raises(IndexError):
            grid.set_cell(-1, 0, True)

        with pytest.raises(IndexError):
            grid.set_cell(0, 3, True)

        with pytest.raises(IndexError):
            grid.get_cell(3, 0)

        with pytest.raises(IndexError):
            grid.get_cell(0, -1)

    def test_clear(self):
        """Test grid clearing."""
        grid = Grid(5, 5)
        grid.set_cell(1, 1, True)
        grid.set_cell(2, 2, True)
        assert grid.population == 2

        grid.clear()
        assert grid.population == 0

    def test_randomize(self):
        """Test random population."""
        grid = Grid(10, 10)

        grid.randomize(1.0)
        assert grid.population == 100

        # Overwrites rather than adds
        grid.randomize(0.0)
        assert grid.population == 0

        grid.randomize(0.5)
        assert 30 <= grid.population <= 70

    def test_randomize_with_seeded_rng(self):
        """Test that an injected generator makes fills reproducible."""
        first = Grid(20, 20)
        second = Grid(20, 20)

        first.randomize(0.3, np.random.default_rng(42))
        second.randomize(0.3, np.random.default_rng(42))

        assert first == second

    def test_count_neighbors_full_grid(self):
        """Test neighbor counts on a fully alive 3x3 grid."""
        grid = Grid(3, 3)
        grid.load([[1, 1, 1], [1, 1, 1], [1, 1, 1]])

        assert grid.count_neighbors(1, 1) == 8
        assert grid.count_neighbors(0, 0) == 3
        assert grid.count_neighbors(2, 2) == 3
        assert grid.count_neighbors(0, 1) == 5
        assert grid.count_neighbors(1, 2) == 5

    def test_count_neighbors_no_wrap(self):
        """Test that cells on the opposite edges are not neighbors."""
        grid = Grid(5, 5)
        grid.set_cell(4, 4, True)
        grid.set_cell(0, 4, True)
        grid.set_cell(4, 0, True)

        assert grid.count_neighbors(0, 0) == 0

    def test_count_neighbors_out_of_bounds(self):
        """Test the centre cell must be inside the grid."""
        grid = Grid(4, 3)

        with pytest.raises(IndexError):
            grid.count_neighbors(3, 0)

        with pytest.raises(IndexError):
            grid.count_neighbors(0, -1)

    def test_count_all_neighbors_matches_single_counts(self):
        """Test the convolution agrees with the per-cell count."""
        grid = Grid(12, 9)
        grid.randomize(0.4, np.random.default_rng(7))

        counts = grid.count_all_neighbors()
        assert counts.shape == (9, 12)
        for row in range(grid.height):
            for col in range(grid.width):
                assert counts[row, col] == grid.count_neighbors(row, col)
                assert 0 <= counts[row, col] <= 8

    def test_rows_are_row_major(self):
        """Test row iteration order."""
        grid = Grid(3, 2)
        grid.set_cell(0, 2, True)
        grid.set_cell(1, 0, True)

        assert list(grid.rows()) == [(False, False, True), (True, False, False)]

    def test_str(self):
        """Test string rendering."""
        grid = Grid(3, 2)
        grid.set_cell(0, 1, True)

        assert str(grid) == ".*.\n..."

    def test_load_shape_mismatch(self):
        """Test loading data of the wrong shape."""
        grid = Grid(3, 2)

        with pytest.raises(ValueError):
            grid.load([[0, 0], [0, 0], [0, 0]])

    def test_copy_is_independent(self):
        """Test that copies don't share cells."""
        grid = Grid(4, 4)
        grid.set_cell(1, 2, True)

        other = grid.copy()
        assert other == grid

        other.set_cell(0, 0, True)
        assert not grid.get_cell(0, 0)
        assert other != grid
