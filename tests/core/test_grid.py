"""Tests for the PixelGrid store."""

from __future__ import annotations

import numpy as np
import pytest

from pixelcanvas import config
from pixelcanvas.core.geometry import cell_centers
from pixelcanvas.core.grid import PixelGrid

RED = (255, 0, 0)


@pytest.mark.parametrize("grid_size", range(config.MIN_GRID_SIZE, config.MAX_GRID_SIZE + 1))
def test_reset_yields_square_grid_of_default_color(grid_size: int) -> None:
    grid = PixelGrid(config.DEFAULT_GRID_SIZE)
    grid.set(0, 0, RED)

    grid.reset(grid_size)

    assert grid.size == grid_size
    assert grid.cell_count == grid_size * grid_size
    assert grid.colors.shape == (grid_size, grid_size, 3)
    assert grid.is_blank()
    assert grid.get(grid_size - 1, grid_size - 1) == config.DEFAULT_CELL_COLOR


@pytest.mark.parametrize("grid_size", [0, -1, config.MAX_GRID_SIZE + 1])
def test_reset_rejects_unsupported_sizes(grid_size: int) -> None:
    grid = PixelGrid(4)
    with pytest.raises(ValueError):
        grid.reset(grid_size)


def test_set_then_get() -> None:
    grid = PixelGrid(16)
    grid.set(3, 7, RED)

    assert grid.get(3, 7) == RED
    assert grid.get(7, 3) == config.DEFAULT_CELL_COLOR
    assert not grid.is_blank()


@pytest.mark.parametrize("index", [(-1, 0), (0, -1), (16, 0), (0, 16)])
def test_out_of_range_access_raises(index) -> None:
    """Negative indices must not wrap around like plain numpy indexing."""
    grid = PixelGrid(16)
    with pytest.raises(IndexError):
        grid.get(*index)
    with pytest.raises(IndexError):
        grid.set(*index, RED)


@pytest.mark.parametrize("new_size", [16, 8, 32])
def test_resize_is_destructive(new_size: int) -> None:
    """Even resizing to the same size clears the canvas."""
    grid = PixelGrid(16)
    grid.set(5, 5, RED)

    grid.resize(new_size)

    assert grid.size == new_size
    assert grid.is_blank()


def test_positions_are_recomputed_lazily() -> None:
    grid = PixelGrid(4)
    assert grid.positions_dirty
    with pytest.raises(RuntimeError):
        grid.centers

    grid.update_positions(10.0)

    assert not grid.positions_dirty
    assert grid.edge_length == 10.0
    np.testing.assert_allclose(grid.centers, cell_centers(4, 10.0))

    grid.reset(4)
    assert grid.positions_dirty


def test_colors_view_is_read_only() -> None:
    grid = PixelGrid(4)
    with pytest.raises(ValueError):
        grid.colors[0, 0] = RED
