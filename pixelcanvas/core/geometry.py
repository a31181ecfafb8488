"""
Coordinate conversion between the continuous world plane and grid cells.

World coordinates have their origin at the center of the viewport, x to the
right and y up. The grid is inscribed in the smaller viewport dimension.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np


def cell_edge_length(viewport_width: float, viewport_height: float, grid_size: int) -> float:
    """
    Edge length of a single (square) cell.

    Args:
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels
        grid_size: Grid side length in cells

    Returns:
        min(width, height) / grid_size
    """
    return min(viewport_width, viewport_height) / grid_size


def world_to_cell(x: float, y: float, edge_length: float, grid_size: int) -> Tuple[int, int]:
    """
    Converts a world position to the index of the cell under it.

    Args:
        x: World X coordinate
        y: World Y coordinate
        edge_length: Cell edge length
        grid_size: Grid side length in cells

    Returns:
        Tuple (cell_x, cell_y), may be out of bounds
    """
    half = grid_size // 2
    return (math.floor(x / edge_length) + half, math.floor(y / edge_length) + half)


def cell_to_world(cell_x: int, cell_y: int, edge_length: float, grid_size: int) -> Tuple[float, float]:
    """
    Converts a cell index to the world position of the cell's center.

    Args:
        cell_x: Cell X index
        cell_y: Cell Y index
        edge_length: Cell edge length
        grid_size: Grid side length in cells

    Returns:
        World position (center of the cell)
    """
    offset = grid_size // 2 - 0.5
    return ((cell_x - offset) * edge_length, (cell_y - offset) * edge_length)


def cell_centers(grid_size: int, edge_length: float) -> np.ndarray:
    """World centers of every cell along one axis, vectorized."""
    indices = np.arange(grid_size, dtype=np.float64)
    return (indices - (grid_size // 2 - 0.5)) * edge_length


def snap_to_cell(x: float, y: float, edge_length: float) -> Tuple[float, float]:
    """Center of the cell containing the world position (x, y)."""
    return (
        (math.floor(x / edge_length) + 0.5) * edge_length,
        (math.floor(y / edge_length) + 0.5) * edge_length,
    )


def world_to_screen(x: float, y: float, viewport_width: float, viewport_height: float) -> Tuple[float, float]:
    """Converts world coordinates (y up) to screen coordinates (y down)."""
    return (viewport_width / 2 + x, viewport_height / 2 - y)


def screen_to_world(screen_x: float, screen_y: float, viewport_width: float, viewport_height: float) -> Tuple[float, float]:
    """Converts screen coordinates (y down) to world coordinates (y up)."""
    return (screen_x - viewport_width / 2, viewport_height / 2 - screen_y)
