"""
Grid Store Module
Holds the color of every cell and the world position of the cell centers.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from pixelcanvas import config
from pixelcanvas.core.geometry import cell_centers
from pixelcanvas.core.models import RGB

logger = logging.getLogger(__name__)


class PixelGrid:
    """
    Square grid of colored cells, indexed [x, y].

    Resizing is destructive: every cell goes back to the default color.
    Cell positions are recomputed lazily (see update_positions).
    """

    def __init__(self, grid_size: int = config.DEFAULT_GRID_SIZE, default_color: RGB = config.DEFAULT_CELL_COLOR):
        """
        Initialize the grid.

        Args:
            grid_size: Grid side length in cells (1..64)
            default_color: Color of every cell after a reset
        """
        self.default_color: RGB = config.validate_color(default_color)
        self._colors: np.ndarray = np.empty((0, 0, 3), dtype=np.uint8)
        self._centers: Optional[np.ndarray] = None
        self._edge_length: float = 0.0
        self.positions_dirty: bool = True
        self.reset(grid_size)

    # ========================================================================
    # Shape
    # ========================================================================

    @property
    def size(self) -> int:
        return self._colors.shape[0]

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def reset(self, grid_size: int) -> None:
        """
        Reinitializes the grid with every cell at the default color.

        Args:
            grid_size: New grid side length in cells

        Raises:
            ValueError: If grid_size is outside the supported range
        """
        grid_size = config.validate_grid_size(grid_size)
        self._colors = np.empty((grid_size, grid_size, 3), dtype=np.uint8)
        self._colors[:, :] = self.default_color
        self._centers = None
        self.positions_dirty = True
        logger.debug("Grid reset to %dx%d", grid_size, grid_size)

    def resize(self, grid_size: int) -> None:
        """Same as reset: no content survives a resize."""
        self.reset(grid_size)

    # ========================================================================
    # Cell access
    # ========================================================================

    def _check_index(self, x: int, y: int) -> None:
        size = self.size
        if not (0 <= x < size and 0 <= y < size):
            raise IndexError(f"Cell ({x}, {y}) outside {size}x{size} grid")

    def get(self, x: int, y: int) -> RGB:
        """
        Gets the color of a cell.

        Raises:
            IndexError: If (x, y) is outside the grid
        """
        self._check_index(x, y)
        r, g, b = self._colors[x, y]
        return (int(r), int(g), int(b))

    def set(self, x: int, y: int, color: RGB) -> None:
        """
        Sets the color of a cell.

        Raises:
            IndexError: If (x, y) is outside the grid
        """
        self._check_index(x, y)
        self._colors[x, y] = color

    @property
    def colors(self) -> np.ndarray:
        """Read-only view of the (size, size, 3) color array."""
        view = self._colors.view()
        view.flags.writeable = False
        return view

    def is_blank(self) -> bool:
        """True if every cell has the default color."""
        return bool(np.all(self._colors == np.asarray(self.default_color, dtype=np.uint8)))

    # ========================================================================
    # Positions
    # ========================================================================

    def update_positions(self, edge_length: float) -> None:
        """Recomputes the world center of every cell and clears the dirty flag."""
        self._edge_length = edge_length
        self._centers = cell_centers(self.size, edge_length)
        self.positions_dirty = False

    @property
    def centers(self) -> np.ndarray:
        """World centers along one axis (valid for both, the grid is square)."""
        if self._centers is None:
            raise RuntimeError("Cell positions requested before update_positions()")
        return self._centers

    @property
    def edge_length(self) -> float:
        return self._edge_length
