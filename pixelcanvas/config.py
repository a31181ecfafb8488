"""
Centralized configuration for Pixel Canvas.
"""

import os
from typing import Tuple

# ==================== GRID ====================

# Grid side length in cells
DEFAULT_GRID_SIZE = 16
MIN_GRID_SIZE = 1
MAX_GRID_SIZE = 64


# ==================== BRUSH ====================

# Options: "square", "circle"
DEFAULT_BRUSH_KIND = "square"

# Size in cells (1..grid size)
DEFAULT_BRUSH_SIZE = 1


# ==================== COLORS ====================

# Color every cell starts with after a reset
DEFAULT_CELL_COLOR = (0, 0, 0)

# Left click paints with the primary color, right click with the secondary
DEFAULT_PRIMARY_COLOR = (255, 255, 255)
DEFAULT_SECONDARY_COLOR = (0, 0, 0)

# Clear color behind the grid
BACKGROUND_COLOR = (211, 211, 211)

# Brush preview color (RGBA)
OVERLAY_COLOR = (255, 255, 255, 100)


# ==================== APPLICATION ====================

# Window title
APP_TITLE = "Pixel Canvas"

# Initial window size
WINDOW_SIZE = (1024, 768)

# Show the FPS counter in the top-right corner
DISPLAY_FPS = True

# Dark settings theme
DARK_MODE = True


# ==================== DEVELOPMENT ====================

# Debug mode
DEBUG = False

# Logging: DEBUG, INFO, WARNING, ERROR
LOG_LEVEL = os.environ.get("PIXELCANVAS_LOG_LEVEL", "INFO")


# ==================== HELPERS ====================

def validate_grid_size(size: int) -> int:
    """
    Validates a grid size.

    Args:
        size: Requested grid side length

    Returns:
        The size as an int

    Raises:
        ValueError: If the size is outside MIN_GRID_SIZE..MAX_GRID_SIZE
    """
    size = int(size)
    if not MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
        raise ValueError(
            f"Grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, got {size}"
        )
    return size


def validate_color(color) -> Tuple[int, int, int]:
    """
    Validates an RGB color.

    Args:
        color: Sequence of three channels in 0..255

    Returns:
        The color as a tuple of ints

    Raises:
        ValueError: If the color doesn't have three 8-bit channels
    """
    channels = tuple(int(c) for c in color)
    if len(channels) != 3 or any(not 0 <= c <= 255 for c in channels):
        raise ValueError(f"Color must be three channels in 0..255, got {color!r}")
    return channels
