"""
Brush Tool - Computes which cells a square or circle brush paints.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Iterator, Tuple

from pixelcanvas import config
from pixelcanvas.core.models import BrushKind

logger = logging.getLogger(__name__)

Offset = Tuple[int, int]


@dataclass(frozen=True)
class BrushSpec:
    kind: BrushKind = BrushKind(config.DEFAULT_BRUSH_KIND)
    size: int = config.DEFAULT_BRUSH_SIZE


def square_span(center: int, size: int, grid_size: int) -> range:
    """
    Cells covered by a square brush along one axis.

    The span is [ceil(center - size/2), center + ceil(size/2)), so even
    sizes extend one cell further towards -x / -y. Both bounds are clamped
    to the grid; cells past the edge are not painted.
    """
    start = max(0, math.ceil(center - size / 2))
    end = min(grid_size, center + math.ceil(size / 2))
    return range(start, end)


@lru_cache(maxsize=None)
def circle_offsets(diameter: int) -> Tuple[Offset, ...]:
    """Implementation of Gauss' solution to the circle problem.

    Enumerates the lattice points of the square [-r, r]^2 where r is the
    truncated radius, keeping those within the untruncated radius d/2.
    """
    radius_f = diameter / 2.0
    radius = int(radius_f)
    limit = radius_f * radius_f

    points = []
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            if dx * dx + dy * dy <= limit:
                points.append((dx, dy))

    return tuple(points)


@lru_cache(maxsize=None)
def _square_offsets(size: int) -> Tuple[Offset, ...]:
    span = range(math.ceil(-size / 2), math.ceil(size / 2))
    return tuple((dx, dy) for dx in span for dy in span)


def brush_offsets(spec: BrushSpec) -> Tuple[Offset, ...]:
    """
    Offsets from the brush center painted by a brush, before clamping.

    Args:
        spec: Brush kind and size

    Returns:
        Tuple of (dx, dy) offsets
    """
    if spec.kind is BrushKind.SQUARE:
        return _square_offsets(spec.size)
    elif spec.kind is BrushKind.CIRCLE:
        return circle_offsets(spec.size)
    raise ValueError(f"Unknown brush kind: {spec.kind!r}")


def _clamp(value: int, grid_size: int) -> int:
    return max(0, min(grid_size - 1, value))


def stamp(spec: BrushSpec, center: Tuple[int, int], grid_size: int) -> Iterator[Tuple[int, int]]:
    """
    Yields every in-bounds cell painted by one brush stamp.

    Square brushes clip to the grid. Circle offsets are clamped per axis
    to [0, grid_size - 1], so strokes near an edge pile up against it and
    the same cell may be yielded more than once.

    Args:
        spec: Brush kind and size
        center: Cell under the pointer (may be out of bounds)
        grid_size: Grid side length in cells
    """
    center_x, center_y = center

    if spec.kind is BrushKind.SQUARE:
        ys = square_span(center_y, spec.size, grid_size)
        for x in square_span(center_x, spec.size, grid_size):
            for y in ys:
                yield (x, y)
    elif spec.kind is BrushKind.CIRCLE:
        for dx, dy in circle_offsets(spec.size):
            yield (_clamp(center_x + dx, grid_size), _clamp(center_y + dy, grid_size))
    else:
        raise ValueError(f"Unknown brush kind: {spec.kind!r}")


class BrushTool:
    """Holds the active brush and validates changes to it."""

    def __init__(self, spec: BrushSpec = BrushSpec()):
        self._spec = spec

    @property
    def spec(self) -> BrushSpec:
        return self._spec

    def set_kind(self, kind: BrushKind) -> None:
        """Switches between square and circle brushes."""
        kind = BrushKind(kind)
        if kind is not self._spec.kind:
            logger.debug("Brush kind: %s", kind.value)
        self._spec = replace(self._spec, kind=kind)

    def set_brush_size(self, size: int, grid_size: int) -> None:
        """
        Sets the brush size.

        Args:
            size: Brush size in cells
            grid_size: Current grid size (upper bound)

        Raises:
            ValueError: If size is outside 1..grid_size
        """
        size = int(size)
        if not 1 <= size <= grid_size:
            raise ValueError(f"Brush size must be between 1 and {grid_size}, got {size}")
        self._spec = replace(self._spec, size=size)

    def fit_to_grid(self, grid_size: int) -> None:
        """Shrinks the brush if it no longer fits a smaller grid."""
        if self._spec.size > grid_size:
            logger.debug("Brush size clamped from %d to %d", self._spec.size, grid_size)
            self._spec = replace(self._spec, size=grid_size)

    def cells_at(self, center: Tuple[int, int], grid_size: int) -> Iterator[Tuple[int, int]]:
        """Cells painted by the active brush centered at `center`."""
        return stamp(self._spec, center, grid_size)
