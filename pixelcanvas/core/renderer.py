from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from pixelcanvas import config
from pixelcanvas.core.geometry import snap_to_cell
from pixelcanvas.core.grid import PixelGrid
from pixelcanvas.core.models import BrushKind, OverlayRect, RenderRect, RGBA
from pixelcanvas.tools.brush_tool import BrushSpec, circle_offsets


class GridRenderer:
    """
    Turns a PixelGrid into draw rectangles.

    Vertically contiguous cells of the same color in a column are merged
    into a single rectangle. Rows are never merged horizontally.
    """

    def __init__(self, overlay_color: RGBA = config.OVERLAY_COLOR):
        """
        Initializes the renderer.

        Args:
            overlay_color: RGBA color of the brush preview
        """
        self.overlay_color = overlay_color

    def compact(self, grid: PixelGrid) -> Iterator[RenderRect]:
        """
        Yields one rectangle per run, column by column.

        Args:
            grid: Grid with up-to-date positions

        Returns:
            Iterator of RenderRect, non-overlapping
        """
        colors = grid.colors
        centers = grid.centers
        edge = grid.edge_length
        size = grid.size

        for x in range(size):
            column = colors[x]
            covered = 0
            for y in range(size):
                if y < covered:
                    continue

                run = _run_length(column, y)
                covered = y + run

                r, g, b = column[y]
                yield RenderRect(
                    x=float(centers[x]),
                    y=float(centers[y]) + edge * (run - 1) / 2.0,
                    width=edge,
                    height=edge * run,
                    color=(int(r), int(g), int(b)),
                )

    def brush_preview(
        self,
        brush: BrushSpec,
        pointer: Tuple[float, float],
        edge_length: float,
    ) -> Iterator[OverlayRect]:
        """
        Yields the translucent brush outline at the pointer's cell.

        Read-only: the grid is not touched and the preview isn't clipped.

        Args:
            brush: Active brush
            pointer: Pointer position in world coordinates
            edge_length: Cell edge length
        """
        mouse_x, mouse_y = snap_to_cell(pointer[0], pointer[1], edge_length)

        if brush.kind is BrushKind.SQUARE:
            # Even sizes have no center cell, align the preview with the painted span
            if brush.size % 2 == 0:
                mouse_x -= edge_length / 2.0
                mouse_y -= edge_length / 2.0
            side = edge_length * brush.size
            yield OverlayRect(mouse_x, mouse_y, side, side, self.overlay_color)
        elif brush.kind is BrushKind.CIRCLE:
            for dx, dy in circle_offsets(brush.size):
                yield OverlayRect(
                    dx * edge_length + mouse_x,
                    dy * edge_length + mouse_y,
                    edge_length,
                    edge_length,
                    self.overlay_color,
                )
        else:
            raise ValueError(f"Unknown brush kind: {brush.kind!r}")


def _run_length(column: np.ndarray, start: int) -> int:
    """Number of consecutive rows from `start` sharing its color."""
    matches = np.all(column[start:] == column[start], axis=1)
    breaks = np.flatnonzero(~matches)
    return int(breaks[0]) if breaks.size else len(matches)
