"""
Paint Engine Module
Owns the canvas session and advances it one tick at a time.

The shell feeds input events through handle_input(), then calls tick() and
render() once per frame, in that order. Nothing here depends on a window.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from pixelcanvas import config
from pixelcanvas.core.geometry import cell_edge_length, world_to_cell
from pixelcanvas.core.grid import PixelGrid
from pixelcanvas.core.models import (
    RGB,
    BrushChanged,
    BrushKind,
    ButtonPressed,
    ButtonReleased,
    ColorsChanged,
    DisplayChanged,
    ExitRequested,
    Frame,
    GridResized,
    MouseButton,
    PointerMoved,
    ResetRequested,
    ViewportResized,
)
from pixelcanvas.core.renderer import GridRenderer
from pixelcanvas.tools.brush_tool import BrushSpec, BrushTool

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    grid_size: int = config.DEFAULT_GRID_SIZE
    primary_color: RGB = config.DEFAULT_PRIMARY_COLOR
    secondary_color: RGB = config.DEFAULT_SECONDARY_COLOR
    display_fps: bool = config.DISPLAY_FPS
    dark_mode: bool = config.DARK_MODE


@dataclass
class CanvasState:
    drawing: bool = False
    erasing: bool = False
    should_reset: bool = False
    should_exit: bool = False
    should_calc_positions: bool = True
    pointer: Tuple[float, float] = (0.0, 0.0)
    viewport: Tuple[float, float] = (float(config.WINDOW_SIZE[0]), float(config.WINDOW_SIZE[1]))


@dataclass
class CanvasSession:
    """Everything one canvas owns: grid, brush, settings and input state."""

    settings: Settings = field(default_factory=Settings)
    state: CanvasState = field(default_factory=CanvasState)
    brush_tool: BrushTool = field(default_factory=BrushTool)
    renderer: GridRenderer = field(default_factory=GridRenderer)
    grid: Optional[PixelGrid] = None

    def __post_init__(self):
        if self.grid is None:
            self.grid = PixelGrid(config.validate_grid_size(self.settings.grid_size))
        else:
            self.settings.grid_size = self.grid.size
        self.brush_tool.fit_to_grid(self.settings.grid_size)

    @property
    def brush(self) -> BrushSpec:
        return self.brush_tool.spec

    @property
    def edge_length(self) -> float:
        width, height = self.state.viewport
        return cell_edge_length(width, height, self.settings.grid_size)

    def pointer_cell(self) -> Tuple[int, int]:
        """Cell under the pointer, may be out of bounds."""
        x, y = self.state.pointer
        return world_to_cell(x, y, self.edge_length, self.settings.grid_size)


# ========================================================================
# Input
# ========================================================================

def _set_button(state: CanvasState, button: MouseButton, pressed: bool) -> None:
    if button is MouseButton.LEFT:
        state.drawing = pressed
    elif button is MouseButton.RIGHT:
        state.erasing = pressed


def handle_input(session: CanvasSession, event) -> None:
    """
    Applies one input event to the session.

    Only flags and settings change here; the grid itself is only touched
    by tick().

    Args:
        session: Session to update
        event: One of the event types from pixelcanvas.core.models

    Raises:
        ValueError: If the event carries an out-of-range value
        TypeError: If the event type is unknown
    """
    state = session.state
    settings = session.settings

    if isinstance(event, PointerMoved):
        state.pointer = (float(event.x), float(event.y))
    elif isinstance(event, ButtonPressed):
        _set_button(state, event.button, True)
    elif isinstance(event, ButtonReleased):
        _set_button(state, event.button, False)
    elif isinstance(event, ResetRequested):
        state.should_reset = True
    elif isinstance(event, GridResized):
        settings.grid_size = config.validate_grid_size(event.size)
        session.brush_tool.fit_to_grid(settings.grid_size)
        state.should_reset = True
        logger.debug("Grid size changed to %d", settings.grid_size)
    elif isinstance(event, BrushChanged):
        if event.kind is not None:
            session.brush_tool.set_kind(BrushKind(event.kind))
        if event.size is not None:
            session.brush_tool.set_brush_size(event.size, settings.grid_size)
    elif isinstance(event, ColorsChanged):
        if event.primary is not None:
            settings.primary_color = config.validate_color(event.primary)
        if event.secondary is not None:
            settings.secondary_color = config.validate_color(event.secondary)
    elif isinstance(event, ViewportResized):
        if event.width <= 0 or event.height <= 0:
            raise ValueError(f"Viewport must be positive, got {event.width}x{event.height}")
        state.viewport = (float(event.width), float(event.height))
        state.should_calc_positions = True
    elif isinstance(event, ExitRequested):
        state.should_exit = True
    elif isinstance(event, DisplayChanged):
        if event.display_fps is not None:
            settings.display_fps = bool(event.display_fps)
        if event.dark_mode is not None:
            settings.dark_mode = bool(event.dark_mode)
    else:
        raise TypeError(f"Unknown input event: {event!r}")


# ========================================================================
# Update / Render
# ========================================================================

def tick(session: CanvasSession) -> None:
    """
    Advances the session by one frame.

    Resets are applied first so painting and rendering never see a grid
    that is about to change shape. While a button is held, the brush is
    stamped once per tick at the pointer's cell.
    """
    state = session.state
    settings = session.settings
    grid = session.grid

    if state.should_reset:
        state.should_reset = False
        state.should_calc_positions = True
        grid.reset(settings.grid_size)

    if state.should_calc_positions or grid.positions_dirty:
        state.should_calc_positions = False
        grid.update_positions(session.edge_length)

    if state.drawing or state.erasing:
        color = settings.primary_color if state.drawing else settings.secondary_color
        for x, y in session.brush_tool.cells_at(session.pointer_cell(), grid.size):
            grid.set(x, y, color)


def render(session: CanvasSession) -> Frame:
    """
    Builds the draw list for the current frame without mutating the session.

    Call after tick(), which keeps cell positions up to date.
    """
    renderer = session.renderer
    return Frame(
        background=config.BACKGROUND_COLOR,
        rects=tuple(renderer.compact(session.grid)),
        overlay=tuple(renderer.brush_preview(session.brush, session.state.pointer, session.edge_length)),
    )
