"""
Settings Panel Module
Dear PyGui windows for canvas actions and brush / color / grid settings.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

import dearpygui.dearpygui as dpg

from pixelcanvas import config
from pixelcanvas.core.engine import CanvasSession
from pixelcanvas.core.models import (
    RGB,
    BrushChanged,
    BrushKind,
    ColorsChanged,
    DisplayChanged,
    ExitRequested,
    GridResized,
    ResetRequested,
)

logger = logging.getLogger(__name__)


def color_from_widget(value: Sequence[float]) -> RGB:
    """Converts a Dear PyGui color value (0..255 floats, maybe RGBA) to RGB."""
    r, g, b = (max(0, min(255, int(round(c)))) for c in value[:3])
    return (r, g, b)


class SettingsPanel:
    """
    "Actions" and "Settings" windows.

    Widget callbacks are turned into input events and passed to `emit`,
    so the panel never mutates the session directly.
    """

    ACTIONS_TAG = "actions_window"
    SETTINGS_TAG = "settings_window"

    def __init__(self, session: CanvasSession, emit: Callable):
        """
        Initialize the panel.

        Args:
            session: Session whose settings seed the widgets
            emit: Callable receiving one input event
        """
        self.session = session
        self.emit = emit

        self._brush_size_tag = "brush_size_slider"
        self._square_btn_tag = "brush_square_btn"
        self._circle_btn_tag = "brush_circle_btn"
        self._light_btn_tag = "theme_light_btn"
        self._dark_btn_tag = "theme_dark_btn"

        self._light_theme = None

    @property
    def window_tags(self):
        return (self.ACTIONS_TAG, self.SETTINGS_TAG)

    def build(self) -> None:
        """Creates both windows. Call after dpg.create_context()."""
        settings = self.session.settings
        brush = self.session.brush

        with dpg.window(label="Actions", tag=self.ACTIONS_TAG, pos=(10, 10),
                        autosize=True, no_close=True):
            dpg.add_button(label="Reset Canvas", callback=lambda: self.emit(ResetRequested()))
            dpg.add_button(label="Exit", callback=lambda: self.emit(ExitRequested()))

        with dpg.window(label="Settings", tag=self.SETTINGS_TAG, pos=(10, 90),
                        width=260, autosize=True, no_close=True):
            dpg.add_text("Primary Color")
            dpg.add_color_edit(default_value=(*settings.primary_color, 255), no_alpha=True,
                               callback=self._on_primary_color)

            dpg.add_text("Secondary Color")
            dpg.add_color_edit(default_value=(*settings.secondary_color, 255), no_alpha=True,
                               callback=self._on_secondary_color)

            dpg.add_text("Grid Size")
            dpg.add_slider_int(default_value=settings.grid_size,
                               min_value=config.MIN_GRID_SIZE, max_value=config.MAX_GRID_SIZE,
                               callback=self._on_grid_size)

            dpg.add_text("Brush Size")
            dpg.add_slider_int(tag=self._brush_size_tag, default_value=brush.size,
                               min_value=1, max_value=settings.grid_size,
                               callback=self._on_brush_size)

            dpg.add_text("Brush Type")
            with dpg.group(horizontal=True):
                dpg.add_button(label="Square", tag=self._square_btn_tag,
                               callback=lambda: self._on_brush_kind(BrushKind.SQUARE))
                dpg.add_button(label="Circle", tag=self._circle_btn_tag,
                               callback=lambda: self._on_brush_kind(BrushKind.CIRCLE))

            dpg.add_checkbox(label="Display FPS", default_value=settings.display_fps,
                             callback=lambda s, a: self.emit(DisplayChanged(display_fps=a)))

            dpg.add_text("Theme")
            with dpg.group(horizontal=True):
                dpg.add_button(label="Light", tag=self._light_btn_tag,
                               callback=lambda: self._on_theme(dark_mode=False))
                dpg.add_button(label="Dark", tag=self._dark_btn_tag,
                               callback=lambda: self._on_theme(dark_mode=True))

        self._light_theme = self._create_light_theme()
        self._sync_brush_buttons()
        self._apply_theme()

    def is_hovered(self) -> bool:
        """True if the pointer is over one of the panel windows."""
        return any(dpg.is_item_hovered(tag) for tag in self.window_tags)

    # ========================================================================
    # Callbacks
    # ========================================================================

    def _on_primary_color(self, sender, app_data):
        self.emit(ColorsChanged(primary=color_from_widget(dpg.get_value(sender))))

    def _on_secondary_color(self, sender, app_data):
        self.emit(ColorsChanged(secondary=color_from_widget(dpg.get_value(sender))))

    def _on_grid_size(self, sender, app_data):
        self.emit(GridResized(int(app_data)))

        # Brush size range follows the grid size
        grid_size = self.session.settings.grid_size
        dpg.configure_item(self._brush_size_tag, max_value=grid_size)
        dpg.set_value(self._brush_size_tag, self.session.brush.size)

    def _on_brush_size(self, sender, app_data):
        self.emit(BrushChanged(size=int(app_data)))

    def _on_brush_kind(self, kind: BrushKind):
        self.emit(BrushChanged(kind=kind))
        self._sync_brush_buttons()

    def _on_theme(self, dark_mode: bool):
        self.emit(DisplayChanged(dark_mode=dark_mode))
        self._apply_theme()

    # ========================================================================
    # Widget state
    # ========================================================================

    def _sync_brush_buttons(self) -> None:
        """Disables the button of the active brush kind."""
        kind = self.session.brush.kind
        dpg.configure_item(self._square_btn_tag, enabled=kind is not BrushKind.SQUARE)
        dpg.configure_item(self._circle_btn_tag, enabled=kind is not BrushKind.CIRCLE)

    def _apply_theme(self) -> None:
        dark_mode = self.session.settings.dark_mode
        # Dear PyGui's default theme is the dark one
        dpg.bind_theme(0 if dark_mode else self._light_theme)
        dpg.configure_item(self._light_btn_tag, enabled=dark_mode)
        dpg.configure_item(self._dark_btn_tag, enabled=not dark_mode)

    @staticmethod
    def _create_light_theme():
        with dpg.theme() as theme:
            with dpg.theme_component(dpg.mvAll):
                dpg.add_theme_color(dpg.mvThemeCol_WindowBg, (240, 240, 240, 255))
                dpg.add_theme_color(dpg.mvThemeCol_TitleBg, (220, 220, 220, 255))
                dpg.add_theme_color(dpg.mvThemeCol_TitleBgActive, (200, 200, 200, 255))
                dpg.add_theme_color(dpg.mvThemeCol_Text, (20, 20, 20, 255))
                dpg.add_theme_color(dpg.mvThemeCol_TextDisabled, (140, 140, 140, 255))
                dpg.add_theme_color(dpg.mvThemeCol_FrameBg, (255, 255, 255, 255))
                dpg.add_theme_color(dpg.mvThemeCol_Button, (210, 210, 210, 255))
                dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, (190, 190, 190, 255))
                dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, (170, 170, 170, 255))
                dpg.add_theme_color(dpg.mvThemeCol_SliderGrab, (120, 120, 120, 255))
                dpg.add_theme_color(dpg.mvThemeCol_CheckMark, (40, 40, 40, 255))
        return theme
