"""
Canvas Window for Pixel Canvas using Dear PyGui.
Translates Dear PyGui input into core events and draws rendered frames.
"""

from __future__ import annotations

import logging
from typing import Tuple

import dearpygui.dearpygui as dpg

from pixelcanvas.core.engine import CanvasSession, handle_input
from pixelcanvas.core.geometry import screen_to_world, world_to_screen
from pixelcanvas.core.models import (
    ButtonPressed,
    ButtonReleased,
    ExitRequested,
    Frame,
    MouseButton,
    PointerMoved,
    ResetRequested,
    ViewportResized,
)
from pixelcanvas.ui.settings_panel import SettingsPanel

logger = logging.getLogger(__name__)

_BUTTONS = {
    dpg.mvMouseButton_Left: MouseButton.LEFT,
    dpg.mvMouseButton_Right: MouseButton.RIGHT,
}


class CanvasWindow:
    """
    Full-viewport drawlist plus the settings panel.

    Per frame, call poll() before tick() and draw() after render().
    """

    def __init__(self, session: CanvasSession, tag: str = "canvas"):
        """
        Initialize the canvas window.

        Args:
            session: Session receiving input events
            tag: Unique tag for the Dear PyGui drawlist
        """
        self.session = session
        self.tag = tag
        self.width, self.height = (int(v) for v in session.state.viewport)

        self.panel = SettingsPanel(session, self.emit)
        self._fps_tag = "fps_window"
        self._fps_text_tag = "fps_text"

    def emit(self, event) -> None:
        """Forwards one input event to the session."""
        handle_input(self.session, event)

    def build(self) -> None:
        """Creates windows and input handlers. Call after dpg.create_context()."""
        with dpg.window(tag="main_window", no_scrollbar=True):
            dpg.add_drawlist(tag=self.tag, width=self.width, height=self.height)

        # Drawlist fills the primary window edge to edge
        with dpg.theme() as canvas_theme:
            with dpg.theme_component(dpg.mvAll):
                dpg.add_theme_style(dpg.mvStyleVar_WindowPadding, 0, 0)
        dpg.bind_item_theme("main_window", canvas_theme)

        with dpg.window(tag=self._fps_tag, no_title_bar=True, no_resize=True, no_move=True,
                        no_background=True, no_inputs=True, autosize=True):
            dpg.add_text("", tag=self._fps_text_tag)

        self.panel.build()

        with dpg.handler_registry():
            for button in _BUTTONS:
                dpg.add_mouse_click_handler(button=button, callback=self._on_mouse_press, user_data=button)
                dpg.add_mouse_release_handler(button=button, callback=self._on_mouse_release, user_data=button)
            dpg.add_key_press_handler(dpg.mvKey_R, callback=lambda: self.emit(ResetRequested()))
            dpg.add_key_press_handler(dpg.mvKey_Q, callback=lambda: self.emit(ExitRequested()))

    # ========================================================================
    # Input
    # ========================================================================

    def _on_mouse_press(self, sender, app_data, user_data):
        # Don't paint through the settings windows
        if self.panel.is_hovered():
            return
        self.emit(ButtonPressed(_BUTTONS[user_data]))

    def _on_mouse_release(self, sender, app_data, user_data):
        self.emit(ButtonReleased(_BUTTONS[user_data]))

    def _get_local_mouse_pos(self) -> Tuple[float, float]:
        """Mouse position relative to the drawlist."""
        mouse_pos = dpg.get_mouse_pos(local=False)
        canvas_rect = dpg.get_item_rect_min(self.tag)
        if not canvas_rect:
            return (0.0, 0.0)
        return (mouse_pos[0] - canvas_rect[0], mouse_pos[1] - canvas_rect[1])

    def poll(self) -> None:
        """Emits viewport and pointer events for this frame."""
        width = dpg.get_viewport_client_width()
        height = dpg.get_viewport_client_height()
        if width > 0 and height > 0 and (width, height) != (self.width, self.height):
            self.width, self.height = width, height
            dpg.configure_item(self.tag, width=width, height=height)
            self.emit(ViewportResized(width, height))
            logger.debug("Viewport resized to %dx%d", width, height)

        local_x, local_y = self._get_local_mouse_pos()
        self.emit(PointerMoved(*screen_to_world(local_x, local_y, self.width, self.height)))

    # ========================================================================
    # Rendering
    # ========================================================================

    def _draw_rect(self, x: float, y: float, width: float, height: float, color) -> None:
        center_x, center_y = world_to_screen(x, y, self.width, self.height)
        half_w = width / 2.0
        half_h = height / 2.0
        dpg.draw_rectangle(
            (center_x - half_w, center_y - half_h),
            (center_x + half_w, center_y + half_h),
            color=(0, 0, 0, 0),
            fill=color,
            thickness=0,
            parent=self.tag,
        )

    def draw(self, frame: Frame) -> None:
        """Replaces the drawlist contents with one rendered frame."""
        dpg.delete_item(self.tag, children_only=True)

        dpg.draw_rectangle((0, 0), (self.width, self.height), color=frame.background,
                           fill=frame.background, parent=self.tag)

        for rect in frame.rects:
            self._draw_rect(rect.x, rect.y, rect.width, rect.height, rect.color)

        for rect in frame.overlay:
            self._draw_rect(rect.x, rect.y, rect.width, rect.height, rect.color)

        self._update_fps()

    def _update_fps(self) -> None:
        visible = self.session.settings.display_fps
        dpg.configure_item(self._fps_tag, show=visible)
        if visible:
            dpg.set_value(self._fps_text_tag, str(round(dpg.get_frame_rate())))
            dpg.set_item_pos(self._fps_tag, [self.width - 50, 0])
