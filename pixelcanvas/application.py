"""
Main Application Module
Manages the Dear PyGui lifecycle and drives the canvas frame loop.
"""

from __future__ import annotations

import logging
from typing import Optional

import dearpygui.dearpygui as dpg

from pixelcanvas import config
from pixelcanvas.core.engine import CanvasSession, CanvasState, render, tick
from pixelcanvas.ui.canvas_window import CanvasWindow

logger = logging.getLogger(__name__)


class PixelCanvasApp:
    """Main application class for Pixel Canvas."""

    def __init__(self, session: Optional[CanvasSession] = None):
        width, height = config.WINDOW_SIZE
        self.session = session or CanvasSession(
            state=CanvasState(viewport=(float(width), float(height)))
        )
        self.window: Optional[CanvasWindow] = None

    def setup(self) -> None:
        """Creates the Dear PyGui context, viewport and windows."""
        width, height = config.WINDOW_SIZE

        dpg.create_context()

        self.window = CanvasWindow(self.session)
        self.window.build()

        dpg.create_viewport(title=config.APP_TITLE, width=width, height=height)
        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

        logger.info("Canvas ready: %dx%d grid", self.session.settings.grid_size,
                    self.session.settings.grid_size)

    def run(self) -> int:
        """
        Runs the frame loop until the window closes or exit is requested.

        Returns:
            Process exit code
        """
        if self.window is None:
            raise RuntimeError("setup() must be called before run()")

        try:
            while dpg.is_dearpygui_running():
                self.window.poll()
                tick(self.session)

                if self.session.state.should_exit:
                    logger.info("Exit requested")
                    break

                self.window.draw(render(self.session))
                dpg.render_dearpygui_frame()
        finally:
            dpg.destroy_context()

        return 0
