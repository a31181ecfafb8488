"""
Main entry point for Pixel Canvas (Dear PyGui version)
Interactive pixel-art canvas with square and circle brushes.
"""

import logging
import sys

from pixelcanvas import config
from pixelcanvas.application import PixelCanvasApp
from pixelcanvas.logging_config import setup_logging

logger = logging.getLogger("pixelcanvas.main")


def main():
    """Main entry point."""
    setup_logging("DEBUG" if config.DEBUG else config.LOG_LEVEL)

    logger.info("Starting %s", config.APP_TITLE)
    logger.info("Controls: left click paints, right click erases, R resets, Q quits")

    app = PixelCanvasApp()
    app.setup()

    sys.exit(app.run())


if __name__ == "__main__":
    main()
