"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and sizes scattered throughout
   the view code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (carousel images) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    IMAGES_PATH (str): Absolute path to the carousel images.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/listcarousel/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
APP_NAME: str = "List Carousel"

# Use logging.DEBUG to see selection and query changes during development
LOG_LEVEL: int = logging.INFO
LOG_FILE: Optional[str] = None

ASSETS_PATH: str = get_resource_path("assets")
IMAGES_PATH: str = os.path.join(ASSETS_PATH, "images")
IMAGE_EXTENSION: str = ".png"

# Number of character lines in the statistics summary and chart
TOP_CHARACTERS: int = 3

# Sizes in pixels
CAROUSEL_HEIGHT: int = 200
CAROUSEL_PAGE_RATIO: float = 0.9
THUMBNAIL_SIZE: int = 50
FLOATING_BUTTON_SIZE: int = 50

# Delay after the last scroll event before the carousel reports its page
SCROLL_SETTLE_MS: int = 150


def check_assets() -> bool:
    """Warn if the images directory is missing. Call once logging is set up."""
    if not os.path.isdir(IMAGES_PATH):
        logger.warning(f"Images path not found at {IMAGES_PATH}, using placeholder images")
        return False
    return True
