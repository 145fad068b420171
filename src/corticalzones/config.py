"""
Configuration & Path Management
===============================
This module serves as the central registry for global constants, texts and
packaged resources.

Why is this file needed?
------------------------
1. Abstraction: It keeps window sizes, card metrics and captions out of the
   widget code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find resources (icons) when the app is frozen into an .exe.

Exports:
    HEADER_ICON_PATH (str): Absolute path to the header icon.
    LOG_LEVEL (int): Logging level taken from CORTICALZONES_LOG_LEVEL (INFO if unset
        or unknown).
    REJECTED_LOG_LEVEL (str | None): The unknown level name, if one was given.
    LOG_FILE (str | None): Optional log file taken from CORTICALZONES_LOG_FILE.
"""
import logging
import os
import sys
from importlib.resources import files
from typing import Optional

# ------------------------------------------------------------------------------
# Application identity
# ------------------------------------------------------------------------------
ORG_ID: str = "cortical-zones"
APP_ID: str = "cortical-zones"
VISIBLE_APP_NAME: str = "Cortical Zones"

WINDOW_SIZE: tuple[int, int] = (480, 860)

# ------------------------------------------------------------------------------
# Texts
# ------------------------------------------------------------------------------
HEADER_TITLE: str = "Architectural Zones of Cortical Development"
HEADER_SUBTITLE: str = (
    "A visual guide to the transient layers of the developing cerebral wall, "
    "arranged from outermost to innermost."
)
OUTER_BOUNDARY_CAPTION: str = "Pia Mater (Outer Surface)"
INNER_BOUNDARY_CAPTION: str = "Ventricle / Cerebrospinal Fluid (Innermost)"

# ------------------------------------------------------------------------------
# Layout metrics (px)
# ------------------------------------------------------------------------------
STACK_SPACING: int = 12
HEADER_SPACING: int = 5
HEADER_ICON_SIZE: int = 40
PAGE_MARGIN: int = 16

CARD_CORNER_RADIUS: float = 15.0
CARD_BORDER_WIDTH: float = 2.0
CARD_FILL_OPACITY: float = 0.15
CARD_PADDING: int = 16
CARD_SPACING: int = 16
CARD_TEXT_SPACING: int = 5

BADGE_SIZE: int = 50
BADGE_FONT_SIZE: int = 20


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a packaged resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, "corticalzones", "resources", relative_path)

    return str(files("corticalzones.resources").joinpath(relative_path))


def _level_from_env(name: str, default: int = logging.INFO) -> tuple[int, Optional[str]]:
    """
    Read a logging level name from the environment.

    Returns the level and, when the variable holds an unknown name, that name.
    Unknown names fall back to `default`; setup_logging() reports them once
    handlers exist.
    """
    value = os.environ.get(name, "").strip().upper()
    if not value:
        return default, None
    level = logging.getLevelName(value)
    if not isinstance(level, int):
        return default, value
    return level, None


# Global Constants
HEADER_ICON_PATH: str = get_resource_path("brain.svg")
LOG_LEVEL, REJECTED_LOG_LEVEL = _level_from_env("CORTICALZONES_LOG_LEVEL")
LOG_FILE: Optional[str] = os.environ.get("CORTICALZONES_LOG_FILE") or None
