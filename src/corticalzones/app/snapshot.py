"""
Snapshot Export
===============
Renders a widget into an image file. Used by File -> Export Image... to save
the complete zones document, including the parts scrolled out of view.
"""
from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtWidgets import QWidget

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES: tuple[str, ...] = (".png", ".jpg", ".jpeg", ".bmp")


def save_snapshot(widget: QWidget, path: str | Path) -> Path:
    """
    Render `widget` at its current size and write it to `path`.

    The image format follows the file suffix.

    Raises:
        ValueError: If the suffix is not a supported image format.
        OSError: If the image could not be rendered or written.
    """
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported image format '{path.suffix}'. Use one of: {', '.join(SUPPORTED_SUFFIXES)}"
        )

    logger.info(f"Saving snapshot to: {path}")
    pixmap = widget.grab()
    if pixmap.isNull():
        raise OSError(f"Widget {widget.objectName() or type(widget).__name__} rendered an empty image.")

    if not pixmap.save(str(path)):
        raise OSError(f"Could not write image to '{path}'.")

    logger.info(f"Snapshot saved ({pixmap.width()}x{pixmap.height()} px).")
    return path
