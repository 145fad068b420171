from __future__ import annotations

from PySide6.QtGui import QColor

from corticalzones.model.zones import ColorTag

# RGB values of the system palette the cards were designed against
COLOR_TAG_RGB: dict[ColorTag, tuple[int, int, int]] = {
    ColorTag.BLUE: (0, 122, 255),
    ColorTag.PURPLE: (175, 82, 222),
    ColorTag.ORANGE: (255, 149, 0),
    ColorTag.GRAY: (142, 142, 147),
    ColorTag.GREEN: (52, 199, 89),
    ColorTag.DARK_GREEN: (51, 153, 51),
}

SECONDARY_TEXT_COLOR: str = "gray"


def color_for(tag: ColorTag) -> QColor:
    """Return a fresh QColor for the given tag (callers may change its alpha)."""
    return QColor(*COLOR_TAG_RGB[tag])
