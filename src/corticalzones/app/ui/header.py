from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont, QIcon
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel

from corticalzones import config
from corticalzones.app.ui.palette import SECONDARY_TEXT_COLOR

logger = logging.getLogger(__name__)


class HeaderWidget(QWidget):
    """Icon, title and subtitle shown above the zone cards."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setSpacing(config.HEADER_SPACING)
        # Horizontal page margin comes from the zones view
        layout.setContentsMargins(0, config.PAGE_MARGIN, 0, config.PAGE_MARGIN)

        self.icon_label = QLabel(self)
        self.icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        pixmap = QIcon(config.HEADER_ICON_PATH).pixmap(config.HEADER_ICON_SIZE, config.HEADER_ICON_SIZE)
        if pixmap.isNull():
            logger.warning(f"Header icon could not be loaded from: {config.HEADER_ICON_PATH}")
            self.icon_label.hide()
        else:
            self.icon_label.setPixmap(pixmap)

        self.title_label = QLabel(config.HEADER_TITLE, self)
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.title_label.setWordWrap(True)
        title_font = QFont(self.title_label.font())
        title_font.setBold(True)
        if title_font.pointSizeF() > 0:
            title_font.setPointSizeF(title_font.pointSizeF() * 1.5)
        self.title_label.setFont(title_font)

        self.subtitle_label = QLabel(config.HEADER_SUBTITLE, self)
        self.subtitle_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.subtitle_label.setWordWrap(True)
        self.subtitle_label.setStyleSheet(f"color: {SECONDARY_TEXT_COLOR}; font-size: 11px;")

        layout.addWidget(self.icon_label)
        layout.addWidget(self.title_label)
        layout.addWidget(self.subtitle_label)
