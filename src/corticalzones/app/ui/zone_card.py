from __future__ import annotations

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QPainter, QPen, QColor, QFont, QLinearGradient
from PySide6.QtWidgets import QWidget, QFrame, QHBoxLayout, QVBoxLayout, QLabel, QSizePolicy

from corticalzones import config
from corticalzones.app.ui.palette import color_for, SECONDARY_TEXT_COLOR
from corticalzones.model.zones import ZoneRecord


class AbbreviationBadge(QWidget):
    """Circular badge with the zone abbreviation over a vertical color gradient."""
    def __init__(self, text: str, color: QColor, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._text = text
        self._color = QColor(color)
        self.setFixedSize(config.BADGE_SIZE, config.BADGE_SIZE)

    def text(self) -> str:
        return self._text

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        rect = QRectF(self.rect())
        gradient = QLinearGradient(rect.topLeft(), rect.bottomLeft())
        gradient.setColorAt(0.0, self._color.lighter(125))
        gradient.setColorAt(1.0, self._color)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(gradient)
        painter.drawEllipse(rect)

        font = QFont(self.font())
        font.setPixelSize(config.BADGE_FONT_SIZE)
        font.setWeight(QFont.Weight.Black)
        painter.setFont(font)
        painter.setPen(QColor("white"))
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self._text)
        painter.end()


class ZoneCard(QFrame):
    """
    Rounded card for one zone.

    Layout: name (bold) and wrapped description on the left, abbreviation badge
    on the right. Background is the zone color at low opacity with a solid border.
    """
    def __init__(self, zone: ZoneRecord, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.zone = zone
        self._color = color_for(zone.color_tag)
        self.setObjectName(f"zoneCard-{zone.id}")

        row = QHBoxLayout(self)
        pad = config.CARD_PADDING
        row.setContentsMargins(pad, pad, pad, pad)
        row.setSpacing(config.CARD_SPACING)

        text_column = QVBoxLayout()
        text_column.setSpacing(config.CARD_TEXT_SPACING)

        self.name_label = QLabel(zone.name, self)
        name_font = QFont(self.name_label.font())
        name_font.setBold(True)
        if name_font.pointSizeF() > 0:
            name_font.setPointSizeF(name_font.pointSizeF() * 1.15)
        self.name_label.setFont(name_font)

        self.description_label = QLabel(zone.description, self)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(f"color: {SECONDARY_TEXT_COLOR};")
        # Grow vertically instead of eliding long descriptions. A fresh policy drops the
        # height-for-width flag that setWordWrap() sets, so it is restored explicitly.
        policy = QSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Minimum)
        policy.setHeightForWidth(True)
        self.description_label.setSizePolicy(policy)

        text_column.addWidget(self.name_label)
        text_column.addWidget(self.description_label)

        self.badge = AbbreviationBadge(zone.abbreviation, self._color, self)

        row.addLayout(text_column, 1)
        row.addWidget(self.badge, 0, Qt.AlignmentFlag.AlignVCenter)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        # Keep the stroke inside the widget rect
        inset = config.CARD_BORDER_WIDTH / 2
        rect = QRectF(self.rect()).adjusted(inset, inset, -inset, -inset)

        fill = QColor(self._color)
        fill.setAlphaF(config.CARD_FILL_OPACITY)

        painter.setBrush(fill)
        painter.setPen(QPen(self._color, config.CARD_BORDER_WIDTH))
        painter.drawRoundedRect(rect, config.CARD_CORNER_RADIUS, config.CARD_CORNER_RADIUS)
        painter.end()
