from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel

from corticalzones import config
from corticalzones.app.ui.header import HeaderWidget
from corticalzones.app.ui.palette import SECONDARY_TEXT_COLOR
from corticalzones.app.ui.zone_card import ZoneCard
from corticalzones.model.zones import ZoneCatalog, CORTICAL_ZONES

logger = logging.getLogger(__name__)

BOUNDARY_CAPTION_NAME = "boundaryCaption"


class BoundaryCaption(QLabel):
    """Small semibold caption marking the outer or inner boundary of the wall."""
    def __init__(self, text: str, bottom_margin: int = 0, parent: QWidget | None = None) -> None:
        super().__init__(text, parent)
        self.setObjectName(BOUNDARY_CAPTION_NAME)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setWordWrap(True)
        self.setContentsMargins(0, config.PAGE_MARGIN, 0, bottom_margin)
        self.setStyleSheet(f"color: {SECONDARY_TEXT_COLOR};")

        font = QFont(self.font())
        font.setWeight(QFont.Weight.DemiBold)
        if font.pointSizeF() > 0:
            font.setPointSizeF(font.pointSizeF() * 0.85)
        self.setFont(font)


class CorticalZonesView(QWidget):
    """
    The scrollable document content: header, outer caption, one card per zone,
    inner caption. Rebuilt from scratch on every show_catalog(), so showing the same
    catalog twice gives the same widget tree.
    """
    def __init__(self, catalog: ZoneCatalog = CORTICAL_ZONES, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        self._layout = QVBoxLayout(self)
        self._layout.setSpacing(config.STACK_SPACING)
        self._layout.setContentsMargins(config.PAGE_MARGIN, 0, config.PAGE_MARGIN, 0)

        self.show_catalog(catalog)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def show_catalog(self, catalog: ZoneCatalog) -> None:
        """Replace the current content with the given catalog."""
        self._clear()
        self.catalog = catalog

        self.header = HeaderWidget(self)
        self._layout.addWidget(self.header)
        self._layout.addWidget(BoundaryCaption(config.OUTER_BOUNDARY_CAPTION, parent=self))

        for zone in catalog:
            self._layout.addWidget(ZoneCard(zone, self))

        self._layout.addWidget(
            BoundaryCaption(config.INNER_BOUNDARY_CAPTION, bottom_margin=config.PAGE_MARGIN, parent=self)
        )
        self._layout.addStretch(1)

        logger.debug(f"Rendered {len(catalog)} zone cards: {catalog.abbreviations()}")

    def cards(self) -> list[ZoneCard]:
        """Zone cards in layout (top-to-bottom) order."""
        return [w for w in self._widgets() if isinstance(w, ZoneCard)]

    def rendered_abbreviations(self) -> list[str]:
        return [card.badge.text() for card in self.cards()]

    def structure(self) -> tuple[tuple[str, str], ...]:
        """
        Ordered (kind, text) description of the rendered content.

        kind is one of "header", "caption" or "card"; text is the header title,
        the caption text or the card's zone name.
        """
        items: list[tuple[str, str]] = []
        for widget in self._widgets():
            if isinstance(widget, HeaderWidget):
                items.append(("header", widget.title_label.text()))
            elif isinstance(widget, BoundaryCaption):
                items.append(("caption", widget.text()))
            elif isinstance(widget, ZoneCard):
                items.append(("card", widget.name_label.text()))
        return tuple(items)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _widgets(self) -> list[QWidget]:
        widgets = []
        for i in range(self._layout.count()):
            widget = self._layout.itemAt(i).widget()
            if widget is not None:
                widgets.append(widget)
        return widgets

    def _clear(self) -> None:
        while self._layout.count():
            item = self._layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                # Detach now so findChildren() no longer sees it; Qt frees it later
                widget.setParent(None)
                widget.deleteLater()
