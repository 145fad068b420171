from __future__ import annotations

import pytest
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QApplication

from corticalzones import config
from corticalzones.app.ui.main_window import MainWindow
from corticalzones.app.ui.palette import COLOR_TAG_RGB, color_for
from corticalzones.app.ui.zone_card import ZoneCard
from corticalzones.app.ui.zones_view import BoundaryCaption, CorticalZonesView
from corticalzones.model.zones import CORTICAL_ZONES, ColorTag, ZoneCatalog, ZoneRecord


class TestRenderedDocument:
    def test_six_cards(self, zones_view: CorticalZonesView) -> None:
        assert len(zones_view.cards()) == 6
        assert len(zones_view.findChildren(ZoneCard)) == 6

    def test_abbreviations_top_to_bottom(self, zones_view: CorticalZonesView) -> None:
        assert zones_view.rendered_abbreviations() == ["MZ", "CP", "SP", "IZ", "SVZ", "VZ"]

    def test_cards_match_records(self, zones_view: CorticalZonesView) -> None:
        for card, zone in zip(zones_view.cards(), CORTICAL_ZONES, strict=True):
            assert card.zone is zone
            assert card.name_label.text() == zone.name
            assert card.description_label.text() == zone.description
            assert card.description_label.text()
            assert card.badge.text() == zone.abbreviation

    def test_structure_order(self, zones_view: CorticalZonesView) -> None:
        assert zones_view.structure() == (
            ("header", config.HEADER_TITLE),
            ("caption", "Pia Mater (Outer Surface)"),
            ("card", "Marginal Zone"),
            ("card", "Cortical Plate"),
            ("card", "Subplate"),
            ("card", "Intermediate Zone"),
            ("card", "Subventricular Zone"),
            ("card", "Ventricular Zone"),
            ("caption", "Ventricle / Cerebrospinal Fluid (Innermost)"),
        )

    def test_each_caption_once(self, zones_view: CorticalZonesView) -> None:
        captions = [c.text() for c in zones_view.findChildren(BoundaryCaption)]
        assert captions.count(config.OUTER_BOUNDARY_CAPTION) == 1
        assert captions.count(config.INNER_BOUNDARY_CAPTION) == 1

    def test_header_texts(self, zones_view: CorticalZonesView) -> None:
        assert zones_view.header.title_label.text() == "Architectural Zones of Cortical Development"
        assert zones_view.header.subtitle_label.text().startswith("A visual guide")

    def test_description_policy_keeps_height_for_width(self, zones_view: CorticalZonesView) -> None:
        for card in zones_view.cards():
            assert card.description_label.wordWrap()
            assert card.description_label.sizePolicy().hasHeightForWidth()
            assert card.hasHeightForWidth()

    def test_header_uses_page_margin_once(self, zones_view: CorticalZonesView) -> None:
        margins = zones_view.header.layout().contentsMargins()
        assert (margins.left(), margins.right()) == (0, 0)
        assert (margins.top(), margins.bottom()) == (config.PAGE_MARGIN, config.PAGE_MARGIN)


class TestDescriptionsAreNotClipped:
    @pytest.mark.parametrize("width", [260, 320, 360, 400, 480, 900])
    def test_label_gets_its_wrapped_height(self, qapp: QApplication, width: int) -> None:
        window = MainWindow()
        window.resize(width, 700)
        window.show()
        for _ in range(10):
            qapp.processEvents()

        try:
            clipped = [
                (card.zone.abbreviation, card.description_label.height(),
                 card.description_label.heightForWidth(card.description_label.width()))
                for card in window.zones_view.cards()
                if card.description_label.height()
                < card.description_label.heightForWidth(card.description_label.width())
            ]
            assert clipped == []
        finally:
            window.close()
            window.deleteLater()


class TestRerender:
    def test_same_catalog_is_idempotent(self, zones_view: CorticalZonesView) -> None:
        before = zones_view.structure()
        zones_view.show_catalog(CORTICAL_ZONES)
        zones_view.show_catalog(CORTICAL_ZONES)
        assert zones_view.structure() == before
        assert len(zones_view.findChildren(ZoneCard)) == 6
        assert len(zones_view.findChildren(BoundaryCaption)) == 2

    def test_other_catalog(self, qapp) -> None:
        catalog = ZoneCatalog([ZoneRecord("Only Zone", "OZ", "Single layer.", ColorTag.GRAY)])
        view = CorticalZonesView(catalog)
        assert view.rendered_abbreviations() == ["OZ"]
        assert view.structure()[1] == ("caption", config.OUTER_BOUNDARY_CAPTION)
        assert view.structure()[-1] == ("caption", config.INNER_BOUNDARY_CAPTION)
        view.deleteLater()


class TestZoneCard:
    def test_badge_size(self, zones_view: CorticalZonesView) -> None:
        badge = zones_view.cards()[0].badge
        assert badge.width() == config.BADGE_SIZE
        assert badge.height() == config.BADGE_SIZE

    def test_card_paints_without_error(self, zones_view: CorticalZonesView) -> None:
        pixmap = zones_view.cards()[2].grab()
        assert not pixmap.isNull()

    def test_palette_covers_every_tag(self) -> None:
        assert set(COLOR_TAG_RGB) == set(ColorTag)

    def test_color_for_returns_independent_color(self) -> None:
        color = color_for(ColorTag.BLUE)
        color.setAlphaF(0.15)
        assert color_for(ColorTag.BLUE) == QColor(0, 122, 255)
