"""
Main Application Window
=======================
The single window of the application: a vertical scroll area holding the
zones document, plus a small File menu.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow, QScrollArea, QFileDialog, QMessageBox, QFrame

from corticalzones import config
from corticalzones.app.snapshot import save_snapshot
from corticalzones.app.ui.zones_view import CorticalZonesView
from corticalzones.model.zones import ZoneCatalog, CORTICAL_ZONES

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, catalog: ZoneCatalog = CORTICAL_ZONES) -> None:
        super().__init__()
        self.setWindowTitle(config.VISIBLE_APP_NAME)
        self.resize(*config.WINDOW_SIZE)

        # --- CENTRAL: scrollable zones document ---
        self.zones_view = CorticalZonesView(catalog)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll_area.setWidget(self.zones_view)
        self.setCentralWidget(self.scroll_area)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        logger.info(f"Main window ready with {len(catalog)} zones.")

    def _create_actions(self) -> None:
        self.act_export = QAction("Export Image…", self)
        self.act_export.setShortcut(QKeySequence("Ctrl+E"))
        self.act_export.triggered.connect(self.on_export_image)

        self.act_quit = QAction("Quit", self)
        self.act_quit.setShortcut(QKeySequence.StandardKey.Quit)
        self.act_quit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("File")
        file_menu.addAction(self.act_export)
        file_menu.addSeparator()
        file_menu.addAction(self.act_quit)

    @Slot()
    def on_export_image(self) -> None:
        path, _ = QFileDialog.getSaveFileName(
            self,
            "Export Image",
            "cortical_zones.png",
            "PNG Image (*.png);;JPEG Image (*.jpg *.jpeg);;All Files (*)",
        )
        if not path:
            return

        try:
            save_snapshot(self.zones_view, path)
        except (OSError, ValueError) as e:
            logger.exception(f"Failed to export image: {e}")
            QMessageBox.warning(self, "Export Failed", str(e))
            return

        self.statusBar().showMessage(f"Image saved: {path}", 5000)
