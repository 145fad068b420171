from __future__ import annotations

import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from corticalzones.app.ui.zones_view import CorticalZonesView


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def zones_view(qapp: QApplication) -> CorticalZonesView:
    view = CorticalZonesView()
    view.resize(420, view.sizeHint().height())
    yield view
    view.deleteLater()
