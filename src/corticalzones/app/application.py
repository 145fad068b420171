from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import logging
import sys
import os

from corticalzones import config

logger = logging.getLogger(__name__)


def create_app() -> QApplication:
    """Create and configure the QApplication instance (or reuse the running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(config.ORG_ID)
    QCoreApplication.setApplicationName(config.APP_ID)

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    else:
        logger.debug("Reusing existing QApplication instance.")

    app.setApplicationDisplayName(config.VISIBLE_APP_NAME)
    return app
