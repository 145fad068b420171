"""
Run with: python -m corticalzones
"""
from __future__ import annotations

import sys

from corticalzones.app.application import create_app
from corticalzones.app.ui.main_window import MainWindow
from corticalzones.logging_config import setup_logging


def main() -> int:
    """Main entry point for the application."""
    setup_logging()

    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
