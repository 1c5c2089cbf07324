"""
Application Initialization
==========================
This module wires the dashboard together and starts the Qt event loop.

It acts as the "Dependency Injection" root. It:
1. Configures logging and loads the navigation tuning.
2. Instantiates the global Store (which owns the navigation engine).
3. Instantiates the Main Window, passing the store in.
4. Starts the frame loop and the event loop.
"""
from __future__ import annotations

import logging
import os
import sys

from teleopdash.app.application import create_app
from teleopdash.app.state import Store
from teleopdash.config import CONFIG_PATH_ENV, load_config
from teleopdash.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    setup_logging()

    config = load_config(os.environ.get(CONFIG_PATH_ENV))

    app = create_app()

    # Import after the QApplication exists and QT_API is set
    from teleopdash.app.ui.main_window import MainWindow

    store = Store(config)
    win = MainWindow(store)
    win.show()
    win.start()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
