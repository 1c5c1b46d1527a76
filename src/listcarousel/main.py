"""
Application Initialization
==========================
This module constructs the model and the view and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the SelectionStore from the catalog.
2. Instantiates the Main Window, handing it the store and the carousel labels.
3. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys

from PySide6.QtWidgets import QApplication

from listcarousel import config
from listcarousel.logging_config import setup_logging
from listcarousel.model.catalog import DEFAULT_CATALOG
from listcarousel.model.state import SelectionStore
from listcarousel.view.main_window import MainWindow

import pyqtgraph as pg

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")


def main() -> int:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)
    config.check_assets()

    # 2. Create the Qt Application
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(config.APP_NAME)

    # 3. Initialize the Data Model
    store = SelectionStore(DEFAULT_CATALOG.groups)

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(store, DEFAULT_CATALOG.labels)
    window.show()
    logging.getLogger(__name__).info(f"Started with {store.group_count} groups")

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
