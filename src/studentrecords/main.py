"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the RecordStore (Model) with the seed records.
2. Instantiates the Main Window (View).
3. Hands both to the RecordController, the only piece that knows about both.
"""
import logging

from studentrecords.application import create_app
from studentrecords.config import LOG_FILE, LOG_LEVEL, SEED_RECORDS
from studentrecords.controller.record_controller import RecordController
from studentrecords.logging_config import setup_logging
from studentrecords.model.store import RecordStore
from studentrecords.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    store = RecordStore(seed=SEED_RECORDS)

    # 4. Initialize the View and wire it to the Model
    window = MainWindow()
    controller = RecordController(store, window)
    window.show()

    logger.info(f"Application started with {store.count()} records.")

    # 5. Start Event Loop
    exit_code = app.exec()
    logger.debug(f"Event loop finished ({exit_code}); {controller.store.count()} records discarded.")
    return exit_code
