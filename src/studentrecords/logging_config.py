"""
Logging Configuration
Sets up the package logger. Modules log through logging.getLogger(__name__),
so everything below 'studentrecords' ends up in the handlers installed here.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "studentrecords"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'studentrecords' logger and returns it.

    Args:
        level: Logging level, either numeric (logging.DEBUG) or a name ("DEBUG").
        log_file: Optional path; the file is overwritten on every start.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Calling setup twice must not duplicate every line
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized (level={logging.getLevelName(level)}).")
    return logger
