"""
Logging Configuration
Sets up the application logger and keeps chatty libraries quiet.
"""
import logging
import sys
from typing import Optional, Union

# Third-party loggers capped at WARNING regardless of the app level
QUIET_LOGGERS = ("pyqtgraph",)


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'listcarousel' logger namespace.

    Args:
        level: Logging level, numeric (logging.DEBUG) or by name ("debug").
        log_file: Optional path to also write the log to.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("listcarousel")
    logger.setLevel(level)

    # Calling this twice must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info(f"Logging initialized at {logging.getLevelName(logger.level)}.")
    return logger
