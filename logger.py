"""
Logging configuration for the Jalali date picker.

Library modules ask for a child logger with get_logger(); only the
application entry point attaches handlers through setup_logging().
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "jalali_picker"

_LOG_PATH = os.path.join(os.path.expanduser("~"), ".jalali-picker.log")


def get_logger(name: str) -> logging.Logger:
    """Return a child of the application logger."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(log_level=logging.INFO, log_file=None):
    """
    Set up application logging with a rotating file handler and the console.

    Args:
        log_level: The logging level (default: INFO)
        log_file: Path of the log file (default: ~/.jalali-picker.log)

    Returns:
        logging.Logger: Configured application logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Prevent adding handlers multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 1MB max, 3 backup files
    file_handler = RotatingFileHandler(
        log_file or _LOG_PATH,
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding='utf-8'
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
