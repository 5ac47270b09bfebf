"""
Logging configuration module.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

# Module-level flag to prevent re-initialization
_LOGGING_INITIALIZED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """
    Configure the root logger once.

    Args:
        level: Console log level name
        log_file: Optional path of a rotating DEBUG log file
    """
    global _LOGGING_INITIALIZED  # pylint: disable=global-statement

    if _LOGGING_INITIALIZED:
        logging.debug("Logging already initialized, skipping setup")
        return

    log_formatter = logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if root_logger.handlers:
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                path, maxBytes=5 * 1024 * 1024, backupCount=2, encoding="utf-8"
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(log_formatter)
            root_logger.addHandler(file_handler)
        except Exception as e:  # pylint: disable=broad-exception-caught
            print(f"Failed to setup log file {path}: {e}", file=sys.stderr)

    _LOGGING_INITIALIZED = True
    logging.info("Logging initialized successfully.")

