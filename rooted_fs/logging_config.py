"""Logging setup for the ``rfs`` command."""

import logging
import sys
from typing import Optional

LOGGER_NAME = "rooted_fs"
# stderr sits next to command output, so keep it short like other CLI tools.
CONSOLE_FORMAT = "rfs: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """Send ``rooted_fs`` log records to stderr, or append them to *log_file*.

    Unknown level names fall back to ``WARNING``.  Calling it again replaces
    the previous handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logger.setLevel(numeric_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(FILE_FORMAT))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    logger.addHandler(handler)
    return logger
