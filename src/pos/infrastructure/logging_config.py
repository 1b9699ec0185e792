"""Configure application logging using the Python standard library.

Log records go to stderr so they never mix with command output on
stdout.  An optional rotating file handler keeps a longer history.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def level_for_verbosity(verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(level: int = logging.WARNING, log_file: Path | None = None) -> None:
    """Configure the ``pos`` logger with a stderr handler and optional file.

    Args:
        level: Logging level for console output.
        log_file: If given, records at INFO and above are also appended
            here, rotating at 1 MB with three backups.
    """
    logger = logging.getLogger("pos")
    logger.setLevel(logging.DEBUG)
    # Remove handlers left by a previous call (e.g. repeated CLI invocations in tests)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(min(level, logging.INFO))
        logger.addHandler(file_handler)
