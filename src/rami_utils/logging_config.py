"""Logging setup scoped to the ``rami_utils`` logger hierarchy.

The root logger is left to the host application. Handlers installed here are
tagged so repeated calls replace them instead of stacking duplicates.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER_NAME = "rami_utils"
LOG_FILE_NAME = "rami_utils.log"
HANDLER_NAME = "rami_utils.handler"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: int = logging.INFO,
    propagate: bool = True,
) -> logging.Logger:
    """Attach handlers to the package logger.

    Args:
        log_dir: Optional directory to save ``rami_utils.log`` in
        log_level: Level for the package logger (default: INFO)
        propagate: Also pass records on to the host's handlers

    Returns:
        The configured ``rami_utils`` logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    for handler in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / LOG_FILE_NAME))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(log_level)
    logger.propagate = propagate
    return logger
