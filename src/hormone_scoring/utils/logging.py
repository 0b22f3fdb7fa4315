"""Logging for the hormone_scoring package.

Modules log through ``get_logger(__name__)``. Handlers are only ever
attached to the package logger, so embedding the engine in another
application leaves that application's root logging alone.
"""

import logging
import sys
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "hormone_scoring"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: dict[str, Any] | None = None, *, verbose: bool = False) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the package logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        config: Optional keys level (DEBUG, INFO, WARNING, ERROR), format, file
        verbose: Force DEBUG regardless of the configured level

    Returns:
        The package logger
    """
    config = config or {}
    level_name = (config.get("level") or "INFO").upper()
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    log_file = config.get("file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(config.get("format") or DEFAULT_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module; names outside the package are nested under it."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
