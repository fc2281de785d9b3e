"""Stream handler configuration shared by the CLI and scripts."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING", stream=None) -> logging.Logger:
    """Attach a single stderr handler to the package logger and set its level."""

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'.")
        level = resolved
    package_logger = logging.getLogger("unit_converter")
    for handler in list(package_logger.handlers):
        if getattr(handler, "_unit_converter", False):
            package_logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._unit_converter = True
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger
