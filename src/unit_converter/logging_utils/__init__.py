"""Logging setup for the command-line entry points."""

from .handlers import LOG_FORMAT, configure_logging

__all__ = ["LOG_FORMAT", "configure_logging"]
