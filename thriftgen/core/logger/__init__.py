"""Logging module."""

from thriftgen.core.logger.logger import get_console, get_logger, setup_logging

__all__ = ["get_logger", "get_console", "setup_logging"]
