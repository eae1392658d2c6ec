"""Tests for logging setup."""

import logging
from pathlib import Path

from rich.logging import RichHandler

from thriftgen.core.config.settings import LoggingSettings
from thriftgen.core.logger.logger import get_console, get_logger, setup_logging


class TestLogging:
    """Tests for setup_logging and get_logger."""

    def test_rich_handler(self) -> None:
        """Test that Rich output installs a RichHandler."""
        setup_logging(LoggingSettings(level="DEBUG", use_rich=True))

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in root.handlers)

    def test_plain_handler_and_file(self, temp_dir: Path) -> None:
        """Test plain stream output with a log file."""
        log_file = temp_dir / "logs" / "thriftgen.log"
        setup_logging(LoggingSettings(level="INFO", use_rich=False, file=log_file))

        get_logger("thriftgen.test").info("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert not any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)
        assert "hello from test" in log_file.read_text(encoding="utf-8")

        for handler in list(logging.getLogger().handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
        setup_logging(LoggingSettings(use_rich=True))

    def test_get_logger_is_cached(self) -> None:
        """Test that the same logger is returned."""
        assert get_logger("thriftgen.cached") is get_logger("thriftgen.cached")

    def test_get_console(self) -> None:
        """Test console access."""
        assert get_console() is get_console()
