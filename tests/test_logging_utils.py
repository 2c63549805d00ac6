"""Tests for the logging utilities module."""

import logging
import sys
import tempfile
import time
import unittest
from pathlib import Path
from unittest.mock import patch

from string_replace_all.logging_utils import ConsoleFormatter, FileFormatter, setup_logging


def _record(msg: str = "Test message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConsoleFormatter(unittest.TestCase):
    """Test suite for ConsoleFormatter class."""

    def test_console_formatter_initialization(self) -> None:
        """1. Initialization: Uses UTC and includes the version in every line."""
        formatter = ConsoleFormatter("1.0.0")

        assert formatter.datefmt == "%Y-%m-%dT%H:%M:%S"
        assert formatter.converter == time.gmtime
        assert "string-replace-all - 1.0.0" in formatter.format(_record())

    def test_console_formatter_format_time_with_microseconds(self) -> None:
        """2. Time Format: Formats time with 6-digit microseconds and 'Z' suffix."""
        formatter = ConsoleFormatter("1.0.0")
        record = _record()
        record.created = 1234567890.123456

        formatted_time = formatter.formatTime(record, formatter.datefmt)

        assert formatted_time == "2009-02-13T23:31:30.123456Z"

    def test_console_formatter_message_format(self) -> None:
        """3. Message Format: Level and message follow the version prefix."""
        formatter = ConsoleFormatter("2.0.0")
        formatted = formatter.format(_record("Hello", logging.WARNING))
        assert formatted.endswith("| string-replace-all - 2.0.0 | WARNING | Hello")


class TestFileFormatter(unittest.TestCase):
    """Test suite for FileFormatter class."""

    def test_file_formatter_includes_location(self) -> None:
        """1. Detail: Includes logger name, level and line number."""
        formatter = FileFormatter()
        formatted = formatter.format(_record("Detailed", logging.DEBUG))

        assert "test" in formatted
        assert "DEBUG" in formatted
        assert ":1 " in formatted
        assert formatted.endswith("Detailed")

    def test_file_formatter_uses_utc(self) -> None:
        """2. Time Format: Timestamps are UTC with a 'Z' suffix."""
        formatter = FileFormatter()
        record = _record()
        record.created = 0.5
        assert formatter.formatTime(record, formatter.datefmt) == "1970-01-01T00:00:00.500000Z"


class TestSetupLogging(unittest.TestCase):
    """Test suite for setup_logging function."""

    def setUp(self) -> None:
        """Save the root logger state."""
        self.root_logger = logging.getLogger()
        self.saved_handlers = self.root_logger.handlers[:]
        self.saved_level = self.root_logger.level

    def tearDown(self) -> None:
        """Restore the root logger state."""
        for handler in self.root_logger.handlers:
            if handler not in self.saved_handlers:
                handler.close()
        self.root_logger.handlers = self.saved_handlers
        self.root_logger.setLevel(self.saved_level)

    def test_setup_logging_default(self) -> None:
        """1. Default: One stderr console handler at WARNING."""
        setup_logging("1.0.0")

        assert self.root_logger.level == logging.WARNING
        assert len(self.root_logger.handlers) == 1
        handler = self.root_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert isinstance(handler.formatter, ConsoleFormatter)

    def test_setup_logging_clears_existing_handlers(self) -> None:
        """2. Idempotent: Re-running setup does not duplicate handlers."""
        setup_logging("1.0.0")
        setup_logging("1.0.0")
        assert len(self.root_logger.handlers) == 1

    def test_setup_logging_debug_without_file(self) -> None:
        """3. Debug: Console handler drops to DEBUG; no file handler without a path."""
        setup_logging("1.0.0", debug=True)

        assert self.root_logger.level == logging.DEBUG
        assert len(self.root_logger.handlers) == 1
        assert self.root_logger.handlers[0].level == logging.DEBUG

    def test_setup_logging_debug_with_file(self) -> None:
        """4. Debug: A detailed file handler is added when a path is given."""
        log_file = self._tmp_path() / "logs" / "debug.log"

        setup_logging("1.0.0", debug=True, log_file=log_file)

        file_handlers = [h for h in self.root_logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert isinstance(file_handlers[0].formatter, FileFormatter)
        assert log_file.exists()

    def test_setup_logging_file_ignored_without_debug(self) -> None:
        """5. Non-debug: A log file path alone does not add a file handler."""
        log_file = self._tmp_path() / "debug.log"
        setup_logging("1.0.0", log_file=log_file)

        assert not any(isinstance(h, logging.FileHandler) for h in self.root_logger.handlers)
        assert not log_file.exists()

    def test_setup_logging_file_creation_failure(self) -> None:
        """6. Resilience: Falls back to console logging if the file cannot be opened."""
        with patch("string_replace_all.logging_utils.FileHandler", side_effect=OSError("denied")), patch.object(logging.Logger, "exception") as mock_exception:
            setup_logging("1.0.0", debug=True, log_file=self._tmp_path() / "debug.log")

        mock_exception.assert_called_once()
        assert "Failed to create debug log file" in mock_exception.call_args.args[0]
        assert len(self.root_logger.handlers) == 1
        assert not isinstance(self.root_logger.handlers[0], logging.FileHandler)

    def _tmp_path(self) -> Path:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        return Path(tmp.name)
