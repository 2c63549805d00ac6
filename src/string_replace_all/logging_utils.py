"""Custom logging utilities for the string-replace-all command line."""

import logging
import sys
import time
from logging import FileHandler
from pathlib import Path


class _UTCMicrosecondFormatter(logging.Formatter):
    """Base formatter rendering UTC timestamps with microseconds and a 'Z' suffix."""

    converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the time with 6-digit microseconds and a 'Z' for UTC."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt, ct) if datefmt else time.strftime(self.default_time_format, ct)
        microseconds = int((record.created - int(record.created)) * 1_000_000)
        return f"{s}.{microseconds:06d}Z"


# Console Log Formatter
class ConsoleFormatter(_UTCMicrosecondFormatter):
    """A compact formatter for console output."""

    def __init__(self, version: str) -> None:
        """
        Initialize the formatter with the application version.

        Args:
            version: The string-replace-all version.

        """
        super().__init__(
            fmt=f"%(asctime)s | string-replace-all - {version} | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )


# File Log Formatter
class FileFormatter(_UTCMicrosecondFormatter):
    """A detailed formatter for debug log files."""

    def __init__(self) -> None:
        """Initialize the detailed file formatter."""
        super().__init__(
            fmt="%(asctime)s | %(name)-28s | %(funcName)-20s:%(lineno)-4d | %(levelname)-8s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )


def setup_logging(version: str, *, debug: bool = False, log_file: Path | None = None) -> None:
    """
    Configure the root logger.

    Console messages go to stderr so they never mix with text written to
    stdout. The level is WARNING by default and DEBUG if debug=True. When
    debug=True and `log_file` is given, a detailed DEBUG log is also written
    to that file.

    Args:
        version: The application version, included in console logs.
        debug: If True, lowers the console level to DEBUG and enables file logging.
        log_file: Optional path of the debug log file.

    """
    root_logger = logging.getLogger()
    # Clear any handlers created by basicConfig or previous setups
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    level = logging.DEBUG if debug else logging.WARNING
    root_logger.setLevel(level)

    # --- Console Handler ---
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(ConsoleFormatter(version))
    root_logger.addHandler(console_handler)

    if debug and log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)

            # --- File Handler (DEBUG) ---
            file_handler = FileHandler(log_file, mode="w", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(FileFormatter())
            root_logger.addHandler(file_handler)

            logging.getLogger().debug("Debug mode enabled. Detailed logs will be written to %s", log_file)
        except OSError:
            # If creating the log file fails, continue with console logging only.
            logging.getLogger().exception("Failed to create debug log file. Continuing with console logging only.")
