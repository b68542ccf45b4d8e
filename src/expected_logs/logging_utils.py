"""Logging helpers for the expected-logs package."""

from __future__ import annotations

import logging


class LoggingManager:
    """Manage the package's own diagnostic logger."""

    def __init__(self, logger_name: str = "expected_logs") -> None:
        self.logger = logging.getLogger(logger_name)
        self.logger.propagate = False

    def setup(self, verbose: bool, log_file: str | None = None) -> None:
        """Configure logging to the console and, optionally, a file."""
        level = logging.DEBUG if verbose else logging.INFO

        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")

        handlers: list[logging.Handler] = []
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        handlers.append(console)

        if log_file:
            try:
                file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            except OSError as exc:
                self.logger.warning("Cannot open log file %s: %s", log_file, exc)
            else:
                file_handler.setFormatter(formatter)
                handlers.append(file_handler)

        self.logger.handlers.clear()
        for handler in handlers:
            self.logger.addHandler(handler)
        self.logger.setLevel(level)

    def log(self, msg: str, *args: object) -> None:
        """Log an informational message."""
        self.logger.info(msg, *args)

    def debug(self, msg: str, *args: object) -> None:
        """Log a debug message."""
        self.logger.debug(msg, *args)

    def warning(self, msg: str, *args: object) -> None:
        """Log a warning."""
        self.logger.warning(msg, *args)


DEFAULT_LOGGER = LoggingManager()
