"""Tests for the package's logging helpers."""

import io
import logging

from expected_logs import logging_utils


def test_logging_manager_sets_level():
    """setup should configure the logger with the requested verbosity."""

    manager = logging_utils.LoggingManager("level_test")

    manager.setup(verbose=False)
    assert manager.logger.level == logging.INFO

    manager.setup(verbose=True)
    assert manager.logger.level == logging.DEBUG


def test_logging_manager_does_not_propagate():
    assert logging_utils.LoggingManager("propagate_test").logger.propagate is False


def test_logging_manager_formats_debug_arguments():
    """debug should accept formatting args like the stdlib logger."""

    manager = logging_utils.LoggingManager("arg_formatting")
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))

    manager.logger.handlers = [handler]
    manager.logger.setLevel(logging.DEBUG)

    manager.debug("level=%s patterns=%s", "error", 3)

    handler.flush()
    assert "level=error patterns=3" in stream.getvalue()


def test_logging_manager_writes_log_file(tmp_path):
    log_file = tmp_path / "expected_logs.log"
    manager = logging_utils.LoggingManager("file_test")

    manager.setup(verbose=False, log_file=str(log_file))
    manager.log("replayed %s lines", 4)
    for handler in manager.logger.handlers:
        handler.flush()

    assert len(manager.logger.handlers) == 2
    assert "[INFO] replayed 4 lines" in log_file.read_text(encoding="utf-8")
    for handler in manager.logger.handlers:
        handler.close()


def test_logging_manager_falls_back_to_console(tmp_path):
    """An unopenable log file leaves console logging in place."""

    manager = logging_utils.LoggingManager("fallback_test")

    manager.setup(verbose=False, log_file=str(tmp_path))

    assert len(manager.logger.handlers) == 1
    assert isinstance(manager.logger.handlers[0], logging.StreamHandler)
