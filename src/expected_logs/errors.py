"""Exceptions raised by the expected-logs helpers."""

from __future__ import annotations


class ExpectedLogsError(Exception):
    """Base class for every error raised by this package."""


class InterceptorError(ExpectedLogsError):
    """The target cannot be intercepted or restored."""


class AlreadyRestoredError(InterceptorError):
    """An install handle was consumed more than once."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Interception of '{level}' was already restored")
        self.level = level


class UnknownCountError(ExpectedLogsError, ValueError):
    """A counter key did not name any known counter."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Unknown counter key: {key!r}")
        self.key = key


class ExpectationConfigError(ExpectedLogsError):
    """An expectations file could not be loaded."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
