"""Intercept a logging operation and check its messages against expected patterns."""

from expected_logs.errors import (
    AlreadyRestoredError,
    ExpectationConfigError,
    ExpectedLogsError,
    InterceptorError,
    UnknownCountError,
)
from expected_logs.interceptor import InterceptHandle, LogInterceptor, install, uninstall
from expected_logs.types import CountKind, Counts, InterceptedMessage

__all__ = [
    "AlreadyRestoredError",
    "CountKind",
    "Counts",
    "ExpectationConfigError",
    "ExpectedLogsError",
    "InterceptHandle",
    "InterceptedMessage",
    "InterceptorError",
    "LogInterceptor",
    "UnknownCountError",
    "install",
    "uninstall",
]
