"""pytest fixture that hands out interceptors and restores them at teardown.

Enable it from a ``conftest.py``::

    pytest_plugins = ["expected_logs.pytest_plugin"]

    def test_warns_once(log_interceptor):
        interceptor = log_interceptor("warning", [r"disk \\d+% full"])
        check_disks()
        assert interceptor.expected("handled", 1)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from expected_logs.interceptor import LogInterceptor


@pytest.fixture
def log_interceptor() -> Iterator[Callable[..., LogInterceptor]]:
    """Factory fixture with the :class:`LogInterceptor` constructor signature."""
    created: list[LogInterceptor] = []

    def _factory(*args: Any, **kwargs: Any) -> LogInterceptor:
        interceptor = LogInterceptor(*args, **kwargs)
        created.append(interceptor)
        return interceptor

    yield _factory

    # Most recent first so stacked interceptors on one target unwind cleanly.
    for interceptor in reversed(created):
        if not interceptor.restored:
            interceptor.restore()
