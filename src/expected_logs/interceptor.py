"""Intercept one output operation of a logging object and tally its messages.

A :class:`LogInterceptor` swaps ``target.<level>`` for a recording wrapper.
Each call is resolved (``%s`` placeholders filled from the positional
arguments), matched against the expected patterns in order, and either
suppressed (handled) or forwarded to the original operation (unhandled) so
that surprises stay visible in the test report.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Callable, Sequence
from typing import Any

from expected_logs.config import ExpectationConfig
from expected_logs.errors import AlreadyRestoredError, InterceptorError, UnknownCountError
from expected_logs.logging_utils import DEFAULT_LOGGER, LoggingManager
from expected_logs.patterns import PatternLike, compile_patterns, first_match, resolve_placeholders
from expected_logs.types import CountKind, Counts, InterceptedMessage

_MISSING = object()


@dataclasses.dataclass
class InterceptHandle:
    """Ownership of one installed replacement.

    ``own_binding`` keeps whatever the target stored in its own ``__dict__``
    under ``level`` before installation (``_MISSING`` when the operation came
    from the class), so uninstalling leaves the target exactly as it was.
    """

    target: Any
    level: str
    original: Callable[..., Any]
    own_binding: Any = _MISSING
    active: bool = True


def install(target: Any, level: str, replacement: Callable[..., Any]) -> InterceptHandle:
    """Bind ``replacement`` as ``target.<level>`` and return the handle."""
    original = getattr(target, level, None)
    if not callable(original):
        raise InterceptorError(f"{type(target).__name__} has no callable '{level}' operation")

    own_binding = getattr(target, "__dict__", {}).get(level, _MISSING)
    setattr(target, level, replacement)
    return InterceptHandle(target=target, level=level, original=original, own_binding=own_binding)


def uninstall(handle: InterceptHandle) -> None:
    """Put the original operation back; a handle can only be consumed once."""
    if not handle.active:
        raise AlreadyRestoredError(handle.level)

    if handle.own_binding is _MISSING:
        delattr(handle.target, handle.level)
    else:
        setattr(handle.target, handle.level, handle.own_binding)
    handle.active = False


class LogInterceptor:
    """Route ``target.<level>`` through pattern checks for the length of a test."""

    def __init__(
        self,
        level: str = "error",
        patterns: Sequence[PatternLike] | None = None,
        *,
        target: Any = None,
        logger: LoggingManager = DEFAULT_LOGGER,
    ) -> None:
        self.level = level
        self.patterns: list[re.Pattern[str]] = compile_patterns(patterns)
        self.target = logging.getLogger() if target is None else target
        if self.target is getattr(logger, "logger", None):
            raise InterceptorError("Cannot intercept the interceptor's own diagnostic logger")
        self.logger = logger
        self.counts = Counts(expected=len(self.patterns))
        self.messages: list[InterceptedMessage] = []
        self._handle = install(self.target, level, self._intercept)
        self.logger.debug(
            "Intercepting '%s' on %r with %d pattern(s)",
            level,
            self.target,
            len(self.patterns),
        )

    @classmethod
    def from_config(
        cls,
        config: ExpectationConfig,
        *,
        target: Any = None,
        logger: LoggingManager = DEFAULT_LOGGER,
    ) -> LogInterceptor:
        """Build an interceptor from a loaded expectations file."""
        return cls(config.level, config.patterns, target=target, logger=logger)

    @property
    def original(self) -> Callable[..., Any]:
        """The operation that was bound before interception."""
        return self._handle.original

    @property
    def restored(self) -> bool:
        return not self._handle.active

    @property
    def unhandled_messages(self) -> list[str]:
        return [message.text for message in self.messages if not message.handled]

    def _intercept(self, msg: object, *args: object, **kwargs: Any) -> None:
        text = resolve_placeholders(msg, args)
        index = first_match(self.patterns, text)
        self.messages.append(InterceptedMessage(text=text, pattern_index=index))

        if index is not None:
            self.counts.matches += 1
            self.counts.handled += 1
            return

        self.counts.unhandled += 1
        self.logger.debug("Unexpected '%s' message: %s", self.level, text)
        if isinstance(self.target, logging.Logger):
            # Attribute the record to our caller, not to this frame.
            kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
        self._handle.original(text, **kwargs)

    def check(self, kind: CountKind, threshold: int | None = None) -> bool:
        """Compare one counter (or all of them) against a threshold.

        A non-negative ``threshold`` must be met exactly. Without one, every
        counter is compared with the number of patterns except ``UNHANDLED``,
        which must be zero.
        """
        if kind is CountKind.ALL:
            return all(
                self.check(part, threshold)
                for part in (CountKind.ERRORS, CountKind.HANDLED, CountKind.MATCHES, CountKind.UNHANDLED)
            )

        if _is_threshold(threshold):
            wanted = threshold
        else:
            wanted = self.counts.default_threshold(kind)
        return self.counts.value(kind) == wanted

    def expected(
        self,
        key: str | CountKind | None = "",
        threshold: int | None = None,
        *,
        strict: bool = False,
    ) -> bool:
        """Return whether the counter named by ``key`` meets its threshold.

        ``key`` is one of ``"errors"``, ``"handled"``, ``"matches"``,
        ``"unhandled"`` or empty for all four. Unknown keys yield ``False``,
        or raise :class:`UnknownCountError` when ``strict`` is set.
        """
        if isinstance(key, CountKind):
            kind = key
        else:
            try:
                kind = CountKind.from_key(key)
            except UnknownCountError:
                if strict:
                    raise
                self.logger.debug("Unknown counter key %r; treating as unmet", key)
                return False
        return self.check(kind, threshold)

    def restore(self) -> None:
        """Rebind the original operation; raises if already restored."""
        uninstall(self._handle)
        self.logger.debug("Restored '%s' on %r", self.level, self.target)

    def __enter__(self) -> LogInterceptor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self.restored:
            self.restore()


def _is_threshold(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0
