"""Shared dataclasses and enums for the interceptor."""

from __future__ import annotations

import dataclasses
import enum

from expected_logs.errors import UnknownCountError


class CountKind(enum.Enum):
    ERRORS = "errors"
    HANDLED = "handled"
    MATCHES = "matches"
    UNHANDLED = "unhandled"
    ALL = ""

    @classmethod
    def from_key(cls, key: str | None) -> CountKind:
        """Map a query key to a counter kind; empty or ``None`` means ``ALL``."""
        if not key:
            return cls.ALL
        try:
            return cls(key)
        except ValueError:
            raise UnknownCountError(key) from None


COUNT_LABELS: dict[CountKind, str] = {
    CountKind.ERRORS: "Intercepted messages",
    CountKind.HANDLED: "Handled messages",
    CountKind.MATCHES: "Pattern matches",
    CountKind.UNHANDLED: "Unhandled messages",
}


@dataclasses.dataclass
class Counts:
    """Tally of intercepted calls."""

    expected: int
    handled: int = 0
    matches: int = 0
    unhandled: int = 0

    @property
    def errors(self) -> int:
        return self.handled + self.unhandled

    def value(self, kind: CountKind) -> int:
        """Return the counter selected by ``kind``."""
        if kind is CountKind.ERRORS:
            return self.errors
        if kind is CountKind.HANDLED:
            return self.handled
        if kind is CountKind.MATCHES:
            return self.matches
        if kind is CountKind.UNHANDLED:
            return self.unhandled
        raise UnknownCountError(kind)

    def default_threshold(self, kind: CountKind) -> int:
        """Threshold used when a check does not supply one."""
        return 0 if kind is CountKind.UNHANDLED else self.expected


@dataclasses.dataclass(frozen=True)
class InterceptedMessage:
    """One intercepted call after placeholder resolution."""

    text: str
    pattern_index: int | None

    @property
    def handled(self) -> bool:
        return self.pattern_index is not None
