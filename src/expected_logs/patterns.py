"""Pattern compilation and message resolution."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

MATCH_ALL = re.compile(".*")

DIRECTIVE = re.compile(r"%(?:%|[#0 +\-]*\d*(?:\.\d+)?[diouxXeEfFgGcrsa])")

PatternLike = str | re.Pattern[str]


def compile_patterns(patterns: Iterable[PatternLike] | None) -> list[re.Pattern[str]]:
    """Return compiled patterns, defaulting to a single catch-all."""
    if patterns is None:
        return [MATCH_ALL]

    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
        elif isinstance(pattern, str):
            compiled.append(re.compile(pattern))
        else:
            raise TypeError(f"Expected a string or compiled pattern, got {type(pattern).__name__}")
    return compiled


def resolve_placeholders(message: object, args: Sequence[object]) -> str:
    """Fill ``%`` directives left to right from ``args``.

    ``%s`` always consumes the next argument, becoming an empty string once
    the arguments run out. Other directives (``%d``, ``%r``, ``%5.1f``, ...)
    and ``%%`` are only rendered when arguments were supplied, as
    :mod:`logging` does. A value that does not fit its directive is rendered
    with ``str()``. Surplus arguments are ignored.
    """
    remaining = iter(args)
    formatting = bool(args)

    def _substitute(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == "%s":
            return str(next(remaining, ""))
        if not formatting:
            return token
        if token == "%%":
            return "%"
        try:
            value = next(remaining)
        except StopIteration:
            return ""
        try:
            return token % (value,)
        except (TypeError, ValueError):
            return str(value)

    return DIRECTIVE.sub(_substitute, str(message))


def first_match(patterns: Sequence[re.Pattern[str]], message: str) -> int | None:
    """Return the index of the first pattern found in ``message``."""
    for index, pattern in enumerate(patterns):
        if pattern.search(message):
            return index
    return None
