"""Load expected-message patterns from a YAML expectations file."""

from __future__ import annotations

import dataclasses
import re
from pathlib import Path
from typing import Any

import yaml
from yaml import YAMLError

from expected_logs.errors import ExpectationConfigError
from expected_logs.patterns import MATCH_ALL

DEFAULT_LEVEL = "error"


@dataclasses.dataclass
class ExpectationConfig:
    """Level and compiled patterns read from an expectations file."""

    level: str = DEFAULT_LEVEL
    patterns: list[re.Pattern[str]] = dataclasses.field(default_factory=lambda: [MATCH_ALL])
    source: str = "<defaults>"


def _compile(raw: list[Any], source: str) -> list[re.Pattern[str]]:
    compiled: list[re.Pattern[str]] = []
    for position, item in enumerate(raw, start=1):
        if not isinstance(item, str):
            raise ExpectationConfigError(source, f"pattern #{position} must be a string, got {type(item).__name__}")
        try:
            compiled.append(re.compile(item))
        except re.error as exc:
            raise ExpectationConfigError(source, f"pattern #{position} '{item}' is invalid ({exc})") from exc
    return compiled


def parse_expectations(document: Any, source: str = "<string>") -> ExpectationConfig:
    """Validate an already-parsed YAML document."""
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ExpectationConfigError(source, "expected a mapping at the top level")

    unknown = sorted(str(key) for key in document if key not in {"level", "patterns"})
    if unknown:
        raise ExpectationConfigError(source, f"unknown keys {unknown}")

    level = document.get("level", DEFAULT_LEVEL)
    if not isinstance(level, str) or not level:
        raise ExpectationConfigError(source, "level must be a non-empty string")

    raw_patterns = document.get("patterns")
    if raw_patterns is None:
        patterns = [MATCH_ALL]
    elif isinstance(raw_patterns, list):
        patterns = _compile(raw_patterns, source)
    else:
        raise ExpectationConfigError(source, "patterns must be a list of strings")

    return ExpectationConfig(level=level, patterns=patterns, source=source)


def load_expectations(path: str | Path) -> ExpectationConfig:
    """Read and validate the expectations file at ``path``."""
    source = str(path)
    try:
        with open(path, encoding="utf-8") as handle:
            document = yaml.safe_load(handle)
    except OSError as exc:
        raise ExpectationConfigError(source, f"failed to read ({exc})") from exc
    except YAMLError as exc:
        raise ExpectationConfigError(source, f"invalid YAML ({exc})") from exc

    return parse_expectations(document, source)
