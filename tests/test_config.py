"""Tests for loading YAML expectations files."""

from pathlib import Path

import pytest

from expected_logs.config import ExpectationConfig, load_expectations, parse_expectations
from expected_logs.errors import ExpectationConfigError
from expected_logs.interceptor import LogInterceptor
from expected_logs.patterns import MATCH_ALL
from tests.helpers import RecordingChannel, RecordingLogger

DATA_DIR = Path(__file__).resolve().parent / "data"


def _write(tmp_path, text: str) -> Path:
    path = tmp_path / "expectations.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_expectations_reads_level_and_patterns():
    config = load_expectations(DATA_DIR / "expectations.yml")

    assert config.level == "error"
    assert [pattern.pattern for pattern in config.patterns] == ["connection refused", r"retry \d+ of \d+"]
    assert config.source.endswith("expectations.yml")


def test_empty_file_uses_defaults(tmp_path):
    config = load_expectations(_write(tmp_path, ""))

    assert config.level == "error"
    assert config.patterns == [MATCH_ALL]


@pytest.mark.parametrize(
    ("text", "reason"),
    [
        ("- just\n- a list\n", "mapping"),
        ("level: 3\n", "level"),
        ("patterns: nope\n", "list of strings"),
        ("patterns:\n  - 7\n", "must be a string"),
        ("patterns:\n  - '(unclosed'\n", "invalid"),
        ("levels: error\n", "unknown keys"),
        ("level: [unclosed\n", "invalid YAML"),
    ],
)
def test_invalid_files_are_rejected(tmp_path, text, reason):
    path = _write(tmp_path, text)

    with pytest.raises(ExpectationConfigError) as excinfo:
        load_expectations(path)

    assert reason in excinfo.value.reason
    assert str(path) in str(excinfo.value)


def test_missing_file_is_rejected(tmp_path):
    with pytest.raises(ExpectationConfigError, match="failed to read"):
        load_expectations(tmp_path / "absent.yml")


def test_parse_expectations_accepts_none():
    assert parse_expectations(None) == ExpectationConfig(source="<string>")


def test_interceptor_from_config():
    config = parse_expectations({"level": "warning", "patterns": ["^low disk"]})
    channel = RecordingChannel()

    interceptor = LogInterceptor.from_config(config, target=channel, logger=RecordingLogger())
    channel.warning("low disk on /")
    channel.error("untouched")

    assert interceptor.expected() is True
    assert channel.output == [("error", "untouched", {})]
