"""Tests for counter kinds and tallies."""

import pytest

from expected_logs.errors import UnknownCountError
from expected_logs.types import CountKind, Counts, InterceptedMessage


@pytest.mark.parametrize("key", ["", None])
def test_empty_key_selects_all(key):
    assert CountKind.from_key(key) is CountKind.ALL


def test_known_keys_map_to_kinds():
    assert CountKind.from_key("unhandled") is CountKind.UNHANDLED
    assert CountKind.from_key("errors") is CountKind.ERRORS


def test_unknown_key_raises():
    with pytest.raises(UnknownCountError) as excinfo:
        CountKind.from_key("bogusKey")

    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.key == "bogusKey"


def test_counts_default_thresholds():
    counts = Counts(expected=3, handled=2, matches=2, unhandled=1)

    assert counts.errors == 3
    assert counts.value(CountKind.MATCHES) == 2
    assert counts.default_threshold(CountKind.HANDLED) == 3
    assert counts.default_threshold(CountKind.UNHANDLED) == 0


def test_counts_has_no_value_for_aggregate():
    with pytest.raises(UnknownCountError):
        Counts(expected=1).value(CountKind.ALL)


def test_intercepted_message_handled_flag():
    assert InterceptedMessage("x", 0).handled is True
    assert InterceptedMessage("x", None).handled is False
