from dataclasses import FrozenInstanceError, replace
from datetime import datetime, timedelta, timezone

import pytest

from simply_logger.log_entry import (
    LogEntryWithDuration,
    add_duration,
    build_log_entry,
    calc_duration_ms,
)
from simply_logger.log_level import LogLevel


START = datetime(2020, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_levels_are_ordered() -> None:
    assert LogLevel.DEBUG < LogLevel.INFORMATIONAL < LogLevel.WARNING < LogLevel.ERROR < LogLevel.CRITICAL_ERROR
    assert [int(level) for level in LogLevel] == [0, 1, 2, 3, 4]
    assert str(LogLevel.INFORMATIONAL) == "1"
    assert LogLevel.CRITICAL_ERROR.label == "CRITICAL_ERROR"


def test_build_entry_from_string() -> None:
    entry = build_log_entry(LogLevel.INFORMATIONAL, "APP", "mod", "fn()", "hello")
    assert entry.friendly_message == "hello"
    assert entry.detail_message == ""
    assert entry.task is None
    assert entry.timestamp.tzinfo is timezone.utc


def test_build_entry_from_unraised_exception() -> None:
    entry = build_log_entry(LogLevel.ERROR, "APP", "mod", "fn()", KeyError("missing"))
    assert entry.friendly_message == "'missing'"
    assert entry.detail_message == "KeyError: 'missing'\n"


def test_empty_detail_falls_back_to_traceback() -> None:
    entry = build_log_entry(LogLevel.ERROR, "APP", "mod", "fn()", ValueError("boom"), "")
    assert entry.detail_message == "ValueError: boom\n"


def test_entry_is_immutable() -> None:
    entry = build_log_entry(LogLevel.DEBUG, "APP", "mod", "fn()", "x")
    with pytest.raises(FrozenInstanceError):
        entry.friendly_message = "changed"


def test_add_duration() -> None:
    entry = build_log_entry(LogLevel.DEBUG, "APP", "mod", "fn()", "x", timestamp=START)
    closed = add_duration(entry, START + timedelta(milliseconds=1500))

    assert isinstance(closed, LogEntryWithDuration)
    assert closed.duration_ms == 1500
    assert closed.end_timestamp == START + timedelta(milliseconds=1500)
    assert closed.timestamp == START
    assert closed.friendly_message == "x"


def test_add_duration_negative_when_end_precedes_start() -> None:
    entry = build_log_entry(LogLevel.DEBUG, "APP", "mod", "fn()", "x", timestamp=START)
    closed = add_duration(entry, START - timedelta(milliseconds=250))
    assert closed.duration_ms == -250
    assert calc_duration_ms(START, START) == 0


def test_to_dict_is_plain() -> None:
    entry = build_log_entry(LogLevel.WARNING, "APP", "mod", "fn()", "x", task="T", timestamp=START)
    d = add_duration(entry, START + timedelta(seconds=1)).to_dict()
    assert d["log_level"] == 2
    assert d["timestamp"] == "2020-01-01T12:00:00+00:00"
    assert d["end_timestamp"] == "2020-01-01T12:00:01+00:00"
    assert d["duration_ms"] == 1000
    assert d["task"] == "T"


def test_build_entry_converts_offset_timestamp_to_utc() -> None:
    local = datetime(2020, 1, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    entry = build_log_entry(LogLevel.DEBUG, "APP", "mod", "fn()", "x", timestamp=local)
    assert entry.timestamp.utcoffset() == timedelta(0)
    assert entry.timestamp == START


def test_build_entry_rejects_naive_timestamp() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        build_log_entry(LogLevel.DEBUG, "APP", "mod", "fn()", "x", timestamp=datetime(2020, 1, 1))


def test_add_duration_rejects_naive_timestamps() -> None:
    entry = build_log_entry(LogLevel.DEBUG, "APP", "mod", "fn()", "x", timestamp=START)
    with pytest.raises(ValueError, match="timezone-aware"):
        add_duration(entry, datetime(2020, 1, 1, 12, 0, 1))

    naive_entry = replace(entry, timestamp=datetime(2020, 1, 1, 12, 0, 0))
    with pytest.raises(ValueError, match="timezone-aware"):
        add_duration(naive_entry, START)


def test_add_duration_mixed_offsets() -> None:
    entry = build_log_entry(LogLevel.DEBUG, "APP", "mod", "fn()", "x", timestamp=START)
    end = datetime(2020, 1, 1, 7, 0, 2, tzinfo=timezone(timedelta(hours=-5)))
    closed = add_duration(entry, end)
    assert closed.duration_ms == 2000
    assert closed.end_timestamp.utcoffset() == timedelta(0)
