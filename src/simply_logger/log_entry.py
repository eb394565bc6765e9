from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union
import traceback

from simply_logger.log_level import LogLevel


Message = Union[str, BaseException]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Convert an aware datetime to UTC. Naive datetimes are rejected."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"timestamp must be timezone-aware: {value.isoformat()}")
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class LogEntry:
    """
    Atomic record of a single logged event.

    Entries are immutable once built. Sinks receive them as-is and
    must not expect to modify them.
    """

    log_level: LogLevel
    # Severity of the event.

    app_name: str
    # Application identity taken from the logger, never from the caller.

    mod_name: str
    # Module that produced the entry (may be empty).

    fn_name: str
    # Function that produced the entry (may be empty).

    timestamp: datetime
    # UTC time the entry was built.

    friendly_message: str
    # Brief human-readable message.

    detail_message: str = ""
    # Longer detail, e.g. the traceback of a logged exception.

    task: Optional[str] = None
    # Step or workflow being executed.

    duration_ms: Optional[float] = None
    # Only set on entries augmented with an end timestamp.

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        # Enums and datetimes serialize as plain values
        d["log_level"] = int(self.log_level)
        for name, value in d.items():
            if isinstance(value, datetime):
                d[name] = value.isoformat()
        return d


@dataclass(frozen=True)
class LogEntryWithDuration(LogEntry):
    """
    A LogEntry closed with an end timestamp.

    duration_ms is end_timestamp - timestamp in milliseconds and is
    negative when the end precedes the start.
    """

    end_timestamp: Optional[datetime] = None


def build_log_entry(
    log_level: LogLevel,
    app_name: str,
    mod_name: str,
    fn_name: str,
    message: Message,
    detail_message: Optional[str] = None,
    task: Optional[str] = None,
    *,
    timestamp: Optional[datetime] = None,
) -> LogEntry:
    """
    Build a LogEntry from a message or an exception.

    When message is an exception, friendly_message is its text and
    detail_message defaults to its formatted traceback.
    """
    if isinstance(message, BaseException):
        friendly_message = str(message)
        default_detail = "".join(
            traceback.format_exception(type(message), message, message.__traceback__)
        )
    else:
        friendly_message = str(message)
        default_detail = ""

    return LogEntry(
        log_level=LogLevel(log_level),
        app_name=app_name,
        mod_name=mod_name,
        fn_name=fn_name,
        timestamp=utc_now() if timestamp is None else to_utc(timestamp),
        friendly_message=friendly_message,
        detail_message=detail_message or default_detail,
        task=task,
    )


def calc_duration_ms(start: datetime, end: datetime) -> float:
    return (end - start) / timedelta(milliseconds=1)


def add_duration(entry: LogEntry, end_timestamp: datetime) -> LogEntryWithDuration:
    """
    Close an entry with an end timestamp.

    Every field of the original entry is carried over verbatim, with
    timestamps expressed in UTC. Naive timestamps raise ValueError.
    """
    values = {f.name: getattr(entry, f.name) for f in fields(LogEntry)}
    end_timestamp = to_utc(end_timestamp)
    values["timestamp"] = to_utc(entry.timestamp)
    values["duration_ms"] = calc_duration_ms(values["timestamp"], end_timestamp)
    return LogEntryWithDuration(**values, end_timestamp=end_timestamp)
