import queue
import threading
from typing import Optional, Protocol, TextIO

from simply_logger.log_entry import LogEntry, to_utc


class LogSink(Protocol):
    """
    Destination for log entries.

    A sink may print entries, buffer them, or forward them to another
    subsystem. It is called synchronously from the logging call, so
    anything it raises reaches the caller.
    """

    def __call__(self, entry: LogEntry) -> None:
        ...


def format_timestamp(entry: LogEntry) -> str:
    return to_utc(entry.timestamp).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_entry(entry: LogEntry) -> str:
    # timestamp: [level]:[module]:[fn] (task) message
    return (
        f"{format_timestamp(entry)}: "
        f"[{int(entry.log_level)}]:[{entry.mod_name or '-'}]:[{entry.fn_name or '-'}] "
        f"({entry.task or '-'}) {entry.friendly_message}"
    )


def console_sink(entry: LogEntry) -> None:
    """Default sink: one formatted line on standard output."""
    print(format_entry(entry))


class OutputSinkRegistry:
    """
    Holds the single active sink.

    Replacing the sink is a plain reference swap; passing None restores
    the default.
    """

    def __init__(self, default: LogSink = console_sink):
        self._default = default
        self._active: LogSink = default

    @property
    def active(self) -> LogSink:
        return self._active

    @property
    def is_default(self) -> bool:
        return self._active is self._default

    def set(self, sink: Optional[LogSink]) -> None:
        self._active = self._default if sink is None else sink

    def reset(self) -> None:
        self._active = self._default

    def emit(self, entry: LogEntry) -> None:
        self._active(entry)


class MemorySink:
    """Keeps every entry it receives, in order."""

    def __init__(self):
        self.entries: list[LogEntry] = []

    def __call__(self, entry: LogEntry) -> None:
        self.entries.append(entry)

    def __len__(self) -> int:
        return len(self.entries)

    def clear(self) -> None:
        self.entries.clear()


class QueueSink:
    """
    Forwards log entries to a consumer (e.g. a GUI) via a thread-safe queue.

    This sink performs no formatting and never blocks. A full queue
    raises queue.Full to the logging caller.
    """

    def __init__(self, target_queue: queue.Queue):
        self._queue = target_queue

    def __call__(self, entry: LogEntry) -> None:
        self._queue.put_nowait(entry)


class StreamSink:
    """
    Writes formatted entries to a text stream, one line per entry.

    The stream is owned by the caller and is never closed here.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._lock = threading.Lock()

    def __call__(self, entry: LogEntry) -> None:
        with self._lock:
            self._stream.write(format_entry(entry) + "\n")
            self._stream.flush()
