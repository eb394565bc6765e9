from enum import IntEnum


class LogLevel(IntEnum):
    """
    Severity of a log entry.

    Values are stable ordinals so levels compare and sort naturally.
    The default sink renders a level by its integer value.
    """

    DEBUG = 0           # Diagnostic detail (e.g. received acct_id=1 role_id=2345)
    INFORMATIONAL = 1   # Normal operation (e.g. service listening on port 25)
    WARNING = 2         # Unexpected but recoverable (e.g. config value defaulted)
    ERROR = 3           # Operation failed, application continues
    CRITICAL_ERROR = 4  # Application cannot continue

    @property
    def label(self) -> str:
        return self.name

    def __str__(self) -> str:
        return str(self.value)
