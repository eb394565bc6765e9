"""simply_logger

A small, embeddable logging facility.

Entries carry the application, module and function that produced them
and are routed synchronously to one replaceable output sink.
"""

from simply_logger.config import LoggerConfig
from simply_logger.environment import EnvironmentInfo, detect_environment
from simply_logger.exceptions import (
    MissingFunctionNameError,
    MissingModuleNameError,
    NoLoggerForModuleError,
    SimplyLoggerError,
    UninitializedError,
)
from simply_logger.log_entry import LogEntry, LogEntryWithDuration
from simply_logger.log_level import LogLevel
from simply_logger.logger import Logger, get_default_logger
from simply_logger.logger_cache import FunctionLogger, ModuleLogger
from simply_logger.sinks import (
    LogSink,
    MemorySink,
    QueueSink,
    StreamSink,
    console_sink,
    format_entry,
)

__version__ = "0.1.0"

__all__ = [
    "EnvironmentInfo",
    "FunctionLogger",
    "LogEntry",
    "LogEntryWithDuration",
    "LogLevel",
    "LogSink",
    "Logger",
    "LoggerConfig",
    "MemorySink",
    "MissingFunctionNameError",
    "MissingModuleNameError",
    "ModuleLogger",
    "NoLoggerForModuleError",
    "QueueSink",
    "SimplyLoggerError",
    "StreamSink",
    "UninitializedError",
    "console_sink",
    "detect_environment",
    "format_entry",
    "get_default_logger",
]
