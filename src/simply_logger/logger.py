from __future__ import annotations

import threading
from typing import Optional

from simply_logger.config import LoggerConfig
from simply_logger.environment import EnvironmentInfo, detect_environment
from simply_logger.exceptions import UninitializedError
from simply_logger.log_entry import (
    LogEntry,
    Message,
    add_duration,
    build_log_entry,
    utc_now,
)
from simply_logger.log_level import LogLevel
from simply_logger.logger_cache import (
    FunctionLogger,
    FunctionLoggerCache,
    ModuleLogger,
    ModuleLoggerCache,
)
from simply_logger.sinks import LogSink, OutputSinkRegistry, console_sink


INTERNAL_MODULE_NAME = "simply-logger"
INIT_TASK_NAME = "SIMPLY-LOGGER-INIT"


class Logger:
    """
    Central coordinator for application logging.

    Logger owns the application identity and the active output sink.
    Identity is set once through initialize(); every logging call made
    before that raises UninitializedError. Mutating calls return the
    logger itself so calls can be chained.
    """

    def __init__(
        self,
        *,
        environment: Optional[EnvironmentInfo] = None,
        sink: Optional[LogSink] = None,
    ):
        self._environment = environment if environment is not None else detect_environment()
        self._internal_app_name = self._environment.default_app_label
        self._app_name = ""
        self._init_lock = threading.Lock()

        self._sinks = OutputSinkRegistry(console_sink)
        self._sinks.set(sink)

        self._module_loggers = ModuleLoggerCache(self)
        self._fn_loggers = FunctionLoggerCache(self, self._module_loggers)

    @classmethod
    def from_config(cls, config: LoggerConfig) -> "Logger":
        """
        Build a logger from configuration, initializing it when the
        configuration names the application.
        """
        logger = cls(environment=config.environment)
        if config.app_name:
            logger.initialize(config.app_name)
        return logger

    # -------------------------------------------------
    # Identity
    # -------------------------------------------------
    def initialize(self, app_name: str) -> Logger:
        app_name = (app_name or "").strip().upper()

        with self._init_lock:
            current = self._app_name
            if not current:
                self._app_name = app_name

        if current:
            entry = self._build_internal_entry(
                LogLevel.WARNING,
                "initialize()",
                f"Logger has been initialized with '{current}' "
                f"and being called again with '{app_name}'",
                task=INIT_TASK_NAME,
            )
            self._sinks.emit(entry)

        return self

    def current_app_name(self) -> str:
        return self._app_name

    @property
    def app_name(self) -> str:
        return self._app_name

    @property
    def is_initialized(self) -> bool:
        return self._app_name != ""

    @property
    def environment(self) -> EnvironmentInfo:
        return self._environment

    def _ensure_initialized(self) -> None:
        if not self.is_initialized:
            raise UninitializedError()

    def _build_internal_entry(
        self,
        log_level: LogLevel,
        fn_name: str,
        message: Message,
        detail_message: Optional[str] = None,
        task: Optional[str] = None,
    ) -> LogEntry:
        return build_log_entry(
            log_level,
            self._internal_app_name,
            INTERNAL_MODULE_NAME,
            fn_name,
            message,
            detail_message,
            task,
        )

    # -------------------------------------------------
    # Output
    # -------------------------------------------------
    def set_output_sink(self, sink: Optional[LogSink]) -> Logger:
        """Replace the active sink. None restores the console sink."""
        self._sinks.set(sink)
        return self

    @property
    def output_sink(self) -> LogSink:
        return self._sinks.active

    # -------------------------------------------------
    # Logging
    # -------------------------------------------------
    def build_log_entry(
        self,
        log_level: LogLevel,
        mod_name: str,
        fn_name: str,
        message: Message,
        detail_message: Optional[str] = None,
        task: Optional[str] = None,
    ) -> LogEntry:
        """
        Build an entry without emitting it, e.g. to close it later
        with log_with_duration().
        """
        self._ensure_initialized()
        return build_log_entry(
            log_level, self._app_name, mod_name, fn_name, message, detail_message, task
        )

    def log(
        self,
        log_level: LogLevel,
        mod_name: str,
        fn_name: str,
        message: Message,
        detail_message: Optional[str] = None,
        task: Optional[str] = None,
    ) -> Logger:
        entry = self.build_log_entry(log_level, mod_name, fn_name, message, detail_message, task)
        self._sinks.emit(entry)
        return self

    def log_debug(self, mod_name, fn_name, message, detail_message=None, task=None) -> Logger:
        return self.log(LogLevel.DEBUG, mod_name, fn_name, message, detail_message, task)

    def log_info(self, mod_name, fn_name, message, detail_message=None, task=None) -> Logger:
        return self.log(LogLevel.INFORMATIONAL, mod_name, fn_name, message, detail_message, task)

    def log_warning(self, mod_name, fn_name, message, detail_message=None, task=None) -> Logger:
        return self.log(LogLevel.WARNING, mod_name, fn_name, message, detail_message, task)

    def log_error(self, mod_name, fn_name, message, detail_message=None, task=None) -> Logger:
        return self.log(LogLevel.ERROR, mod_name, fn_name, message, detail_message, task)

    def log_critical_error(self, mod_name, fn_name, message, detail_message=None, task=None) -> Logger:
        return self.log(LogLevel.CRITICAL_ERROR, mod_name, fn_name, message, detail_message, task)

    def log_with_duration(self, entry: LogEntry) -> Logger:
        """
        Close a previously built entry at the current time and emit it.
        """
        self._ensure_initialized()
        self._sinks.emit(add_duration(entry, utc_now()))
        return self

    # -------------------------------------------------
    # Module / function loggers
    # -------------------------------------------------
    def get_logger_for_module(self, mod_name: str) -> Optional[ModuleLogger]:
        return self._module_loggers.get(mod_name)

    def get_logger_for_fn(self, mod_name: str, fn_name: str) -> Optional[FunctionLogger]:
        return self._fn_loggers.get(mod_name, fn_name)

    def create_module_logger(self, mod_name: str) -> ModuleLogger:
        return self._module_loggers.create(mod_name)

    def create_fn_logger(self, mod_name: str, fn_name: str) -> FunctionLogger:
        return self._fn_loggers.create(mod_name, fn_name)


_default_logger: Optional[Logger] = None
_default_lock = threading.Lock()


def get_default_logger() -> Logger:
    """
    Process-wide logger for applications that prefer a shared instance
    over passing a Logger around.
    """
    global _default_logger
    with _default_lock:
        if _default_logger is None:
            _default_logger = Logger.from_config(LoggerConfig.from_env())
        return _default_logger
