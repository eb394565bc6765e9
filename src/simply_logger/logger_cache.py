from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Dict, Optional

from simply_logger.exceptions import (
    MissingFunctionNameError,
    MissingModuleNameError,
    NoLoggerForModuleError,
)
from simply_logger.log_entry import LogEntry, Message
from simply_logger.log_level import LogLevel

if TYPE_CHECKING:
    from simply_logger.logger import Logger


class ModuleLogger:
    """
    Logging handle bound to one module name.

    Every call is forwarded to the owning Logger with the module name
    filled in.
    """

    def __init__(self, logger: Logger, module_name: str):
        self.logger = logger
        self.module_name = module_name

    def log(
        self,
        log_level: LogLevel,
        fn_name: str,
        message: Message,
        detail_message: Optional[str] = None,
        task: Optional[str] = None,
    ) -> ModuleLogger:
        self.logger.log(log_level, self.module_name, fn_name, message, detail_message, task)
        return self

    def log_debug(self, fn_name, message, detail_message=None, task=None) -> ModuleLogger:
        self.logger.log_debug(self.module_name, fn_name, message, detail_message, task)
        return self

    def log_info(self, fn_name, message, detail_message=None, task=None) -> ModuleLogger:
        self.logger.log_info(self.module_name, fn_name, message, detail_message, task)
        return self

    def log_warning(self, fn_name, message, detail_message=None, task=None) -> ModuleLogger:
        self.logger.log_warning(self.module_name, fn_name, message, detail_message, task)
        return self

    def log_error(self, fn_name, message, detail_message=None, task=None) -> ModuleLogger:
        self.logger.log_error(self.module_name, fn_name, message, detail_message, task)
        return self

    def log_critical_error(self, fn_name, message, detail_message=None, task=None) -> ModuleLogger:
        self.logger.log_critical_error(self.module_name, fn_name, message, detail_message, task)
        return self

    def build_log_entry(
        self,
        log_level: LogLevel,
        fn_name: str,
        message: Message,
        detail_message: Optional[str] = None,
        task: Optional[str] = None,
    ) -> LogEntry:
        return self.logger.build_log_entry(
            log_level, self.module_name, fn_name, message, detail_message, task
        )

    def log_with_duration(self, entry: LogEntry) -> ModuleLogger:
        self.logger.log_with_duration(entry)
        return self

    def get_logger_for_fn(self, fn_name: str) -> Optional[FunctionLogger]:
        return self.logger.get_logger_for_fn(self.module_name, fn_name)

    def create_fn_logger(self, fn_name: str) -> FunctionLogger:
        return self.logger.create_fn_logger(self.module_name, fn_name)

    def __repr__(self) -> str:
        return f"ModuleLogger(module_name={self.module_name!r})"


class FunctionLogger:
    """
    Logging handle bound to one (module, function) pair.
    """

    def __init__(self, logger: Logger, module_logger: ModuleLogger, fn_name: str):
        self.logger = logger
        self.module_logger = module_logger
        self.fn_name = fn_name

    @property
    def module_name(self) -> str:
        return self.module_logger.module_name

    def log(
        self,
        log_level: LogLevel,
        message: Message,
        detail_message: Optional[str] = None,
        task: Optional[str] = None,
    ) -> FunctionLogger:
        self.logger.log(log_level, self.module_name, self.fn_name, message, detail_message, task)
        return self

    def log_debug(self, message, detail_message=None, task=None) -> FunctionLogger:
        self.logger.log_debug(self.module_name, self.fn_name, message, detail_message, task)
        return self

    def log_info(self, message, detail_message=None, task=None) -> FunctionLogger:
        self.logger.log_info(self.module_name, self.fn_name, message, detail_message, task)
        return self

    def log_warning(self, message, detail_message=None, task=None) -> FunctionLogger:
        self.logger.log_warning(self.module_name, self.fn_name, message, detail_message, task)
        return self

    def log_error(self, message, detail_message=None, task=None) -> FunctionLogger:
        self.logger.log_error(self.module_name, self.fn_name, message, detail_message, task)
        return self

    def log_critical_error(self, message, detail_message=None, task=None) -> FunctionLogger:
        self.logger.log_critical_error(self.module_name, self.fn_name, message, detail_message, task)
        return self

    def build_log_entry(
        self,
        log_level: LogLevel,
        message: Message,
        detail_message: Optional[str] = None,
        task: Optional[str] = None,
    ) -> LogEntry:
        return self.logger.build_log_entry(
            log_level, self.module_name, self.fn_name, message, detail_message, task
        )

    def log_with_duration(self, entry: LogEntry) -> FunctionLogger:
        self.logger.log_with_duration(entry)
        return self

    def __repr__(self) -> str:
        return f"FunctionLogger(module_name={self.module_name!r}, fn_name={self.fn_name!r})"


class ModuleLoggerCache:
    """
    Registry of module loggers keyed by normalized module name.

    Creation is create-or-get: the same name (ignoring surrounding
    whitespace and case) always yields the same ModuleLogger.
    """

    def __init__(self, logger: Logger):
        self._logger = logger
        self._lock = threading.RLock()
        self._loggers: Dict[str, ModuleLogger] = {}

    @staticmethod
    def normalize_key(mod_name: str) -> str:
        mod_name = (mod_name or "").strip()
        if not mod_name:
            raise MissingModuleNameError()
        return f"MOD[{mod_name.upper()}]"

    # -------------------------------------------------
    # Creation / lookup
    # -------------------------------------------------
    def create(self, mod_name: str) -> ModuleLogger:
        key = self.normalize_key(mod_name)
        with self._lock:
            mod_logger = self._loggers.get(key)
            if mod_logger is None:
                mod_logger = ModuleLogger(self._logger, mod_name.strip())
                self._loggers[key] = mod_logger
            return mod_logger

    def get(self, mod_name: str) -> Optional[ModuleLogger]:
        """
        Look up a module logger without creating it.

        Names that would fail normalization simply are not found.
        """
        try:
            key = self.normalize_key(mod_name)
        except MissingModuleNameError:
            return None
        with self._lock:
            return self._loggers.get(key)


class FunctionLoggerCache:
    """
    Registry of function loggers keyed by (module, function).

    A function logger can only be created under a module that already
    has a ModuleLogger.
    """

    def __init__(self, logger: Logger, module_cache: ModuleLoggerCache):
        self._logger = logger
        self._module_cache = module_cache
        self._lock = threading.RLock()
        self._loggers: Dict[str, FunctionLogger] = {}

    def normalize_key(self, mod_name: str, fn_name: str) -> str:
        mod_key = self._module_cache.normalize_key(mod_name)
        fn_name = (fn_name or "").strip()
        if not fn_name:
            raise MissingFunctionNameError()
        return f"{mod_key}|FN[{fn_name.upper()}]"

    # -------------------------------------------------
    # Creation / lookup
    # -------------------------------------------------
    def create(self, mod_name: str, fn_name: str) -> FunctionLogger:
        key = self.normalize_key(mod_name, fn_name)

        mod_logger = self._module_cache.get(mod_name)
        if mod_logger is None:
            raise NoLoggerForModuleError(mod_name.strip(), key)

        with self._lock:
            fn_logger = self._loggers.get(key)
            if fn_logger is None:
                fn_logger = FunctionLogger(self._logger, mod_logger, fn_name.strip())
                self._loggers[key] = fn_logger
            return fn_logger

    def get(self, mod_name: str, fn_name: str) -> Optional[FunctionLogger]:
        try:
            key = self.normalize_key(mod_name, fn_name)
        except (MissingModuleNameError, MissingFunctionNameError):
            return None
        with self._lock:
            return self._loggers.get(key)
