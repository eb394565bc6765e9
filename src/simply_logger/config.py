from dataclasses import dataclass
from typing import Mapping, Optional
import os

from simply_logger.environment import EnvironmentInfo, detect_environment


APP_NAME_ENV_VAR = "SIMPLY_LOGGER_APP_NAME"


@dataclass(frozen=True)
class LoggerConfig:
    """
    Configuration used to build a Logger.

    app_name is optional; when set, the logger is initialized with it
    right away.
    """

    app_name: Optional[str] = None
    environment: Optional[EnvironmentInfo] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggerConfig":
        """
        Factory method that reads configuration from environment variables.
        """
        environ = os.environ if environ is None else environ
        app_name = environ.get(APP_NAME_ENV_VAR, "").strip() or None
        return cls(
            app_name=app_name,
            environment=detect_environment(environ=environ),
        )
