"""
Module: environment.py
Location: src/simply_logger/

Describes the runtime the logger is hosted in. The logger only uses this
to pick the application label stamped on its own internal entries.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import os
import sys


BROWSER_PLATFORMS = ("emscripten", "wasi")
DOM_EMULATION_ENV_VAR = "SIMPLY_LOGGER_DOM_EMULATION"
TRUTHY_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class EnvironmentInfo:
    """Flags describing where the process is running."""

    is_browser: bool = False
    is_server_runtime: bool = False
    is_dom_emulation: bool = False

    @property
    def default_app_label(self) -> str:
        if self.is_browser:
            return "browser-app"
        if self.is_server_runtime:
            return "server-app"
        if self.is_dom_emulation:
            return "dom-emulation-app"
        return "unknown-app"


def env_flag(name: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    environ = os.environ if environ is None else environ
    return environ.get(name, "").strip().lower() in TRUTHY_VALUES


def detect_environment(
    *,
    platform: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> EnvironmentInfo:
    """
    Inspect the interpreter and build an EnvironmentInfo.

    WebAssembly builds (Pyodide and friends) count as a browser, any
    other platform as a server runtime.
    """
    platform = sys.platform if platform is None else platform
    is_browser = platform in BROWSER_PLATFORMS
    return EnvironmentInfo(
        is_browser=is_browser,
        is_server_runtime=not is_browser,
        is_dom_emulation=env_flag(DOM_EMULATION_ENV_VAR, environ),
    )
