"""Terminal-aware console output for build scripts.

Scripts that just want to log can use the module-level helpers::

    from engine_tools.console import log_info, log_error

and scripts that want their own tag or a spinner build a ``Console``::

    console = Console(name="licence")
    step = console.promise("Reading LICENCE").start()
    step.succeed("Done")
"""

from typing import Any, Optional

from .capabilities import Capabilities, detect_capabilities, get_capabilities, init_capabilities
from .formatter import Formatter, LogValue, Structured, Text
from .logger import DEFAULT_NAME, Console, LogLevel
from .progress import ProgressSession, ProgressState

_default_console: Optional[Console] = None


def get_console() -> Console:
    """Shared ``[script]`` console, created on first use."""
    global _default_console
    if _default_console is None:
        _default_console = Console()
    return _default_console


def log_info(*content: Any) -> None:
    get_console().info(*content)


def log_success(*content: Any) -> None:
    get_console().success(*content)


def log_warning(*content: Any) -> None:
    get_console().warning(*content)


def log_error(*content: Any) -> None:
    get_console().error(*content)


__all__ = [
    "Capabilities",
    "Console",
    "DEFAULT_NAME",
    "Formatter",
    "LogLevel",
    "LogValue",
    "ProgressSession",
    "ProgressState",
    "Structured",
    "Text",
    "detect_capabilities",
    "get_capabilities",
    "get_console",
    "init_capabilities",
    "log_error",
    "log_info",
    "log_success",
    "log_warning",
]
