"""Leveled console output for build scripts."""

import enum
import sys
from typing import Any, Optional, TextIO

from . import colors
from .capabilities import Capabilities, get_capabilities
from .formatter import Formatter, Text
from .progress import ProgressSession

DEFAULT_NAME = "script"


class LogLevel(enum.Enum):
    """Log level -> (glyph, glyph color, writes to stderr)."""

    INFO = ("ℹ", colors.blue, False)
    SUCCESS = ("✔", colors.green, False)
    WARNING = ("⚠", colors.yellow, True)
    ERROR = ("✖", colors.red, True)

    def __init__(self, glyph: str, color: colors.ColorFn, to_stderr: bool):
        self.glyph = glyph
        self.color = color
        self.to_stderr = to_stderr


class Console:
    """Named, timestamped logger with a progress spinner.

    Args:
        name: tag shown as ``[name]`` before every line
        color: function coloring the tag
        capabilities: terminal capabilities; detected once per process when omitted
        stdout: stream for info/success (defaults to the live ``sys.stdout``)
        stderr: stream for warning/error and spinners (defaults to the live ``sys.stderr``)
    """

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        color: colors.ColorFn = colors.brand,
        capabilities: Optional[Capabilities] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self._name = name
        self._color = color
        self._capabilities = capabilities if capabilities is not None else get_capabilities()
        self._stdout = stdout
        self._stderr = stderr
        self._formatter = Formatter(name, color, self._capabilities)

        if self._capabilities.color_supported and self._capabilities.is_windows:
            colors.enable_windows_ansi()

    @property
    def name(self) -> str:
        return self._name

    @property
    def color(self) -> colors.ColorFn:
        return self._color

    @property
    def capabilities(self) -> Capabilities:
        return self._capabilities

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    def format(self, *content: Any) -> str:
        return self._formatter.format(*content)

    def log(self, level: LogLevel, *content: Any) -> None:
        glyph = Text(self._formatter.style(level.color, level.glyph))
        stream = self._error_stream() if level.to_stderr else self._output_stream()
        print(self._formatter.format(glyph, *content), file=stream, flush=True)

    def info(self, *content: Any) -> None:
        self.log(LogLevel.INFO, *content)

    def success(self, *content: Any) -> None:
        self.log(LogLevel.SUCCESS, *content)

    def warning(self, *content: Any) -> None:
        self.log(LogLevel.WARNING, *content)

    def error(self, *content: Any) -> None:
        self.log(LogLevel.ERROR, *content)

    def promise(self, text: str) -> ProgressSession:
        """Create a progress session; call ``start()`` on it to begin."""
        interactive = None if self._capabilities.animation_supported else False
        return ProgressSession(text, self._formatter, stream=self._stderr, interactive=interactive)

    def _output_stream(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _error_stream(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr
