"""Message formatting: timestamp + tag prefix on every line."""

import pprint
import traceback
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Union

from . import colors
from .capabilities import Capabilities

STRUCTURE_DEPTH = 3
TIME_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class Text:
    """Text logged verbatim."""

    value: str


@dataclass(frozen=True)
class Structured:
    """Arbitrary data rendered as a depth-limited structure."""

    data: Any


LogValue = Union[Text, Structured]


def to_log_value(value: Any) -> LogValue:
    if isinstance(value, (Text, Structured)):
        return value
    if isinstance(value, str):
        return Text(value)
    return Structured(value)


def render_structured(data: Any, color_supported: bool) -> str:
    """Render non-text data; scalars are colored by type when allowed."""
    if isinstance(data, BaseException):
        return "".join(traceback.format_exception(type(data), data, data.__traceback__)).rstrip("\n")

    rendered = pprint.pformat(data, depth=STRUCTURE_DEPTH)
    if not color_supported:
        return rendered
    if data is None:
        return colors.bold(rendered)
    if isinstance(data, (bool, int, float, complex)):
        return colors.yellow(rendered)
    if isinstance(data, bytes):
        return colors.green(rendered)
    return rendered


def render_value(value: LogValue, color_supported: bool) -> str:
    if isinstance(value, Text):
        return value.value
    return render_structured(value.data, color_supported)


class Formatter:
    """Prefixes messages with ``HH:MM:SS [name]``.

    The prefix is rebuilt on every call so long-lived users (the progress
    spinner) always show the current time.
    """

    def __init__(
        self,
        name: str,
        color: colors.ColorFn,
        capabilities: Capabilities,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._name = name
        self._color = color
        self._capabilities = capabilities
        self._clock = clock

    @property
    def color_supported(self) -> bool:
        return self._capabilities.color_supported

    def style(self, color: colors.ColorFn, text: str) -> str:
        """Apply ``color`` only when the terminal accepts it."""
        return color(text) if self.color_supported else text

    def prefix(self) -> str:
        time_text = self._clock().strftime(TIME_FORMAT)
        tag = f"[{self._name}]"
        if self.color_supported:
            return f"{colors.gray(time_text)} {colors.bold(self._color(tag))} "
        return f"{time_text} {tag} "

    def format(self, *content: Any) -> str:
        message = " ".join(
            render_value(to_log_value(value), self.color_supported) for value in content
        )
        prefix = self.prefix()
        return "\n".join(prefix + line for line in message.split("\n"))
