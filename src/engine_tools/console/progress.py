# Progress reporter: a single-line spinner for long-running build steps
#
# Main entry points:
#   - ProgressSession: start / text updates / succeed / fail / stop
#
# State machine:
#   CREATED -> RUNNING -> SUCCEEDED | FAILED | STOPPED
#
# Animation runs on a rich Live display; starting and stopping the Live is
# the session's cancel handle. Only one session should draw at a time.

import enum
import sys
import threading
from typing import Optional, TextIO

from rich.console import Console as RichConsole
from rich.live import Live
from rich.spinner import Spinner
from rich.text import Text as RichText

from . import colors
from .capabilities import stream_isatty
from .formatter import Formatter, Text

SPINNER_NAME = "dots"
SPINNER_INTERVAL = 0.08
SUCCESS_GLYPH = "✔"
FAILURE_GLYPH = "✖"
STATIC_GLYPH = "-"


class ProgressState(enum.Enum):
    CREATED = "created"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    STOPPED = "stopped"


FINAL_STATES = frozenset({ProgressState.SUCCEEDED, ProgressState.FAILED, ProgressState.STOPPED})


class _SpinnerLine:
    """Renderable drawn by Live on every refresh: prefix, spinner frame, text."""

    def __init__(self, session: "ProgressSession"):
        self._session = session
        self._spinner = Spinner(SPINNER_NAME)

    def __rich_console__(self, console, options):
        glyph = self._spinner.render(console.get_time()).plain
        yield RichText.from_ansi(self._session._render(glyph, spinning=True))


class ProgressSession:
    """Live status line for one build step.

    Every frame is rendered through the owning console's formatter, so the
    timestamp keeps moving while the spinner animates. When the stream is
    not an interactive terminal (pipes, CI logs, dumb terminals) nothing
    animates: ``start`` prints one ``- text`` line and the final glyph line
    is printed when the session ends.
    """

    def __init__(
        self,
        text: str,
        formatter: Formatter,
        stream: Optional[TextIO] = None,
        interactive: Optional[bool] = None,
        interval: float = SPINNER_INTERVAL,
    ):
        self._text = text
        self._formatter = formatter
        self._stream = stream
        self._interactive = interactive
        self._interval = interval
        self._state = ProgressState.CREATED
        self._live: Optional[Live] = None
        self._lock = threading.RLock()
        self.last_frame: Optional[str] = None

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    @property
    def state(self) -> ProgressState:
        return self._state

    @property
    def is_spinning(self) -> bool:
        return self._state is ProgressState.RUNNING and self._live is not None

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        with self._lock:
            self._ensure_not_final()
            self._text = value
            live = self._live
        if live is not None:
            live.refresh()

    def start(self, text: Optional[str] = None) -> "ProgressSession":
        with self._lock:
            if self._state is not ProgressState.CREATED:
                raise RuntimeError(f"progress session already {self._state.value}")
            if text is not None:
                self._text = text
            self._state = ProgressState.RUNNING

            if not self._is_interactive():
                self._write_line(self._render(STATIC_GLYPH))
                return self

            self._live = Live(
                _SpinnerLine(self),
                console=self._rich_console(),
                refresh_per_second=1 / self._interval,
                transient=True,
                redirect_stdout=False,
                redirect_stderr=False,
            )
            live = self._live
        live.start(refresh=True)
        return self

    def succeed(self, text: Optional[str] = None) -> "ProgressSession":
        return self._finish(ProgressState.SUCCEEDED, SUCCESS_GLYPH, colors.green, text)

    def fail(self, text: Optional[str] = None) -> "ProgressSession":
        return self._finish(ProgressState.FAILED, FAILURE_GLYPH, colors.red, text)

    def stop(self) -> "ProgressSession":
        """End the session and clear the spinner line without a final glyph."""
        return self._finish(ProgressState.STOPPED, None, None, None)

    def __enter__(self) -> "ProgressSession":
        if self._state is ProgressState.CREATED:
            self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._state is ProgressState.RUNNING:
            if exc_type is None:
                self.succeed()
            else:
                self.fail()
        return False

    def _is_interactive(self) -> bool:
        if self._interactive is not None:
            return self._interactive
        return stream_isatty(self.stream)

    def _rich_console(self) -> RichConsole:
        return RichConsole(
            file=self.stream,
            force_terminal=True,
            color_system="standard" if self._formatter.color_supported else None,
            highlight=False,
        )

    def _ensure_not_final(self) -> None:
        if self._state in FINAL_STATES:
            raise RuntimeError(f"progress session already {self._state.value}")

    def _finish(
        self,
        state: ProgressState,
        glyph: Optional[str],
        color: Optional[colors.ColorFn],
        text: Optional[str],
    ) -> "ProgressSession":
        with self._lock:
            self._ensure_not_final()
            if text is not None:
                self._text = text
            self._state = state
            live, self._live = self._live, None

        # Live refreshes from its own thread and renders through this session
        if live is not None:
            live.stop()

        with self._lock:
            if glyph is not None:
                self._write_line(self._render(self._formatter.style(color, glyph)))
            else:
                self.stream.flush()
        return self

    def _render(self, glyph: str, spinning: bool = False) -> str:
        if spinning:
            glyph = self._formatter.style(colors.cyan, glyph)
        frame = self._formatter.format(Text(glyph), Text(self._text))
        self.last_frame = frame
        return frame

    def _write_line(self, frame: str) -> None:
        self.stream.write(frame + "\n")
        self.stream.flush()
