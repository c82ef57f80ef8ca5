# Terminal capability detection: decides whether colored output is allowed
#
# Main entry points:
#   - detect_capabilities(): inspect environment / argv / stdout once
#   - init_capabilities() / get_capabilities(): process-wide snapshot, detected once
#
# Resolution order:
#   1. NO_COLOR or --no-color     -> no color (wins over everything)
#   2. FORCE_COLOR or --color     -> color
#   3. Windows and TERM != dumb   -> color
#   4. TTY stdout and TERM set (not dumb) -> color
#   5. CI plus a known CI provider -> color
#   6. otherwise                  -> no color

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, TextIO

DISABLE_ENV = "NO_COLOR"
FORCE_ENV = "FORCE_COLOR"
DISABLE_FLAG = "--no-color"
FORCE_FLAG = "--color"
CI_ENV = "CI"
CI_PROVIDER_ENVS = ("GITHUB_ACTIONS", "GITLAB_CI", "CIRCLECI")
DUMB_TERMINAL = "dumb"


@dataclass(frozen=True)
class Capabilities:
    """Snapshot of the runtime environment relevant to console output."""

    color_disabled: bool = False
    color_forced: bool = False
    is_windows: bool = False
    is_dumb_terminal: bool = False
    has_terminal_type: bool = False
    is_interactive_terminal: bool = False
    is_ci: bool = False
    has_ci_flag: bool = False

    @property
    def color_supported(self) -> bool:
        if self.color_disabled:
            return False
        if self.color_forced:
            return True
        if self.is_windows and not self.is_dumb_terminal:
            return True
        if self.is_interactive_terminal and self.has_terminal_type and not self.is_dumb_terminal:
            return True
        return self.is_ci

    @property
    def animation_supported(self) -> bool:
        """Cursor-moving output is off on dumb terminals and under any CI."""
        return not (self.is_dumb_terminal or self.has_ci_flag or self.is_ci)


def stream_isatty(stream: Optional[TextIO]) -> bool:
    """``stream.isatty()`` that treats missing or closed streams as non-terminals."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def detect_capabilities(
    environ: Optional[Mapping[str, str]] = None,
    argv: Optional[Sequence[str]] = None,
    stdout: Optional[TextIO] = None,
    platform: Optional[str] = None,
) -> Capabilities:
    """Build a Capabilities value from explicit inputs.

    Every argument falls back to the live process value when omitted, so
    tests can pass a fake environment while scripts call it bare.
    Environment flags only need to be present; their values are ignored.
    """
    env = os.environ if environ is None else environ
    args = sys.argv[1:] if argv is None else argv
    out = sys.stdout if stdout is None else stdout
    plat = sys.platform if platform is None else platform

    return Capabilities(
        color_disabled=DISABLE_ENV in env or DISABLE_FLAG in args,
        color_forced=FORCE_ENV in env or FORCE_FLAG in args,
        is_windows=plat == "win32",
        is_dumb_terminal=env.get("TERM") == DUMB_TERMINAL,
        has_terminal_type=bool(env.get("TERM")),
        is_interactive_terminal=stream_isatty(out),
        is_ci=CI_ENV in env and any(name in env for name in CI_PROVIDER_ENVS),
        has_ci_flag=CI_ENV in env,
    )


_snapshot: Optional[Capabilities] = None


def init_capabilities(argv: Optional[Sequence[str]] = None) -> Capabilities:
    """Detect the process-wide capabilities once; later calls return the same value.

    Entry points call this with their own argv so the flags they were given
    are honoured by every console created afterwards.
    """
    global _snapshot
    if _snapshot is None:
        _snapshot = detect_capabilities(argv=argv)
    return _snapshot


def get_capabilities() -> Capabilities:
    """Process-wide capabilities, detected on first use and then frozen."""
    return init_capabilities()
