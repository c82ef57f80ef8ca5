"""ANSI color helpers built on colorama's escape codes."""

from typing import Callable

from colorama import Fore, Style, just_fix_windows_console

ColorFn = Callable[[str], str]

_windows_console_fixed = False


def paint(*codes: str) -> ColorFn:
    """Return a function wrapping text in the given escape codes."""
    prefix = "".join(codes)

    def apply(text: str) -> str:
        return f"{prefix}{text}{Style.RESET_ALL}"

    return apply


def plain(text: str) -> str:
    return text


def enable_windows_ansi() -> None:
    """Let the legacy Windows console interpret ANSI codes (no-op elsewhere)."""
    global _windows_console_fixed
    if _windows_console_fixed:
        return
    just_fix_windows_console()
    _windows_console_fixed = True


bold = paint(Style.BRIGHT)
gray = paint(Fore.LIGHTBLACK_EX)
red = paint(Fore.RED)
green = paint(Fore.GREEN)
yellow = paint(Fore.YELLOW)
blue = paint(Fore.BLUE)
cyan = paint(Fore.CYAN)
magenta = paint(Fore.MAGENTA)

# Default tag color for build scripts
brand = paint(Fore.MAGENTA)
