# Licence embedding: turn the project's LICENCE file into a Luau module
#
# Main entry points:
#   - render_licence_module(): licence text -> module source
#   - embed_licence(): read LICENCE, write the generated module
#
# Generated module format:
#   -- header comment
#   return [==[
#   <licence text>
#   ]==]

from pathlib import Path

# Default input/output, relative to the project directory
LICENCE_FILE = "LICENCE"
OUTPUT_FILE = "src/Licence.luau"

GENERATED_HEADER = (
    "-- This file is generated from {source} by the licence build script.\n"
    "-- Do not edit it by hand; edit {source} and rebuild instead.\n"
)


def _bracket_level(text: str) -> int:
    """Smallest long-bracket level whose closing bracket does not occur in ``text``."""
    level = 0
    while f"]{'=' * level}]" in text:
        level += 1
    return level


def render_licence_module(text: str, source_name: str = LICENCE_FILE) -> str:
    """Render licence text as a Luau module returning it as a string."""
    body = text.replace("\r\n", "\n").replace("\r", "\n").rstrip("\n")
    equals = "=" * _bracket_level(body)
    header = GENERATED_HEADER.format(source=source_name)
    # A newline right after the opening bracket is dropped by Luau
    return f"{header}\nreturn [{equals}[\n{body}\n]{equals}]\n"


def read_licence(licence_path: Path) -> str:
    """Read the licence text.

    Raises:
        FileNotFoundError: the licence file does not exist
        IsADirectoryError: the licence path is a directory
    """
    if not licence_path.exists():
        raise FileNotFoundError(f"licence file not found: {licence_path}")
    if not licence_path.is_file():
        raise IsADirectoryError(f"licence path is not a file: {licence_path}")

    raw = licence_path.read_bytes()
    encoding = "utf-8-sig" if raw.startswith(b"\xef\xbb\xbf") else "utf-8"
    return raw.decode(encoding)


def write_licence_module(text: str, output_path: Path, source_name: str = LICENCE_FILE) -> Path:
    """Render ``text`` and write it to ``output_path`` with ``\\n`` line endings."""
    module = render_licence_module(text, source_name=source_name)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(module.encode("utf-8"))
    return output_path


def embed_licence(licence_path: Path, output_path: Path) -> Path:
    """Read ``licence_path`` and write the generated module, returning its path."""
    text = read_licence(licence_path)
    return write_licence_module(text, output_path, source_name=licence_path.name)
