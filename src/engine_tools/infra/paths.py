# Path helpers: project directory and CLI path resolution
#
# Main entry points:
#   - get_project_dir(): repository root (or the executable's directory when frozen)
#   - resolve_path(): make relative CLI paths relative to the project directory

import re
import sys
from pathlib import Path


def get_project_dir() -> Path:
    """Return the project root directory."""
    # PyInstaller onefile: use the executable's directory
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent.resolve()

    # Source checkout: src/engine_tools/infra/paths.py -> repo root
    return Path(__file__).resolve().parents[3]


def resolve_path(path: str, base_dir: Path) -> Path:
    """Resolve ``path`` against ``base_dir`` unless it is already absolute.

    Windows drive paths such as ``C:\\...`` count as absolute on every platform.
    """
    candidate = Path(path)
    if candidate.is_absolute() or re.match(r"^[A-Za-z]:", str(candidate)):
        return candidate
    return base_dir / candidate


PROJECT_DIR = get_project_dir()
