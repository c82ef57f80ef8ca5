from pathlib import Path
import io
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class FakeTTY(io.StringIO):
    """In-memory stream that claims to be an interactive terminal."""

    def isatty(self):
        return True


@pytest.fixture(autouse=True)
def _reset_console_state(monkeypatch):
    import engine_tools.console as console_module
    import engine_tools.console.capabilities as capabilities_module

    monkeypatch.setattr(capabilities_module, "_snapshot", None)
    monkeypatch.setattr(console_module, "_default_console", None)


@pytest.fixture
def plain_caps():
    from engine_tools.console import Capabilities

    return Capabilities(color_disabled=True)


@pytest.fixture
def color_caps():
    from engine_tools.console import Capabilities

    return Capabilities(color_forced=True)
