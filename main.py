#!/usr/bin/env python3
# Licence build script: embeds LICENCE into a generated Luau module
#
# Usage:
#   python main.py                      # LICENCE -> src/Licence.luau
#   python main.py -l COPYING -o out/Licence.luau
#   python main.py --no-color
#
# Exit code is 0 on success and 1 when the licence could not be embedded.

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from engine_tools.cli import main  # noqa: E402


if __name__ == '__main__':
    sys.exit(main())
