# Command-line argument parsing for the licence build script
#
# Main entry points:
#   - parse_args(): parse and validate arguments
#
# --color / --no-color are also read directly by the capability detector,
# they are declared here so argparse accepts them.

import argparse
from typing import Optional, Sequence

from .console import DEFAULT_NAME
from .core.licence import LICENCE_FILE, OUTPUT_FILE


def validate_name(value: str) -> str:
    """Console tags must be non-empty and single-line."""
    name = value.strip()
    if not name:
        raise argparse.ArgumentTypeError("name must not be empty")
    if "\n" in name:
        raise argparse.ArgumentTypeError(f"name must be a single line: {value!r}")
    return name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Embed the LICENCE file into a generated Luau module",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s                                # LICENCE -> src/Licence.luau
  %(prog)s -l COPYING -o out/Licence.luau
  %(prog)s --no-color                     # plain output (same as NO_COLOR=1)

Relative paths are resolved against the project directory.
        """,
    )

    parser.add_argument(
        "-l", "--licence",
        default=LICENCE_FILE,
        metavar="FILE",
        help=f"licence file to embed (default: {LICENCE_FILE})",
    )
    parser.add_argument(
        "-o", "--output",
        default=OUTPUT_FILE,
        metavar="FILE",
        help=f"generated module path (default: {OUTPUT_FILE})",
    )
    parser.add_argument(
        "-n", "--name",
        type=validate_name,
        default="licence",
        metavar="NAME",
        help=f"tag shown in console output (default: licence, console default: {DEFAULT_NAME})",
    )

    color_group = parser.add_mutually_exclusive_group()
    color_group.add_argument(
        "--color",
        action="store_true",
        help="force colored output (same as FORCE_COLOR)",
    )
    color_group.add_argument(
        "--no-color",
        action="store_true",
        help="disable colored output (same as NO_COLOR)",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments (``sys.argv[1:]`` when ``argv`` is None)."""
    return build_parser().parse_args(argv)
