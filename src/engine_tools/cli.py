# Licence build entry point
#
# Flow:
#   1. Parse command-line arguments
#   2. Build the console (capabilities detected from env + argv)
#   3. Embed the licence file into the generated module
#   4. Exit 0 on success, 1 on failure

import sys
from pathlib import Path
from typing import Optional, Sequence

from .application.licence_build import run_licence_build
from .args import parse_args
from .console import Console, init_capabilities
from .infra.paths import PROJECT_DIR, resolve_path


def main(argv: Optional[Sequence[str]] = None, project_dir: Path = PROJECT_DIR) -> int:
    """Run the licence build.

    Returns:
        exit code (0 success, 1 failure)
    """
    args = parse_args(argv)
    capabilities = init_capabilities(argv=sys.argv[1:] if argv is None else argv)
    console = Console(name=args.name, capabilities=capabilities)

    licence_file = resolve_path(args.licence, project_dir)
    output_file = resolve_path(args.output, project_dir)
    console.info(f"Project directory: {project_dir}")

    success, result, error = run_licence_build(licence_file, output_file, console)
    if not success:
        console.error(error)
        return 1

    console.success(f"Licence module written: {result['output']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
