"""Application service for the licence build step."""

from pathlib import Path
from typing import Dict, Tuple

from ..console import Console
from ..core.licence import read_licence, write_licence_module


def run_licence_build(
    licence_file: Path,
    output_file: Path,
    console: Console,
) -> Tuple[bool, Dict[str, str], str]:
    """Embed the licence into the generated module, reporting progress.

    Returns:
        (success, result, error) where result holds ``licence`` and ``output`` paths
    """
    result = {"licence": str(licence_file), "output": str(output_file)}
    step = console.promise(f"Reading {licence_file.name}").start()

    try:
        text = read_licence(licence_file)
        step.text = f"Writing {output_file}"
        write_licence_module(text, output_file, source_name=licence_file.name)
    except OSError as e:
        step.fail(f"Failed to embed {licence_file.name}")
        return False, result, str(e)

    step.succeed(f"Embedded {licence_file.name} into {output_file}")
    return True, result, ""
