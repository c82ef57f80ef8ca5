"""Application services orchestrating core capabilities."""

from .licence_build import run_licence_build

__all__ = [
    "run_licence_build",
]
