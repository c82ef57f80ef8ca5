"""Build tooling for the engine project: console output, licence embedding, unit helpers."""

__version__ = "1.0.0"
