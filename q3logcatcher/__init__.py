"""Collect Quake 3 match kills from log files or Docker containers and store them in MongoDB."""

__version__ = "0.1.0"
__all__ = ["__version__"]