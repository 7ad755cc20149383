"""Command-line interface (the ``namhatta`` console script)."""

from .cli import main

__all__ = ["main"]
