"""Command-line interface for termcanvas."""

from termcanvas.cli.main import main

__all__ = ["main"]
