"""Command line interface package."""

from rpaths.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
