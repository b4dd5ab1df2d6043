"""Command execution package for CLI."""

from rpaths.ui.cli.commands.config import PrintConfigCommand
from rpaths.ui.cli.commands.executor import CommandExecutor
from rpaths.ui.cli.commands.resolve import ResolveCommand

__all__ = ["CommandExecutor", "PrintConfigCommand", "ResolveCommand"]
