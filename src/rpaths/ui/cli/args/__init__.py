"""Command line argument handling package."""

from rpaths.ui.cli.args.parser import ArgumentParser
from rpaths.ui.cli.args.options import CLIArgs, PrintConfigArgs, ResolveArgs

__all__ = ["ArgumentParser", "CLIArgs", "PrintConfigArgs", "ResolveArgs"]
