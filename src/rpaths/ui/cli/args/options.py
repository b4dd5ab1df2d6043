"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from rpaths.config import Config


@final
@dataclass(slots=True)
class ResolveArgs:
    """Arguments for resolving and printing the search path."""

    command: Literal["resolve"]
    paths_dirs: tuple[str, ...]
    system: bool
    no_default: bool
    use_env: bool
    verbose: bool
    quiet: bool
    config: Config


@final
@dataclass(slots=True)
class PrintConfigArgs:
    """Arguments for printing the effective configuration as TOML."""

    command: Literal["print-config"]
    config: Config


CLIArgs = ResolveArgs | PrintConfigArgs

__all__ = ["CLIArgs", "PrintConfigArgs", "ResolveArgs"]
