"""Command line argument parser."""

import argparse
import logging
from collections.abc import Mapping, Sequence
from typing import final

from rpaths import __version__
from rpaths.config import Config
from rpaths.platform.logging import level_from_env, setup_logger
from rpaths.ui.cli.args.options import CLIArgs, PrintConfigArgs, ResolveArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="rpaths",
            description=(
                "Print a PATH-style search path assembled from directories of "
                "symlinks and list files."
            ),
            epilog="Set RPATHS_LOG (e.g. debug, info) to control log verbosity.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "paths_dirs",
            nargs="*",
            help="Directories of symlinks and list files, highest precedence first",
            metavar="PATHS_DIR",
        )
        _ = parser.add_argument(
            "-s",
            "--system",
            action="store_true",
            help="Include system paths, emulating the behaviour of OSX path_helper",
        )
        _ = parser.add_argument(
            "-n",
            "--no-default",
            action="store_true",
            help="Do not scan the default ~/.paths.d directory",
        )
        _ = parser.add_argument(
            "-e",
            "--use-env",
            action="store_true",
            help="Read directories from RPATHS_DIR (colon separated) instead of PATHS_DIR",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Log every scanned entry to stderr",
        )
        _ = verbosity.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )
        _ = parser.add_argument(
            "--print-config",
            action="store_true",
            help="Print the effective configuration as TOML and exit",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        return parser

    @staticmethod
    def process_args(
        args_list: Sequence[str] | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            env: Environment used for log level and config lookup (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: On contradictory or incomplete options (status 2).
            ConfigFileError: If the configuration file cannot be parsed.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.use_env and parsed_args.paths_dirs:
            parser.error("argument -e/--use-env: not allowed with PATHS_DIR arguments")
        if parsed_args.no_default and not parsed_args.paths_dirs:
            parser.error("argument -n/--no-default: requires at least one PATHS_DIR")

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = level_from_env(env)

        _ = setup_logger(console_level=log_level)
        configuration = Config.load(env=env)
        if configuration.log_file is not None:
            _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        if parsed_args.print_config:
            return PrintConfigArgs(command="print-config", config=configuration)

        return ResolveArgs(
            command="resolve",
            paths_dirs=tuple(parsed_args.paths_dirs),
            system=parsed_args.system,
            no_default=parsed_args.no_default,
            use_env=parsed_args.use_env,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            config=configuration,
        )
