"""Command line interface for rpaths."""

import sys
from collections.abc import Mapping
from typing import final

from rpaths.application.services import ResolvePathsService
from rpaths.features.resolution import ConfigurationError
from rpaths.platform.logging import logger
from rpaths.ui.cli.args import ArgumentParser
from rpaths.ui.cli.args.options import CLIArgs, PrintConfigArgs
from rpaths.ui.cli.commands import PrintConfigCommand, ResolveCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: list[str] | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            env: Environment mapping (for testing); defaults to ``os.environ``.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list, env)

            if isinstance(args, PrintConfigArgs):
                _ = PrintConfigCommand(args).execute()
                return

            service = ResolvePathsService(config=args.config, env=env)
            _ = ResolveCommand(args, service).execute()

        except ConfigurationError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside :class:`CommandProcessor`.
    """
    CommandProcessor.process_command()
    return 0
