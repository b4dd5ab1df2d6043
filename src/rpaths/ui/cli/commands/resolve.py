"""Resolve command implementation."""

from typing import TextIO, final

from typing_extensions import override

from rpaths.application.services import ResolvePathsService
from rpaths.ui.cli.args.options import ResolveArgs
from rpaths.ui.cli.commands.executor import CommandExecutor


@final
class ResolveCommand(CommandExecutor):
    """Print the resolved search path, ready for assignment to ``PATH``."""

    def __init__(
        self,
        args: ResolveArgs,
        service: ResolvePathsService | None = None,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(stream)
        self.args = args
        self.app = service or ResolvePathsService(config=args.config)

    @override
    def execute(self) -> str:
        request = self.app.build_request(
            paths_dirs=self.args.paths_dirs,
            system=self.args.system,
            no_default=self.args.no_default,
            use_env=self.args.use_env,
        )
        return self.emit(self.app.resolve(request))
