"""Print-config command implementation."""

from typing import TextIO, final

from typing_extensions import override

from rpaths.ui.cli.args.options import PrintConfigArgs
from rpaths.ui.cli.commands.executor import CommandExecutor


@final
class PrintConfigCommand(CommandExecutor):
    """Write the effective configuration as a commented TOML document."""

    def __init__(self, args: PrintConfigArgs, stream: TextIO | None = None) -> None:
        super().__init__(stream)
        self.args = args

    @override
    def execute(self) -> str:
        return self.emit(self.args.config.render_toml())
