"""src/rpaths/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Keep stdout handling in one place; logs never go to stdout.
"""

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class CommandExecutor(ABC):
    """Base class for command execution."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    @abstractmethod
    def execute(self) -> str:
        """Execute the command.

        Returns:
            The text written to the output stream.
        """
        pass

    def emit(self, output: str) -> str:
        """Write ``output`` verbatim, without adding a trailing newline."""
        _ = self.stream.write(output)
        self.stream.flush()
        return output
