"""src/shellui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Every command receives its typed arguments and the UI it writes through.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from shellui.cli.args.options import CLIArgs
from shellui.ui.console import UI

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    ui: UI

    def __init__(self, args: ArgsT, ui: UI) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            ui: UI used for all output and prompts.
        """
        self.args = args
        self.ui = ui

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        ...
