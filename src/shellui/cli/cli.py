"""Command line interface for shellui."""

from collections.abc import Sequence
from typing import Any, final

from shellui.cli.args import ArgumentParser
from shellui.cli.args.options import (
    AskArgs,
    CLIArgs,
    ConfirmArgs,
    DemoArgs,
    EditArgs,
    GlyphsArgs,
    ParaArgs,
)
from shellui.cli.commands import (
    AskCommand,
    CommandExecutor,
    ConfirmCommand,
    DemoCommand,
    EditCommand,
    GlyphsCommand,
    ParaCommand,
    StatusCommand,
)
from shellui.platform.logging import logger
from shellui.shared.errors import UIError
from shellui.ui.console import UI


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None, ui: UI | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            ui: UI to write through; defaults to one configured from the environment.

        Returns:
            int: Process exit code.
        """
        args: CLIArgs = ArgumentParser.process_args(args_list)
        active_ui = ui if ui is not None else UI.default_with_env()

        try:
            return CommandProcessor.build_command(args, active_ui).execute()
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except (UIError, OSError, EOFError) as e:
            logger.debug("Command %s failed", args.command, exc_info=True)
            active_ui.fatal(e)
            return 1

    @staticmethod
    def build_command(args: CLIArgs, ui: UI) -> CommandExecutor[Any]:
        """Select the executor matching ``args``."""

        if isinstance(args, GlyphsArgs):
            return GlyphsCommand(args, ui)
        if isinstance(args, ParaArgs):
            return ParaCommand(args, ui)
        if isinstance(args, ConfirmArgs):
            return ConfirmCommand(args, ui)
        if isinstance(args, AskArgs):
            return AskCommand(args, ui)
        if isinstance(args, DemoArgs):
            return DemoCommand(args, ui)
        if isinstance(args, EditArgs):
            return EditCommand(args, ui)
        return StatusCommand(args, ui)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). A ``quit`` answer to a yes/no
        prompt exits the process directly with status 0.
    """
    return CommandProcessor.process_command()
