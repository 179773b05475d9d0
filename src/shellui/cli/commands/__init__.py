"""Command executors for the shellui CLI."""

from shellui.cli.commands.display import DemoCommand, GlyphsCommand, ParaCommand, StatusCommand
from shellui.cli.commands.executor import CommandExecutor
from shellui.cli.commands.interactive import AskCommand, ConfirmCommand, EditCommand

__all__ = [
    "AskCommand",
    "CommandExecutor",
    "ConfirmCommand",
    "DemoCommand",
    "EditCommand",
    "GlyphsCommand",
    "ParaCommand",
    "StatusCommand",
]
