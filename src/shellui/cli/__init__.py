"""Command line interface for shellui."""

from shellui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
