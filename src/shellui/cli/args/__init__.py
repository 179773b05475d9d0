"""Command line argument handling."""

from shellui.cli.args.options import (
    AskArgs,
    CLIArgs,
    ConfirmArgs,
    DemoArgs,
    EditArgs,
    GlyphsArgs,
    ParaArgs,
    StatusArgs,
)
from shellui.cli.args.parser import ArgumentParser

__all__ = [
    "ArgumentParser",
    "AskArgs",
    "CLIArgs",
    "ConfirmArgs",
    "DemoArgs",
    "EditArgs",
    "GlyphsArgs",
    "ParaArgs",
    "StatusArgs",
]
