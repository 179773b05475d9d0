"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from shellui.platform.logging import setup_logger
from shellui.shared.errors import BadSymbolStyleError
from shellui.shared.status import Status
from shellui.shared.symbols import SymbolStyle
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

_YES_NO_DEFAULTS: dict[str, bool] = {"yes": True, "no": False}


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
            prog="shellui",
            description="shellui - preview styled console output and interactive prompts.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging on standard error",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        glyphs_parser = subparsers.add_parser("glyphs", help="Show every glyph in a symbol style")
        _ = glyphs_parser.add_argument(
            "--style",
            type=str,
            metavar="STYLE",
            help="Symbol style to render (full, limited, ascii); defaults to the active style",
        )

        status_parser = subparsers.add_parser("status", help="Write a single status line")
        _ = status_parser.add_argument("status", type=str, metavar="STATUS", help="Status name, e.g. promoted")
        _ = status_parser.add_argument("message", type=str, metavar="MESSAGE", help="Message following the status")

        para_parser = subparsers.add_parser("para", help="Word-wrap a text file (or standard input)")
        _ = para_parser.add_argument("path", nargs="?", type=str, metavar="FILE", help="File to wrap")

        confirm_parser = subparsers.add_parser(
            "confirm",
            help="Ask a yes/no question; exit status 0 for yes, 1 for no",
        )
        _ = confirm_parser.add_argument("question", type=str, metavar="QUESTION")
        _ = confirm_parser.add_argument(
            "--default",
            choices=sorted(_YES_NO_DEFAULTS),
            help="Answer used when the reply is empty",
        )

        ask_parser = subparsers.add_parser("ask", help="Ask a free-form question and print the answer")
        _ = ask_parser.add_argument("question", type=str, metavar="QUESTION")
        _ = ask_parser.add_argument("--default", type=str, help="Answer used when the reply is empty")

        edit_parser = subparsers.add_parser("edit", help="Edit text in $EDITOR and print the result")
        _ = edit_parser.add_argument("path", nargs="?", type=str, metavar="FILE", help="Seed contents")

        demo_parser = subparsers.add_parser(
            "demo",
            help="Walk through every writer call and a simulated transfer",
        )
        _ = demo_parser.add_argument(
            "--size",
            type=_non_negative_int,
            default=256 * 1024,
            metavar="BYTES",
            help="Bytes fed through the progress bar (default: 262144)",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Typed arguments for the selected subcommand.

        Raises:
            SystemExit: If the arguments are invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_verbose = bool(getattr(parsed_args, "verbose", False))
        log_level = logging.DEBUG if is_verbose else logging.WARNING
        _ = setup_logger(console_level=log_level)

        command: str = parsed_args.command
        if command == "glyphs":
            style: SymbolStyle | None = None
            if parsed_args.style is not None:
                try:
                    style = SymbolStyle.from_str(parsed_args.style)
                except BadSymbolStyleError as exc:
                    parser.error(str(exc))
            return GlyphsArgs(command="glyphs", verbose=is_verbose, style=style)

        if command == "status":
            try:
                status = Status.from_user_input(parsed_args.status)
            except ValueError as exc:
                parser.error(str(exc))
            return StatusArgs(
                command="status",
                verbose=is_verbose,
                status=status,
                message=parsed_args.message,
            )

        if command == "para":
            return ParaArgs(command="para", verbose=is_verbose, path=_optional_path(parsed_args.path))

        if command == "confirm":
            return ConfirmArgs(
                command="confirm",
                verbose=is_verbose,
                question=parsed_args.question,
                default=_YES_NO_DEFAULTS.get(parsed_args.default),
            )

        if command == "ask":
            return AskArgs(
                command="ask",
                verbose=is_verbose,
                question=parsed_args.question,
                default=parsed_args.default,
            )

        if command == "demo":
            return DemoArgs(command="demo", verbose=is_verbose, size=parsed_args.size)

        return EditArgs(command="edit", verbose=is_verbose, path=_optional_path(parsed_args.path))


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid byte count: '{raw}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError("byte count must not be negative")
    return value


def _optional_path(raw: str | None) -> Path | None:
    if raw is None:
        return None
    return Path(raw).expanduser()


__all__ = ["ArgumentParser"]
