"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from shellui.shared.status import Status
from shellui.shared.symbols import SymbolStyle


@final
@dataclass(slots=True)
class GlyphsArgs:
    """Arguments for the ``glyphs`` subcommand."""

    command: Literal["glyphs"]
    verbose: bool
    style: SymbolStyle | None


@final
@dataclass(slots=True)
class StatusArgs:
    """Arguments for the ``status`` subcommand."""

    command: Literal["status"]
    verbose: bool
    status: Status
    message: str


@final
@dataclass(slots=True)
class ParaArgs:
    """Arguments for the ``para`` subcommand."""

    command: Literal["para"]
    verbose: bool
    path: Path | None


@final
@dataclass(slots=True)
class ConfirmArgs:
    """Arguments for the ``confirm`` subcommand."""

    command: Literal["confirm"]
    verbose: bool
    question: str
    default: bool | None


@final
@dataclass(slots=True)
class AskArgs:
    """Arguments for the ``ask`` subcommand."""

    command: Literal["ask"]
    verbose: bool
    question: str
    default: str | None


@final
@dataclass(slots=True)
class EditArgs:
    """Arguments for the ``edit`` subcommand."""

    command: Literal["edit"]
    verbose: bool
    path: Path | None


@final
@dataclass(slots=True)
class DemoArgs:
    """Arguments for the ``demo`` subcommand."""

    command: Literal["demo"]
    verbose: bool
    size: int


CLIArgs = GlyphsArgs | StatusArgs | ParaArgs | ConfirmArgs | AskArgs | EditArgs | DemoArgs

__all__ = [
    "AskArgs",
    "CLIArgs",
    "ConfirmArgs",
    "DemoArgs",
    "EditArgs",
    "GlyphsArgs",
    "ParaArgs",
    "StatusArgs",
]
