"""Where: src/shellui/ui/writer.py
What: The styled writer contract: semantically named, colourised output calls.
Why: Commands describe what happened; this layer decides how it looks.
Assumptions: - Every call leaves the stream reset and flushed.
Trade-offs: - Write failures propagate immediately; nothing is retried.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from rich.style import Style

from shellui.shared.status import AnyStatus, UIColor
from shellui.shared.symbols import Glyph
from shellui.ui.progress import DisplayProgress
from shellui.ui.streams import WriteColor
from shellui.ui.wrap import print_wrapped

PARA_WIDTH = 75
PARA_INDENT = 2


def color_style(color: UIColor, *, bold: bool = False) -> Style:
    """Build the Rich style for a semantic colour."""

    return Style(color=color.to_color(), bold=bold)


def print_styled(writer: WriteColor, text: str, style: Style) -> None:
    """Write ``text`` in ``style``, leaving the stream reset and flushed."""

    writer.reset()
    writer.set_color(style)
    _ = writer.write(text)
    writer.flush()
    writer.reset()


def println_styled(writer: WriteColor, text: str, style: Style) -> None:
    """``print_styled`` followed by an unstyled newline."""

    print_styled(writer, text, style)
    _ = writer.write("\n")
    writer.flush()


class UIWriter(ABC):
    """Functions applied to output streams for sending information to a UI."""

    @abstractmethod
    def out(self) -> WriteColor:
        """Stream for normal or informational messages."""

    @abstractmethod
    def err(self) -> WriteColor:
        """Stream for error messages."""

    @abstractmethod
    def is_out_a_terminal(self) -> bool:
        """Whether messages on ``out`` are formatted for a terminal."""

    @abstractmethod
    def is_err_a_terminal(self) -> bool:
        """Whether messages on ``err`` are formatted for a terminal."""

    @abstractmethod
    def progress(self) -> DisplayProgress | None:
        """Return a progress bar for an operation, or ``None`` when output is redirected."""

    def begin(self, message: Any) -> None:
        println_styled(
            self.out(),
            f"{Glyph.RIGHT_SHIFT.to_str()} {message}",
            color_style(UIColor.WARN, bold=True),
        )

    def end(self, message: Any) -> None:
        println_styled(
            self.out(),
            f"{Glyph.STAR.to_str()} {message}",
            color_style(UIColor.END, bold=True),
        )

    def status(self, status: AnyStatus, message: Any) -> None:
        glyph, label, color = status.parts()
        out = self.out()
        print_styled(out, f"{glyph.to_str()} {label}", color_style(color, bold=True))
        _ = out.write(f" {message}\n")
        out.flush()

    def info(self, text: Any) -> None:
        out = self.out()
        _ = out.write(f"{text}\n")
        out.flush()

    def warn(self, message: Any) -> None:
        println_styled(
            self.err(),
            f"{Glyph.SLASHED_ZERO.to_str()} {message}",
            color_style(UIColor.WARN, bold=True),
        )

    def fatal(self, message: Any) -> None:
        """Write a framed, multi-line error block to ``err``.

        An empty message still produces one (empty) body line so the block is
        never just its frame.
        """
        err = self.err()
        style = color_style(UIColor.CRITICAL, bold=True)
        symbol = Glyph.ERROR_X.to_str()
        println_styled(err, symbol, style)
        for line in str(message).splitlines() or [""]:
            println_styled(err, f"{symbol} {line}", style)
        println_styled(err, symbol, style)

    def title(self, text: str) -> None:
        # len() counts characters, so the underline matches what is displayed.
        underline = "=" * len(text)
        println_styled(self.out(), f"{text}\n{underline}\n", color_style(UIColor.INFO, bold=True))

    def heading(self, text: str) -> None:
        println_styled(self.out(), f"{text}\n", color_style(UIColor.INFO, bold=True))

    def para(self, text: str) -> None:
        print_wrapped(self.out(), text, PARA_WIDTH, PARA_INDENT)

    def br(self) -> None:
        out = self.out()
        _ = out.write("\n")
        out.flush()


__all__ = [
    "PARA_INDENT",
    "PARA_WIDTH",
    "UIWriter",
    "color_style",
    "print_styled",
    "println_styled",
]
