"""Where: src/shellui/ui/streams.py
What: Input and output streams carrying terminal metadata and colour policy.
Why: Styled output code must behave the same against a terminal and a test sink.
Assumptions: - Streams carry text; callers never see raw descriptors.
Trade-offs: - Rich only supplies the SGR codes; text is written unchanged, control codes included.
"""

from __future__ import annotations

import io
import sys
from enum import Enum
from typing import Protocol, TextIO, final, runtime_checkable

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from shellui.platform import tty
from shellui.platform.tty import StdStream


class ColorChoice(str, Enum):
    """Colour policy for terminal-backed output streams."""

    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"


@runtime_checkable
class WriteColor(Protocol):
    """Writable text destination with optional colour support."""

    def write(self, text: str) -> int:
        ...

    def flush(self) -> None:
        ...

    def set_color(self, style: Style) -> None:
        ...

    def reset(self) -> None:
        ...

    def supports_color(self) -> bool:
        ...


@runtime_checkable
class TextSource(Protocol):
    """Readable text source consumed line by line."""

    def readline(self) -> str:
        ...

    def read(self) -> str:
        ...


def _build_console(file: TextIO | None, coloring: ColorChoice, *, stderr: bool) -> Console:
    """Create a Rich console that renders colour according to ``coloring``."""

    common = {
        "file": file,
        "stderr": stderr,
        "highlight": False,
        "markup": False,
        "emoji": False,
        "soft_wrap": True,
    }
    if coloring is ColorChoice.ALWAYS:
        return Console(force_terminal=True, color_system="standard", **common)
    if coloring is ColorChoice.NEVER:
        return Console(color_system=None, **common)
    return Console(color_system="auto", **common)


@final
class ColorStream:
    """Colour-enabled stream whose styling is governed by a colour policy."""

    console: Console
    coloring: ColorChoice

    def __init__(
        self,
        file: TextIO | None = None,
        coloring: ColorChoice = ColorChoice.AUTO,
        *,
        stderr: bool = False,
    ) -> None:
        """Initialize the stream.

        Args:
            file: Text destination; ``None`` follows the live ``sys.stdout``
                (or ``sys.stderr`` when ``stderr`` is set).
            coloring: Colour policy.
            stderr: Whether ``file=None`` means standard error.
        """
        self.console = _build_console(file, coloring, stderr=stderr)
        self.coloring = coloring
        self._style: Style | None = None

    @classmethod
    def from_stdout(cls, coloring: ColorChoice) -> "ColorStream":
        return cls(None, coloring)

    @classmethod
    def from_stderr(cls, coloring: ColorChoice) -> "ColorStream":
        return cls(None, coloring, stderr=True)

    def write(self, text: str) -> int:
        color_system = self.console.color_system
        if self._style is None or color_system is None:
            rendered = text
        else:
            rendered = self._style.render(
                text,
                color_system=COLOR_SYSTEMS[color_system],
                legacy_windows=self.console.legacy_windows,
            )
        _ = self.console.file.write(rendered)
        return len(text)

    def flush(self) -> None:
        self.console.file.flush()

    def set_color(self, style: Style) -> None:
        self._style = style

    def reset(self) -> None:
        self._style = None

    def supports_color(self) -> bool:
        return self.console.color_system is not None


@final
class PlainStream:
    """A plain text sink without colour support; colour calls are no-ops."""

    def __init__(self, file: TextIO) -> None:
        self.file = file

    def write(self, text: str) -> int:
        written = self.file.write(text)
        return written if isinstance(written, int) else len(text)

    def flush(self) -> None:
        self.file.flush()

    def set_color(self, style: Style) -> None:
        del style

    def reset(self) -> None:
        return None

    def supports_color(self) -> bool:
        return False


WriteStream = ColorStream | PlainStream


class NullSink(io.TextIOBase):
    """Text destination discarding everything written to it."""

    def write(self, s: str) -> int:
        return len(s)

    def writable(self) -> bool:
        return True


class InputStream:
    """Text source tagged with whether it is attached to a terminal."""

    inner: TextSource
    isatty: bool

    def __init__(self, inner: TextSource, isatty: bool) -> None:
        self.inner = inner
        self.isatty = isatty

    @classmethod
    def from_stdin(cls, isatty: bool | None = None) -> "InputStream":
        """Wrap the process standard input, detecting the terminal when ``isatty`` is None."""

        detected = isatty if isatty is not None else tty.isatty(StdStream.STDIN)
        return cls(sys.stdin, detected)

    def readline(self) -> str:
        return self.inner.readline()

    def read(self) -> str:
        return self.inner.read()

    def is_a_terminal(self) -> bool:
        return self.isatty

    def __repr__(self) -> str:
        return f"InputStream(isatty={self.isatty})"


class OutputStream:
    """Output destination exposing the ``WriteColor`` capabilities.

    Delegates to either a ``ColorStream`` or a ``PlainStream``; callers never
    special-case which one they hold.
    """

    inner: WriteStream
    coloring: ColorChoice
    isatty: bool

    def __init__(self, inner: WriteStream, coloring: ColorChoice, isatty: bool) -> None:
        self.inner = inner
        self.coloring = coloring
        self.isatty = isatty

    @classmethod
    def from_stdout(cls, coloring: ColorChoice, isatty: bool | None = None) -> "OutputStream":
        detected = isatty if isatty is not None else tty.isatty(StdStream.STDOUT)
        return cls(ColorStream.from_stdout(coloring), coloring, detected)

    @classmethod
    def from_stderr(cls, coloring: ColorChoice, isatty: bool | None = None) -> "OutputStream":
        detected = isatty if isatty is not None else tty.isatty(StdStream.STDERR)
        return cls(ColorStream.from_stderr(coloring), coloring, detected)

    @classmethod
    def from_write(cls, file: TextIO, coloring: ColorChoice, isatty: bool) -> "OutputStream":
        """Create a stream over a plain writable object, without colour."""

        return cls(PlainStream(file), coloring, isatty)

    def write(self, text: str) -> int:
        return self.inner.write(text)

    def flush(self) -> None:
        self.inner.flush()

    def set_color(self, style: Style) -> None:
        self.inner.set_color(style)

    def reset(self) -> None:
        self.inner.reset()

    def supports_color(self) -> bool:
        return self.inner.supports_color()

    def rich_console(self) -> Console:
        """Return a Rich console rendering to this stream under its colour policy.

        Plain sinks get a console without colour.
        """
        if isinstance(self.inner, ColorStream):
            return self.inner.console
        return _build_console(self.inner.file, ColorChoice.NEVER, stderr=False)

    def is_a_terminal(self) -> bool:
        return self.isatty

    def __repr__(self) -> str:
        return f"OutputStream(coloring={self.coloring.value}, isatty={self.isatty})"


__all__ = [
    "ColorChoice",
    "ColorStream",
    "InputStream",
    "NullSink",
    "OutputStream",
    "PlainStream",
    "TextSource",
    "WriteColor",
    "WriteStream",
]
