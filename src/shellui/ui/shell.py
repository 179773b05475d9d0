"""A shell bundles the input stream with the standard and error output streams."""

from __future__ import annotations

from shellui.ui.streams import ColorChoice, InputStream, OutputStream


class Shell:
    """Owns exactly one input stream and two output streams."""

    input: InputStream
    out: OutputStream
    err: OutputStream

    def __init__(self, input: InputStream, out: OutputStream, err: OutputStream) -> None:
        self.input = input
        self.out = out
        self.err = err

    @classmethod
    def default_with(cls, coloring: ColorChoice, isatty: bool | None) -> "Shell":
        """Build a shell over the process standard streams.

        Args:
            coloring: Colour policy for both output streams.
            isatty: Terminal override for every stream; ``None`` detects each one.
        """
        return cls(
            InputStream.from_stdin(isatty),
            OutputStream.from_stdout(coloring, isatty),
            OutputStream.from_stderr(coloring, isatty),
        )

    @classmethod
    def default(cls) -> "Shell":
        return cls.default_with(ColorChoice.AUTO, None)

    def __repr__(self) -> str:
        return f"Shell(input={self.input!r}, out={self.out!r}, err={self.err!r})"


__all__ = ["Shell"]
