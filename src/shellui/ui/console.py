"""Where: src/shellui/ui/console.py
What: Console (shell) backed UI implementing the writer and reader contracts.
Why: Callers get one object for styled output, prompts and progress bars.
Assumptions: - One UI owns its shell; callers serialize access themselves.
Trade-offs: - Prompts and the editor block indefinitely; nothing times out.
"""

from __future__ import annotations

import io
import os
import subprocess
import sys
import uuid
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TextIO, final

from shellui.config.paths import edit_scratch_dir
from shellui.config.settings import EDITOR_ENVVAR, UISettings, env_value
from shellui.platform.logging import logger
from shellui.shared.errors import EditStatusError, EditorEnvError
from shellui.shared.status import UIColor
from shellui.ui.progress import ConsoleProgressBar
from shellui.ui.reader import UIReader
from shellui.ui.shell import Shell
from shellui.ui.streams import (
    ColorChoice,
    InputStream,
    NullSink,
    OutputStream,
    TextSource,
)
from shellui.ui.writer import UIWriter, color_style, print_styled

_SCRATCH_PREFIX = "_shellui_"
_SCRATCH_SUFFIX = ".tmp"


@contextmanager
def _scratch_file() -> Iterator[Path]:
    """Yield a uniquely named temporary path, removing it on every exit path."""

    path = edit_scratch_dir() / f"{_SCRATCH_PREFIX}{uuid.uuid4()}{_SCRATCH_SUFFIX}"
    try:
        yield path
    finally:
        path.unlink(missing_ok=True)


@final
class UI(UIWriter, UIReader):
    """Console (shell) backed UI."""

    shell: Shell

    def __init__(self, shell: Shell) -> None:
        self.shell = shell

    @classmethod
    def default_with(cls, coloring: ColorChoice, isatty: bool | None) -> "UI":
        """Create a UI over the process streams with a colour policy and tty hint."""

        return cls(Shell.default_with(coloring, isatty))

    @classmethod
    def default(cls) -> "UI":
        return cls.default_with(ColorChoice.AUTO, None)

    @classmethod
    def default_with_env(cls, env: Mapping[str, str] | None = None) -> "UI":
        """Create a UI whose tty hint and colour policy come from the environment.

        ``SHELLUI_NONINTERACTIVE`` forces every stream to be treated as a
        non-terminal; ``SHELLUI_NOCOLORING`` disables colour.
        """
        settings = UISettings.from_env(env)
        isatty = False if settings.noninteractive else None
        coloring = ColorChoice.NEVER if settings.no_coloring else ColorChoice.AUTO

        ui = cls.default_with(coloring, isatty)
        logger.debug("%r", ui)
        return ui

    @classmethod
    def with_streams(
        cls,
        stdin: TextSource,
        stdout: TextIO,
        stderr: TextIO,
        coloring: ColorChoice,
        isatty: bool,
    ) -> "UI":
        """Create a UI from arbitrary text streams; output streams carry no colour."""

        return cls(
            Shell(
                InputStream(stdin, isatty),
                OutputStream.from_write(stdout, coloring, isatty),
                OutputStream.from_write(stderr, coloring, isatty),
            )
        )

    @classmethod
    def with_sinks(cls) -> "UI":
        """Create a UI with empty input and output discarded, like ``/dev/null``."""

        return cls.with_streams(io.StringIO(""), NullSink(), NullSink(), ColorChoice.NEVER, False)

    def __repr__(self) -> str:
        return f"UI(shell={self.shell!r})"

    # Writer -----------------------------------------------------------------

    def out(self) -> OutputStream:
        return self.shell.out

    def err(self) -> OutputStream:
        return self.shell.err

    def is_out_a_terminal(self) -> bool:
        return self.shell.out.is_a_terminal()

    def is_err_a_terminal(self) -> bool:
        return self.shell.err.is_a_terminal()

    def progress(self) -> ConsoleProgressBar | None:
        if self.is_out_a_terminal():
            return ConsoleProgressBar(self.shell.out.rich_console())
        return None

    # Reader -----------------------------------------------------------------

    def is_a_tty(self) -> bool:
        return self.shell.input.isatty and self.shell.out.isatty and self.shell.err.isatty

    def _read_response(self, has_default: bool) -> str:
        """Read one line; end of input counts as an empty answer only when a default exists."""

        response = self.shell.input.readline()
        if response == "" and not has_default:
            raise EOFError("Input ended before an answer was given")
        return response

    def prompt_yes_no(self, question: str, default: bool | None = None) -> bool:
        stream = self.shell.out
        if default is True:
            prefix, default_text, suffix = "[", "Yes", "/no/quit]"
        elif default is False:
            prefix, default_text, suffix = "[yes/", "No", "/quit]"
        else:
            prefix, default_text, suffix = "[yes/no/quit]", "", ""

        plain = color_style(UIColor.PLAIN)
        while True:
            print_styled(stream, question, color_style(UIColor.IMPORTANT))
            print_styled(stream, f" {prefix}", plain)
            print_styled(stream, default_text, color_style(UIColor.PLAIN, bold=True))
            print_styled(stream, f"{suffix} ", plain)

            answer = self._read_response(default is not None).strip()[:1]
            if answer in ("y", "Y"):
                return True
            if answer in ("n", "N"):
                return False
            if answer in ("q", "Q"):
                logger.debug("Quit selected at prompt: %s", question)
                sys.exit(0)
            if not answer and default is not None:
                return default

    def prompt_ask(self, question: str, default: str | None = None) -> str:
        stream = self.shell.out
        plain = color_style(UIColor.PLAIN)
        while True:
            print_styled(stream, question, color_style(UIColor.IMPORTANT))
            _ = stream.write(": ")
            if default is not None:
                print_styled(stream, "[default: ", plain)
                print_styled(stream, default, color_style(UIColor.PLAIN, bold=True))
                print_styled(stream, "]", plain)
            _ = stream.write(" ")
            stream.flush()

            response = self._read_response(default is not None).strip()
            if not response:
                if default is not None:
                    return default
                continue
            return response

    def edit(self, contents: Sequence[Any]) -> str:
        """Open ``$EDITOR`` on a scratch file seeded with ``contents``.

        Raises:
            EditorEnvError: If no editor is configured.
            EditStatusError: If the editor exits unsuccessfully.
            OSError: If the scratch file cannot be written or read, or the
                editor cannot be started.
        """
        editor = env_value(EDITOR_ENVVAR)
        if not editor:
            raise EditorEnvError(EDITOR_ENVVAR)

        with _scratch_file() as path:
            with path.open("w", encoding="utf-8") as handle:
                if contents:
                    for item in contents:
                        _ = handle.write(str(item))
                    handle.flush()
                    os.fsync(handle.fileno())

            completed = subprocess.run([editor, str(path)], check=False)
            if completed.returncode != 0:
                logger.debug("Failed edit with status: %s", completed.returncode)
                raise EditStatusError(completed.returncode)

            return path.read_text(encoding="utf-8")


__all__ = ["UI"]
