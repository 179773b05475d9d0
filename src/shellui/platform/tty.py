"""Where: src/shellui/platform/tty.py
What: Best-effort detection of whether a standard stream is a terminal.
Why: Stream construction must never fail because the check is unavailable.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TextIO

from shellui.platform.logging import logger


class StdStream(Enum):
    """Standard process streams."""

    STDIN = 0
    STDOUT = 1
    STDERR = 2

    @property
    def fd(self) -> int:
        """Conventional descriptor number for the stream."""

        return self.value

    def handle(self) -> TextIO | None:
        """Return the interpreter's current object for this stream, if any."""

        if self is StdStream.STDIN:
            return sys.stdin
        if self is StdStream.STDOUT:
            return sys.stdout
        return sys.stderr


def isatty(stream: StdStream) -> bool:
    """Return whether ``stream`` is attached to an interactive terminal.

    The interpreter's stream object is consulted first so that replaced
    streams (pytest capture, redirection in-process) report their own
    answer. Any failure degrades to ``False``.
    """

    handle = stream.handle()
    if handle is None:
        return False
    try:
        fd = handle.fileno()
    except (OSError, ValueError, AttributeError):
        # Replaced by an object without a descriptor, e.g. io.StringIO.
        return False
    try:
        return os.isatty(fd)
    except OSError as exc:
        logger.debug("Terminal detection failed for %s: %s", stream.name, exc)
        return False


__all__ = ["StdStream", "isatty"]
