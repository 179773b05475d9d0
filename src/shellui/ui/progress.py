"""Progress display for sized byte transfers.

A progress bar here is a generic byte sink: transfer code declares the total
size once, then writes each chunk it moves. The bar counts the bytes and
signals completion when the declared total is reached.
"""

from __future__ import annotations

from typing import Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)

from shellui.platform.logging import logger

_TASK_DESCRIPTION = "    "


@runtime_checkable
class DisplayProgress(Protocol):
    """Sized progress sink handed to long-running transfers."""

    def size(self, total: int) -> None:
        """Declare the number of bytes the transfer will write."""
        ...

    def finish(self) -> None:
        """Signal that the transfer is complete."""
        ...

    def write(self, data: bytes) -> int:
        """Record ``data`` as transferred and return its length."""
        ...

    def flush(self) -> None:
        ...


def _build_progress(console: Console) -> Progress:
    return Progress(
        TextColumn("{task.description}"),
        BarColumn(),
        DownloadColumn(),
        TransferSpeedColumn(),
        TimeRemainingColumn(),
        console=console,
        auto_refresh=False,
        transient=False,
        redirect_stdout=False,
        redirect_stderr=False,
    )


@final
class ConsoleProgressBar:
    """A moving progress bar tracking a sized transfer, similar to wget or curl.

    Completion fires once, when the running byte count equals the declared
    total exactly. A transfer that overshoots the total never completes; the
    live display is released on the first overshooting write instead. Use the
    bar as a context manager so an aborted transfer releases it too.
    """

    console: Console
    progress: Progress
    task_id: TaskID
    total: int
    current: int

    def __init__(self, console: Console | None = None) -> None:
        """Initialize an unsized bar.

        Args:
            console: Console to render on; defaults to standard output.
        """
        self.console = console if console is not None else Console()
        self.progress = _build_progress(self.console)
        self.task_id = self.progress.add_task(_TASK_DESCRIPTION, total=0)
        self.total = 0
        self.current = 0
        self._finished = False
        self._closed = False

    def __enter__(self) -> "ConsoleProgressBar":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def size(self, total: int) -> None:
        self.close()
        self.progress = _build_progress(self.console)
        self.task_id = self.progress.add_task(_TASK_DESCRIPTION, total=total)
        self.total = total
        self._closed = False
        self.progress.start()

    def close(self) -> None:
        """Stop the live display without signalling completion."""

        if self._closed:
            return
        self._closed = True
        self.progress.stop()

    def finish(self) -> None:
        self._finished = True
        self.close()
        self.console.line()
        self.console.file.flush()

    def write(self, data: bytes) -> int:
        written = len(data)
        self.progress.update(self.task_id, advance=written, refresh=not self._closed)
        self.current += written
        if self._finished or self._closed:
            return written
        if self.current == self.total:
            self.finish()
        elif self.current > self.total:
            logger.debug(
                "Progress overshoot: %d bytes written for a total of %d",
                self.current,
                self.total,
            )
            self.close()
        return written

    def flush(self) -> None:
        self.progress.refresh()
        self.console.file.flush()


__all__ = ["ConsoleProgressBar", "DisplayProgress"]
