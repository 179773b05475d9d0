"""Summary: The interactive reader contract for soliciting operator input.
Why: Commands ask questions without knowing where answers come from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class UIReader(ABC):
    """Functions applied to an input stream for receiving input for a UI."""

    @abstractmethod
    def edit(self, contents: Sequence[Any]) -> str:
        """Open the operator's editor seeded with ``contents`` and return the result."""

    @abstractmethod
    def is_a_tty(self) -> bool:
        """Return True if reads should expect the source to be a terminal."""

    @abstractmethod
    def prompt_ask(self, question: str, default: str | None = None) -> str:
        """Ask a free-form question, returning the trimmed answer or ``default``."""

    @abstractmethod
    def prompt_yes_no(self, question: str, default: bool | None = None) -> bool:
        """Ask a yes/no/quit question; quitting exits the process successfully."""


__all__ = ["UIReader"]
