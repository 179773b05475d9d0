"""Rich logging handler that prefixes records with the active glyph theme."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from shellui.shared.status import UIColor
from shellui.shared.symbols import Glyph


class ShellRichHandler(RichHandler):
    """Rich handler rendering one glyph-prefixed line per record."""

    _LEVEL_STYLES: ClassVar[dict[int, tuple[Glyph, UIColor]]] = {
        logging.DEBUG: (Glyph.ELLIPSES, UIColor.PLAIN),
        logging.INFO: (Glyph.RIGHT_ARROW, UIColor.INFO),
        logging.WARNING: (Glyph.SLASHED_ZERO, UIColor.WARN),
        logging.ERROR: (Glyph.ERROR_X, UIColor.CRITICAL),
        logging.CRITICAL: (Glyph.ERROR_X, UIColor.CRITICAL),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False  # the glyph stands in for the level column
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def level_style(cls, levelno: int) -> tuple[Glyph, UIColor]:
        """Return the glyph and colour for the nearest known level at or below ``levelno``."""

        chosen = cls._LEVEL_STYLES[logging.DEBUG]
        for threshold in sorted(cls._LEVEL_STYLES):
            if levelno >= threshold:
                chosen = cls._LEVEL_STYLES[threshold]
        return chosen

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render the message prefixed by its level glyph."""

        glyph, color = self.level_style(record.levelno)
        text = Text()
        _ = text.append(f"{glyph.to_str()} ", style=Style(color=color.to_color(), bold=True))
        _ = text.append(message, style=Style(color=color.to_color()))
        return text


__all__ = ["ShellRichHandler"]
