"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and the custom Rich handler.
Why: Provide a single canonical import path.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import ShellRichHandler

__all__ = [
    "LOGGER_NAME",
    "ShellRichHandler",
    "logger",
    "setup_logger",
]
