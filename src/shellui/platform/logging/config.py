"""Shared ``shellui`` logger and its handler bootstrap.

Where: platform/logging/config.py
What: Attach the glyph-prefixed Rich console handler and an optional rotating file.
Why: Diagnostics stay on stderr, apart from the UI's own output streams.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from shellui.config.paths import default_log_file

from .handlers import ShellRichHandler

LOGGER_NAME: Final[str] = "shellui"
_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the shared logger, replacing any previous handlers.

    Args:
        log_file: Log file path. When omitted, ``SHELLUI_LOG_FILE`` is consulted
            at call time; without either only the console handler is attached.
        console_level: Threshold for the stderr handler.
        file_level: Threshold for the file handler.

    Returns:
        logging.Logger: The ``shellui`` logger.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console_handler = ShellRichHandler(console=Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    target = log_file if log_file is not None else default_log_file()
    if target is not None:
        target = Path(target).expanduser().resolve()
        target.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            target,
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_LOG_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
