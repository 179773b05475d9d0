"""Shared path utilities for log files and editor scratch files.

Policy:
- Log file: only when ``SHELLUI_LOG_FILE`` (or an explicit path) is given.
- Editor scratch files: the interpreter's temporary directory.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Callable

from shellui.config.settings import LOG_FILE_ENVVAR


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path | None],
) -> Path | None:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    if default_path is None:
        return None
    return default_path.expanduser().resolve()


def default_log_file(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the log file path, or ``None`` when file logging is disabled."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=LOG_FILE_ENVVAR,
        default_factory=lambda: None,
    )


def edit_scratch_dir() -> Path:
    """Get the directory holding temporary files handed to the editor."""

    return Path(tempfile.gettempdir())


__all__ = [
    "default_log_file",
    "edit_scratch_dir",
    "resolve_overridable_path",
]
