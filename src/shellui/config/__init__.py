"""Configuration facade: environment settings and path helpers."""

from __future__ import annotations

from .paths import default_log_file, edit_scratch_dir, resolve_overridable_path
from .settings import (
    EDITOR_ENVVAR,
    LOG_FILE_ENVVAR,
    NOCOLORING_ENVVAR,
    NONINTERACTIVE_ENVVAR,
    SYMBOL_STYLE_ENVVAR,
    UISettings,
    env_flag,
    env_value,
)

__all__ = [
    "EDITOR_ENVVAR",
    "LOG_FILE_ENVVAR",
    "NOCOLORING_ENVVAR",
    "NONINTERACTIVE_ENVVAR",
    "SYMBOL_STYLE_ENVVAR",
    "UISettings",
    "default_log_file",
    "edit_scratch_dir",
    "env_flag",
    "env_value",
    "resolve_overridable_path",
]
