"""Where: src/shellui/config/settings.py
What: Environment-driven runtime settings for the console UI.
Why: Keep environment variable names and parsing in one place, read lazily.
Assumptions: - The environment may change between calls (tests mutate it).
Trade-offs: - Nothing is cached, every lookup re-reads the mapping.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

# Environment variable names --------------------------------------------------

NONINTERACTIVE_ENVVAR: Final[str] = "SHELLUI_NONINTERACTIVE"
NOCOLORING_ENVVAR: Final[str] = "SHELLUI_NOCOLORING"
SYMBOL_STYLE_ENVVAR: Final[str] = "SHELLUI_SYMBOL_STYLE"
LOG_FILE_ENVVAR: Final[str] = "SHELLUI_LOG_FILE"
EDITOR_ENVVAR: Final[str] = "EDITOR"

# String booleans accepted for flag variables.
_TRUTHY_VALUES: Final[frozenset[str]] = frozenset({"1", "true"})


def _environ(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return env if env is not None else os.environ


def env_flag(name: str, env: Mapping[str, str] | None = None) -> bool:
    """Return whether ``name`` is set to one of the accepted truthy values.

    Args:
        name: Environment variable to inspect.
        env: Optional mapping used instead of ``os.environ``.

    Returns:
        bool: ``True`` only for the exact values ``"1"`` and ``"true"``.
    """

    return _environ(env).get(name) in _TRUTHY_VALUES


def env_value(name: str, env: Mapping[str, str] | None = None) -> str | None:
    """Return the raw value of ``name`` or ``None`` when unset."""

    return _environ(env).get(name)


@dataclass(slots=True, frozen=True)
class UISettings:
    """Snapshot of the environment switches consulted by the UI."""

    noninteractive: bool
    no_coloring: bool
    symbol_style: str | None
    editor: str | None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "UISettings":
        """Build a settings snapshot from ``env`` (defaults to ``os.environ``)."""

        return cls(
            noninteractive=env_flag(NONINTERACTIVE_ENVVAR, env),
            no_coloring=env_flag(NOCOLORING_ENVVAR, env),
            symbol_style=env_value(SYMBOL_STYLE_ENVVAR, env),
            editor=env_value(EDITOR_ENVVAR, env),
        )


__all__ = [
    "EDITOR_ENVVAR",
    "LOG_FILE_ENVVAR",
    "NOCOLORING_ENVVAR",
    "NONINTERACTIVE_ENVVAR",
    "SYMBOL_STYLE_ENVVAR",
    "UISettings",
    "env_flag",
    "env_value",
]
