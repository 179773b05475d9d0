"""Where: src/shellui/shared/symbols.py
What: Map abstract glyph identifiers to text for the active symbol theme.
Why: Consoles differ in the unicode they can render, so glyphs are themed.
Assumptions: - The style override is re-read on every lookup so tests can flip it.
Trade-offs: - An unknown override quietly falls back to the full theme.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from enum import Enum
from typing import Final

from shellui.config.settings import SYMBOL_STYLE_ENVVAR

from .errors import BadSymbolStyleError


class SymbolStyle(str, Enum):
    """Glyph themes, from richest to most portable."""

    FULL = "full"
    LIMITED = "limited"
    ASCII = "ascii"

    @staticmethod
    def from_str(value: str) -> "SymbolStyle":
        """Translate a user supplied style name (case-insensitive)."""

        normalized = value.lower()
        for style in SymbolStyle:
            if style.value == normalized:
                return style
        raise BadSymbolStyleError(value)

    @staticmethod
    def default() -> "SymbolStyle":
        return SymbolStyle.FULL


def platform_symbol_style(platform: str | None = None) -> SymbolStyle:
    """Return the default style for ``platform`` (defaults to ``sys.platform``).

    The Windows console lacks reliable rendering for the full theme.
    """

    current = platform if platform is not None else sys.platform
    if current == "win32":
        return SymbolStyle.LIMITED
    return SymbolStyle.default()


def resolve_symbol_style(
    env: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> SymbolStyle:
    """Resolve the active symbol style.

    Args:
        env: Optional mapping consulted instead of ``os.environ``.
        platform: Optional platform name consulted instead of ``sys.platform``.

    Returns:
        SymbolStyle: The override when present and valid, the full theme when
        present but invalid, otherwise the platform default.
    """

    mapping = env if env is not None else os.environ
    override = mapping.get(SYMBOL_STYLE_ENVVAR)
    if override is not None:
        try:
            return SymbolStyle.from_str(override)
        except BadSymbolStyleError:
            return SymbolStyle.default()
    return platform_symbol_style(platform)


class Glyph(Enum):
    """Abstract symbols rendered differently per theme."""

    UP_ARROW = "up_arrow"
    FINGER_POINT = "finger_point"
    CHECK_MARK = "check_mark"
    BOXED_CHECK_MARK = "boxed_check_mark"
    OMEGA = "omega"
    BOXED_X = "boxed_x"
    RIGHT_ARROW = "right_arrow"
    CLOUD = "cloud"
    DOWN_ARROW = "down_arrow"
    ELLIPSES = "ellipses"
    DOTTED_TRIANGLE = "dotted_triangle"
    RIGHT_SHIFT = "right_shift"
    STAR = "star"
    SLASHED_ZERO = "slashed_zero"
    ERROR_X = "error_x"

    def render(self, style: SymbolStyle) -> str:
        """Return the text for this glyph in ``style``."""

        return GLYPH_TABLE[style][self]

    def to_str(
        self,
        env: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> str:
        """Return the text for this glyph in the currently active style."""

        return self.render(resolve_symbol_style(env, platform))

    def __str__(self) -> str:
        return self.to_str()


GLYPH_TABLE: Final[Mapping[SymbolStyle, Mapping[Glyph, str]]] = {
    SymbolStyle.ASCII: {
        Glyph.UP_ARROW: "^",
        Glyph.FINGER_POINT: "->",
        Glyph.CHECK_MARK: "[x]",
        Glyph.BOXED_CHECK_MARK: "#",
        Glyph.OMEGA: "->",
        Glyph.BOXED_X: "X",
        Glyph.RIGHT_ARROW: "->",
        Glyph.CLOUD: "->",
        Glyph.DOWN_ARROW: ">",
        Glyph.ELLIPSES: "...",
        Glyph.DOTTED_TRIANGLE: "?",
        Glyph.RIGHT_SHIFT: ">>",
        Glyph.STAR: "*",
        Glyph.SLASHED_ZERO: "0",
        Glyph.ERROR_X: "XXX",
    },
    SymbolStyle.LIMITED: {
        Glyph.UP_ARROW: "↑",
        Glyph.FINGER_POINT: "→",
        Glyph.CHECK_MARK: "√",
        Glyph.BOXED_CHECK_MARK: "⌂",
        Glyph.OMEGA: "Ω",
        Glyph.BOXED_X: "░",
        Glyph.RIGHT_ARROW: "→",
        Glyph.CLOUD: "⌂",
        Glyph.DOWN_ARROW: "↓",
        Glyph.ELLIPSES: "…",
        Glyph.DOTTED_TRIANGLE: "‼",
        Glyph.RIGHT_SHIFT: "»",
        Glyph.STAR: "≡",
        Glyph.SLASHED_ZERO: "Ø",
        Glyph.ERROR_X: "XXX",
    },
    SymbolStyle.FULL: {
        Glyph.UP_ARROW: "↑",
        Glyph.FINGER_POINT: "☛",
        Glyph.CHECK_MARK: "√",
        Glyph.BOXED_CHECK_MARK: "☑",
        Glyph.OMEGA: "Ω",
        Glyph.BOXED_X: "☒",
        Glyph.RIGHT_ARROW: "→",
        Glyph.CLOUD: "☁",
        Glyph.DOWN_ARROW: "↓",
        Glyph.ELLIPSES: "…",
        Glyph.DOTTED_TRIANGLE: "∵",
        Glyph.RIGHT_SHIFT: "»",
        Glyph.STAR: "★",
        Glyph.SLASHED_ZERO: "Ø",
        Glyph.ERROR_X: "✗✗✗",
    },
}


__all__ = [
    "GLYPH_TABLE",
    "Glyph",
    "SymbolStyle",
    "platform_symbol_style",
    "resolve_symbol_style",
]
