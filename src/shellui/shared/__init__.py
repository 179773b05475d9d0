"""Shared value objects: glyph themes, status catalog and error kinds."""

from __future__ import annotations

from .errors import BadSymbolStyleError, EditStatusError, EditorEnvError, UIError
from .status import STATUS_TABLE, AnyStatus, CustomStatus, Status, UIColor, status_parts
from .symbols import (
    GLYPH_TABLE,
    Glyph,
    SymbolStyle,
    platform_symbol_style,
    resolve_symbol_style,
)

__all__ = [
    "AnyStatus",
    "BadSymbolStyleError",
    "CustomStatus",
    "EditStatusError",
    "EditorEnvError",
    "GLYPH_TABLE",
    "Glyph",
    "STATUS_TABLE",
    "Status",
    "SymbolStyle",
    "UIColor",
    "UIError",
    "platform_symbol_style",
    "resolve_symbol_style",
    "status_parts",
]
