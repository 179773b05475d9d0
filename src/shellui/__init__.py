"""shellui: console output and input abstraction for command-line tools."""

from shellui.ui import (
    UI,
    ColorChoice,
    CustomStatus,
    Glyph,
    Shell,
    Status,
    UIReader,
    UIWriter,
)

__version__ = "0.1.0"

__all__ = [
    "ColorChoice",
    "CustomStatus",
    "Glyph",
    "Shell",
    "Status",
    "UI",
    "UIReader",
    "UIWriter",
    "__version__",
]
