"""Console UI: shells, streams, and the styled writer / interactive reader contracts."""

from shellui.shared.errors import BadSymbolStyleError, EditStatusError, EditorEnvError, UIError
from shellui.shared.status import CustomStatus, Status, UIColor
from shellui.shared.symbols import Glyph, SymbolStyle
from shellui.ui.console import UI
from shellui.ui.progress import ConsoleProgressBar, DisplayProgress
from shellui.ui.reader import UIReader
from shellui.ui.shell import Shell
from shellui.ui.streams import ColorChoice, InputStream, OutputStream, WriteColor
from shellui.ui.wrap import print_wrapped, wrap
from shellui.ui.writer import UIWriter

__all__ = [
    "BadSymbolStyleError",
    "ColorChoice",
    "ConsoleProgressBar",
    "CustomStatus",
    "DisplayProgress",
    "EditStatusError",
    "EditorEnvError",
    "Glyph",
    "InputStream",
    "OutputStream",
    "Shell",
    "Status",
    "SymbolStyle",
    "UI",
    "UIColor",
    "UIError",
    "UIReader",
    "UIWriter",
    "WriteColor",
    "print_wrapped",
    "wrap",
]
