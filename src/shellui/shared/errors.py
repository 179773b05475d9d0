"""Summary: Error kinds raised by the console UI layer.
Why: Give callers distinct, catchable failures for editor and theme problems."""

from __future__ import annotations


class UIError(Exception):
    """Base class for console UI failures that are not plain I/O errors."""


class EditorEnvError(UIError):
    """The editor environment variable is not set."""

    def __init__(self, envvar: str) -> None:
        self.envvar = envvar
        super().__init__(f"Environment variable {envvar} must be set to an editor command")


class EditStatusError(UIError):
    """The editor process exited unsuccessfully."""

    def __init__(self, returncode: int) -> None:
        self.returncode = returncode
        super().__init__(f"Editor exited with non-zero status {returncode}")


class BadSymbolStyleError(UIError, ValueError):
    """An unknown symbol style name was supplied."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unsupported symbol style '{value}'. Valid options: full, limited, ascii")


__all__ = ["BadSymbolStyleError", "EditStatusError", "EditorEnvError", "UIError"]
