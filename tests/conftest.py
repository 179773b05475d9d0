"""Shared pytest fixtures for console UI tests."""

from __future__ import annotations

import io
from collections.abc import Callable
from dataclasses import dataclass

import pytest

from shellui.config.settings import (
    EDITOR_ENVVAR,
    LOG_FILE_ENVVAR,
    NOCOLORING_ENVVAR,
    NONINTERACTIVE_ENVVAR,
    SYMBOL_STYLE_ENVVAR,
)
from shellui.ui import UI, ColorChoice


@dataclass
class CapturedUI:
    """A UI wired to in-memory streams plus handles on those streams."""

    ui: UI
    stdin: io.StringIO
    stdout: io.StringIO
    stderr: io.StringIO


@pytest.fixture(autouse=True)
def clean_ui_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove UI-related environment overrides inherited from the host."""

    for name in (
        NONINTERACTIVE_ENVVAR,
        NOCOLORING_ENVVAR,
        SYMBOL_STYLE_ENVVAR,
        EDITOR_ENVVAR,
        LOG_FILE_ENVVAR,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ascii_symbols(monkeypatch: pytest.MonkeyPatch) -> None:
    """Render glyphs in the ASCII theme so assertions stay readable."""

    monkeypatch.setenv(SYMBOL_STYLE_ENVVAR, "ascii")


@pytest.fixture
def make_ui() -> Callable[..., CapturedUI]:
    """Build a UI over ``io.StringIO`` streams seeded with ``input_text``."""

    def _make(input_text: str = "", isatty: bool = False) -> CapturedUI:
        stdin = io.StringIO(input_text)
        stdout = io.StringIO()
        stderr = io.StringIO()
        ui = UI.with_streams(stdin, stdout, stderr, ColorChoice.NEVER, isatty)
        return CapturedUI(ui=ui, stdin=stdin, stdout=stdout, stderr=stderr)

    return _make
