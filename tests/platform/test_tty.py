"""Tests for best-effort terminal detection."""

from __future__ import annotations

import io
import sys

import pytest
from pytest_mock import MockerFixture

from shellui.platform.tty import StdStream, isatty


class _FakeHandle:
    """Stream stand-in exposing only a descriptor."""

    def __init__(self, fd: int) -> None:
        self._fd = fd

    def fileno(self) -> int:
        return self._fd


def test_replaced_stream_without_descriptor_is_not_a_terminal(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(sys, "stdout", io.StringIO())

    assert isatty(StdStream.STDOUT) is False


def test_missing_stream_is_not_a_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdin", None)

    assert isatty(StdStream.STDIN) is False


def test_descriptor_is_checked_with_os_isatty(
    monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture
) -> None:
    monkeypatch.setattr(sys, "stderr", _FakeHandle(2))
    mock_isatty = mocker.patch("shellui.platform.tty.os.isatty", return_value=True)

    assert isatty(StdStream.STDERR) is True
    mock_isatty.assert_called_once_with(2)


def test_detection_failure_degrades_to_false(
    monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture
) -> None:
    monkeypatch.setattr(sys, "stdout", _FakeHandle(99))
    _ = mocker.patch("shellui.platform.tty.os.isatty", side_effect=OSError("bad descriptor"))

    assert isatty(StdStream.STDOUT) is False


def test_std_stream_descriptors() -> None:
    assert [stream.fd for stream in StdStream] == [0, 1, 2]
