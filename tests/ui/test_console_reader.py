"""Tests for the interactive reader operations of the console UI."""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from pytest_mock import MockerFixture

from shellui.config.settings import EDITOR_ENVVAR
from shellui.shared.errors import EditStatusError, EditorEnvError, UIError

MakeUI = Callable[..., Any]


@pytest.mark.parametrize(
    ("answer", "default", "expected"),
    [
        ("y\n", None, True),
        ("Yes please\n", False, True),
        ("n\n", True, False),
        ("NO\n", None, False),
        ("\n", True, True),
        ("\n", False, False),
        ("   \n", True, True),
    ],
)
def test_prompt_yes_no_answers(
    make_ui: MakeUI, answer: str, default: bool | None, expected: bool
) -> None:
    captured = make_ui(answer)

    assert captured.ui.prompt_yes_no("Continue?", default) is expected


def test_prompt_yes_no_renders_default_hint(make_ui: MakeUI) -> None:
    captured = make_ui("\n\n")

    _ = captured.ui.prompt_yes_no("Deploy?", True)
    _ = captured.ui.prompt_yes_no("Delete?", False)

    assert captured.stdout.getvalue() == "Deploy? [Yes/no/quit] Delete? [yes/No/quit] "


def test_prompt_yes_no_reprompts_until_answered(make_ui: MakeUI) -> None:
    captured = make_ui("\nmaybe\ny\n")

    assert captured.ui.prompt_yes_no("Proceed?") is True
    assert captured.stdout.getvalue() == "Proceed? [yes/no/quit] " * 3


def test_prompt_yes_no_quit_exits_cleanly(make_ui: MakeUI) -> None:
    captured = make_ui("q\n")

    with pytest.raises(SystemExit) as exc_info:
        _ = captured.ui.prompt_yes_no("Proceed?", True)

    assert exc_info.value.code == 0


def test_prompt_yes_no_end_of_input_uses_default(make_ui: MakeUI) -> None:
    assert make_ui("").ui.prompt_yes_no("Proceed?", False) is False


def test_prompt_yes_no_end_of_input_without_default_raises(make_ui: MakeUI) -> None:
    with pytest.raises(EOFError):
        _ = make_ui("").ui.prompt_yes_no("Proceed?")


def test_prompt_ask_returns_trimmed_answer(make_ui: MakeUI) -> None:
    captured = make_ui("  bar  \n")

    assert captured.ui.prompt_ask("Name", "foo") == "bar"
    assert captured.stdout.getvalue() == "Name: [default: foo] "


def test_prompt_ask_falls_back_to_default(make_ui: MakeUI) -> None:
    assert make_ui("\n").ui.prompt_ask("Name", "foo") == "foo"
    assert make_ui("").ui.prompt_ask("Name", "foo") == "foo"


def test_prompt_ask_reprompts_without_default(make_ui: MakeUI) -> None:
    captured = make_ui("\n  \nvalue\n")

    assert captured.ui.prompt_ask("Token") == "value"
    assert captured.stdout.getvalue() == "Token:  " * 3


def test_prompt_ask_end_of_input_without_default_raises(make_ui: MakeUI) -> None:
    with pytest.raises(EOFError):
        _ = make_ui("\n").ui.prompt_ask("Token")


def test_is_a_tty_requires_every_stream(make_ui: MakeUI) -> None:
    assert make_ui(isatty=True).ui.is_a_tty() is True

    ui = make_ui(isatty=True).ui
    ui.shell.err.isatty = False
    assert ui.is_a_tty() is False
    assert make_ui(isatty=False).ui.is_a_tty() is False


class TestEdit:
    """Editor round trips through a scratch file."""

    @pytest.fixture(autouse=True)
    def scratch_dir(self, tmp_path: Path, mocker: MockerFixture) -> Path:
        _ = mocker.patch("shellui.ui.console.edit_scratch_dir", return_value=tmp_path)
        return tmp_path

    def test_missing_editor_raises(self, make_ui: MakeUI) -> None:
        with pytest.raises(EditorEnvError) as exc_info:
            _ = make_ui().ui.edit(["text"])

        assert isinstance(exc_info.value, UIError)
        assert exc_info.value.envvar == EDITOR_ENVVAR

    def test_empty_editor_counts_as_missing(
        self, make_ui: MakeUI, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(EDITOR_ENVVAR, "")

        with pytest.raises(EditorEnvError):
            _ = make_ui().ui.edit([])

    def test_returns_edited_text_and_removes_scratch_file(
        self,
        make_ui: MakeUI,
        monkeypatch: pytest.MonkeyPatch,
        mocker: MockerFixture,
        scratch_dir: Path,
    ) -> None:
        monkeypatch.setenv(EDITOR_ENVVAR, "fake-editor")
        seen: dict[str, str] = {}

        def fake_editor(args: list[str], check: bool) -> subprocess.CompletedProcess[bytes]:
            path = Path(args[1])
            seen["before"] = path.read_text(encoding="utf-8")
            _ = path.write_text("edited text\n", encoding="utf-8")
            return subprocess.CompletedProcess(args, 0)

        mock_run = mocker.patch("shellui.ui.console.subprocess.run", side_effect=fake_editor)

        result = make_ui().ui.edit(["line one\n", 2, "\n"])

        assert result == "edited text\n"
        assert seen["before"] == "line one\n2\n"
        editor, path = mock_run.call_args.args[0]
        assert editor == "fake-editor"
        assert Path(path).name.startswith("_shellui_")
        assert Path(path).suffix == ".tmp"
        assert list(scratch_dir.iterdir()) == []

    def test_empty_contents_start_blank(
        self, make_ui: MakeUI, monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture
    ) -> None:
        monkeypatch.setenv(EDITOR_ENVVAR, "fake-editor")
        seen: list[str] = []

        def fake_editor(args: list[str], check: bool) -> subprocess.CompletedProcess[bytes]:
            seen.append(Path(args[1]).read_text(encoding="utf-8"))
            return subprocess.CompletedProcess(args, 0)

        _ = mocker.patch("shellui.ui.console.subprocess.run", side_effect=fake_editor)

        assert make_ui().ui.edit([]) == ""
        assert seen == [""]

    def test_failed_editor_raises_with_status(
        self,
        make_ui: MakeUI,
        monkeypatch: pytest.MonkeyPatch,
        mocker: MockerFixture,
        scratch_dir: Path,
    ) -> None:
        monkeypatch.setenv(EDITOR_ENVVAR, "fake-editor")
        _ = mocker.patch(
            "shellui.ui.console.subprocess.run",
            return_value=subprocess.CompletedProcess(["fake-editor"], 3),
        )

        with pytest.raises(EditStatusError) as exc_info:
            _ = make_ui().ui.edit(["draft"])

        assert exc_info.value.returncode == 3
        assert list(scratch_dir.iterdir()) == []

    def test_unreadable_result_cleans_up(
        self,
        make_ui: MakeUI,
        monkeypatch: pytest.MonkeyPatch,
        mocker: MockerFixture,
        scratch_dir: Path,
    ) -> None:
        monkeypatch.setenv(EDITOR_ENVVAR, "fake-editor")

        def deleting_editor(args: list[str], check: bool) -> subprocess.CompletedProcess[bytes]:
            Path(args[1]).unlink()
            return subprocess.CompletedProcess(args, 0)

        _ = mocker.patch("shellui.ui.console.subprocess.run", side_effect=deleting_editor)

        with pytest.raises(FileNotFoundError):
            _ = make_ui().ui.edit(["draft"])

        assert list(scratch_dir.iterdir()) == []
