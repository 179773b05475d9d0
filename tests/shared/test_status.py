"""Tests for the status catalog."""

from __future__ import annotations

import pytest

from shellui.shared.status import (
    STATUS_TABLE,
    CustomStatus,
    Status,
    UIColor,
    status_parts,
)
from shellui.shared.symbols import Glyph


def test_catalog_covers_every_status() -> None:
    assert set(STATUS_TABLE) == set(Status)


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (Status.ADDED, (Glyph.UP_ARROW, "Added", UIColor.INFO)),
        (Status.CREATING, (Glyph.OMEGA, "Creating", UIColor.INFO)),
        (Status.DELETING, (Glyph.BOXED_X, "Deleting", UIColor.INFO)),
        (Status.DRY_RUN_DELETING, (Glyph.BOXED_X, "Would be deleted (Dry run)", UIColor.CRITICAL)),
        (Status.FOUND, (Glyph.RIGHT_ARROW, "Found", UIColor.IMPORTANT)),
        (Status.MISSING, (Glyph.DOTTED_TRIANGLE, "Missing", UIColor.CRITICAL)),
        (Status.PROMOTED, (Glyph.CHECK_MARK, "Promoted", UIColor.INFO)),
        (Status.SIGNING, (Glyph.FINGER_POINT, "Signing", UIColor.IMPORTANT)),
        (Status.SKIPPING, (Glyph.ELLIPSES, "Skipping", UIColor.INFO)),
    ],
    ids=lambda value: value.name if isinstance(value, Status) else None,
)
def test_parts_match_catalog(status: Status, expected: tuple[Glyph, str, UIColor]) -> None:
    assert status.parts() == expected
    assert status_parts(status) == expected


def test_labels_are_title_case_except_dry_run() -> None:
    for status in Status:
        _, label, _ = status.parts()
        if status is Status.DRY_RUN_DELETING:
            continue
        assert label == status.value.capitalize()


def test_custom_status_passes_through_with_info_color() -> None:
    custom = CustomStatus(Glyph.CLOUD, "Syncing")

    assert custom.parts() == (Glyph.CLOUD, "Syncing", UIColor.INFO)
    assert status_parts(custom) == (Glyph.CLOUD, "Syncing", UIColor.INFO)


def test_from_user_input_normalizes_names() -> None:
    assert Status.from_user_input("Promoted") is Status.PROMOTED
    assert Status.from_user_input(" dry-run-deleting ") is Status.DRY_RUN_DELETING

    with pytest.raises(ValueError, match="Unsupported status"):
        _ = Status.from_user_input("exploding")


def test_colors_map_to_terminal_colors() -> None:
    assert UIColor.PLAIN.to_color() == "white"
    assert UIColor.INFO.to_color() == "green"
    assert UIColor.IMPORTANT.to_color() == "cyan"
    assert UIColor.WARN.to_color() == "yellow"
    assert UIColor.CRITICAL.to_color() == "red"
    assert UIColor.END.to_color() == "magenta"
