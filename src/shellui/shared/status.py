"""Summary: Semantic statuses and colours used by styled status lines.
Why: Keep the glyph, label and colour of every status in one lookup table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .symbols import Glyph


class UIColor(Enum):
    """Semantic colours, each mapped to one terminal colour."""

    PLAIN = "white"
    INFO = "green"
    IMPORTANT = "cyan"
    WARN = "yellow"
    CRITICAL = "red"
    END = "magenta"

    def to_color(self) -> str:
        """Return the Rich colour name for this semantic colour."""

        return self.value


class Status(Enum):
    """Closed set of semantic states reported by ``UIWriter.status``."""

    APPLYING = "applying"
    ADDED = "added"
    ADDING = "adding"
    CACHED = "cached"
    CANCELED = "canceled"
    CANCELING = "canceling"
    CREATED = "created"
    CREATING = "creating"
    DELETED = "deleted"
    DELETING = "deleting"
    DEMOTED = "demoted"
    DEMOTING = "demoting"
    DETERMINING = "determining"
    DOWNLOADING = "downloading"
    DRY_RUN_DELETING = "dry_run_deleting"
    ENCRYPTED = "encrypted"
    ENCRYPTING = "encrypting"
    EXECUTING = "executing"
    FOUND = "found"
    GENERATED = "generated"
    GENERATING = "generating"
    INSTALLED = "installed"
    MISSING = "missing"
    PROMOTED = "promoted"
    PROMOTING = "promoting"
    SIGNED = "signed"
    SIGNING = "signing"
    SKIPPING = "skipping"
    UPLOADED = "uploaded"
    UPLOADING = "uploading"
    USING = "using"
    VERIFIED = "verified"
    VERIFYING = "verifying"

    def parts(self) -> tuple[Glyph, str, UIColor]:
        """Return the glyph, label and colour for this status."""

        return STATUS_TABLE[self]

    @staticmethod
    def from_user_input(value: str) -> "Status":
        """Translate a CLI status name (``dry-run-deleting``, ``Promoted``...)."""

        normalized = value.strip().lower().replace("-", "_")
        try:
            return Status(normalized)
        except ValueError:
            valid = ", ".join(s.value for s in Status)
            msg = f"Unsupported status '{value}'. Valid options: {valid}"
            raise ValueError(msg) from None


@dataclass(slots=True, frozen=True)
class CustomStatus:
    """Ad-hoc status carrying its own glyph and label."""

    glyph: Glyph
    label: str

    def parts(self) -> tuple[Glyph, str, UIColor]:
        return (self.glyph, self.label, UIColor.INFO)


AnyStatus = Status | CustomStatus


STATUS_TABLE: Final[dict[Status, tuple[Glyph, str, UIColor]]] = {
    Status.APPLYING: (Glyph.UP_ARROW, "Applying", UIColor.INFO),
    Status.ADDED: (Glyph.UP_ARROW, "Added", UIColor.INFO),
    Status.ADDING: (Glyph.FINGER_POINT, "Adding", UIColor.INFO),
    Status.CACHED: (Glyph.BOXED_CHECK_MARK, "Cached", UIColor.INFO),
    Status.CANCELED: (Glyph.CHECK_MARK, "Canceled", UIColor.INFO),
    Status.CANCELING: (Glyph.FINGER_POINT, "Canceling", UIColor.INFO),
    Status.CREATED: (Glyph.CHECK_MARK, "Created", UIColor.INFO),
    Status.CREATING: (Glyph.OMEGA, "Creating", UIColor.INFO),
    Status.DELETED: (Glyph.CHECK_MARK, "Deleted", UIColor.INFO),
    Status.DELETING: (Glyph.BOXED_X, "Deleting", UIColor.INFO),
    Status.DEMOTED: (Glyph.CHECK_MARK, "Demoted", UIColor.INFO),
    Status.DEMOTING: (Glyph.RIGHT_ARROW, "Demoting", UIColor.INFO),
    Status.DETERMINING: (Glyph.CLOUD, "Determining", UIColor.INFO),
    Status.DOWNLOADING: (Glyph.DOWN_ARROW, "Downloading", UIColor.INFO),
    Status.DRY_RUN_DELETING: (Glyph.BOXED_X, "Would be deleted (Dry run)", UIColor.CRITICAL),
    Status.ENCRYPTED: (Glyph.CHECK_MARK, "Encrypted", UIColor.INFO),
    Status.ENCRYPTING: (Glyph.FINGER_POINT, "Encrypting", UIColor.INFO),
    Status.EXECUTING: (Glyph.FINGER_POINT, "Executing", UIColor.INFO),
    Status.FOUND: (Glyph.RIGHT_ARROW, "Found", UIColor.IMPORTANT),
    Status.GENERATED: (Glyph.RIGHT_ARROW, "Generated", UIColor.IMPORTANT),
    Status.GENERATING: (Glyph.FINGER_POINT, "Generating", UIColor.INFO),
    Status.INSTALLED: (Glyph.CHECK_MARK, "Installed", UIColor.INFO),
    Status.MISSING: (Glyph.DOTTED_TRIANGLE, "Missing", UIColor.CRITICAL),
    Status.PROMOTED: (Glyph.CHECK_MARK, "Promoted", UIColor.INFO),
    Status.PROMOTING: (Glyph.RIGHT_ARROW, "Promoting", UIColor.INFO),
    Status.SIGNED: (Glyph.CHECK_MARK, "Signed", UIColor.IMPORTANT),
    Status.SIGNING: (Glyph.FINGER_POINT, "Signing", UIColor.IMPORTANT),
    Status.SKIPPING: (Glyph.ELLIPSES, "Skipping", UIColor.INFO),
    Status.UPLOADED: (Glyph.CHECK_MARK, "Uploaded", UIColor.INFO),
    Status.UPLOADING: (Glyph.UP_ARROW, "Uploading", UIColor.INFO),
    Status.USING: (Glyph.RIGHT_ARROW, "Using", UIColor.INFO),
    Status.VERIFIED: (Glyph.CHECK_MARK, "Verified", UIColor.INFO),
    Status.VERIFYING: (Glyph.FINGER_POINT, "Verifying", UIColor.INFO),
}


def status_parts(status: AnyStatus) -> tuple[Glyph, str, UIColor]:
    """Resolve any status, catalogued or custom, to its display parts."""

    return status.parts()


__all__ = [
    "AnyStatus",
    "CustomStatus",
    "STATUS_TABLE",
    "Status",
    "UIColor",
    "status_parts",
]
