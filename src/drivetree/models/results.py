"""Result models for traversal and upload operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from drivetree.errors import DirectoryReadError

if TYPE_CHECKING:
    from drivetree.upload.entries import UploadEntry


@dataclass(slots=True)
class TraversalResult:
    """Files collected from dropped entries plus the subtrees that failed."""

    entries: list["UploadEntry"] = field(default_factory=list)
    errors: list[DirectoryReadError] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        """True when at least one subtree could not be read."""
        return bool(self.errors)


@dataclass(slots=True)
class UploadReport:
    """Aggregate result for upload_folder."""

    total: int
    uploaded: int
    created_folders: int = 0
    skipped_empty: list[str] = field(default_factory=list)
