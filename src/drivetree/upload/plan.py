"""Per-upload memo of relative folder path -> remote folder id."""

from __future__ import annotations

from typing import Optional


class UploadPlan:
    """
    Maps normalized relative folder paths to remote folder ids.

    Seeded with '' -> target folder id. Entries are only ever added, and a
    plan must not be reused across uploads.
    """

    def __init__(self, target_folder_id: Optional[str]) -> None:
        self._ids: dict[str, Optional[str]] = {"": target_folder_id}
        self._created: list[str] = []

    @property
    def target_folder_id(self) -> Optional[str]:
        return self._ids[""]

    @property
    def created_paths(self) -> list[str]:
        """Folder paths created during this upload, in creation order."""
        return list(self._created)

    def __contains__(self, path: str) -> bool:
        return path in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def get(self, path: str) -> Optional[str]:
        return self._ids[path]

    def record(self, path: str, folder_id: str) -> None:
        if path in self._ids:
            raise ValueError(f"Folder path already recorded: {path!r}")
        self._ids[path] = folder_id
        self._created.append(path)

    def as_dict(self) -> dict[str, Optional[str]]:
        return dict(self._ids)
