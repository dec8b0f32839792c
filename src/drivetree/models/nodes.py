"""Data model for remote tree items."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional, Union

ItemKind = Literal["folder", "file"]

ROOT_LABEL: str = "Drive"


@dataclass(slots=True, frozen=True)
class FolderNode:
    """
    A folder as returned by the remote listing.

    Notes:
        - parent_id is None for folders at the top of the tree.
        - A parent_id naming a folder that is not in the same listing is
          treated as root by the indexer.
    """

    id: str
    name: str
    parent_id: Optional[str] = None

    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None


@dataclass(slots=True, frozen=True)
class FileNode:
    """A file as returned by the remote listing."""

    id: str
    name: str
    size: int
    parent_id: Optional[str] = None

    mime_type: Optional[str] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("FileNode.size must be >= 0")


FileSystemItem = Union[FolderNode, FileNode]


def item_kind(item: FileSystemItem) -> ItemKind:
    """Return the kind of a tree item. Raises TypeError for anything else."""
    if isinstance(item, FolderNode):
        return "folder"
    if isinstance(item, FileNode):
        return "file"
    raise TypeError(f"Not a FileSystemItem: {type(item).__name__}")


@dataclass(slots=True, frozen=True)
class Crumb:
    """One breadcrumb segment. id is None for the synthetic root entry."""

    id: Optional[str]
    name: str


BreadcrumbPath = list[Crumb]

ROOT_CRUMB = Crumb(id=None, name=ROOT_LABEL)
