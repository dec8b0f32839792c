"""Public model exports for drivetree."""

from __future__ import annotations

from .nodes import (
    ROOT_CRUMB,
    ROOT_LABEL,
    BreadcrumbPath,
    Crumb,
    FileNode,
    FileSystemItem,
    FolderNode,
    ItemKind,
    item_kind,
)
from .results import TraversalResult, UploadReport

__all__ = [
    "FolderNode",
    "FileNode",
    "FileSystemItem",
    "ItemKind",
    "item_kind",
    "Crumb",
    "BreadcrumbPath",
    "ROOT_CRUMB",
    "ROOT_LABEL",
    "TraversalResult",
    "UploadReport",
]
