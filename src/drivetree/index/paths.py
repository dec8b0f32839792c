"""Breadcrumbs and slash-separated path resolution over a flat folder list."""

from __future__ import annotations

from typing import Optional, Sequence

from drivetree.errors import NotFoundError, PathResolutionError
from drivetree.models import ROOT_CRUMB, ROOT_LABEL, BreadcrumbPath, Crumb, FolderNode

from .subtree import effective_parent_id


def _ancestor_chain(
    folder_id: Optional[str],
    all_folders: Sequence[FolderNode],
) -> list[FolderNode]:
    """
    Folders from folder_id up towards root, nearest first.

    Stops at root, at a folder missing from the listing, or when an id
    repeats (cyclic parent links).
    """
    by_id = {f.id: f for f in all_folders}
    chain: list[FolderNode] = []
    seen: set[str] = set()

    cur = folder_id
    while cur is not None and cur not in seen:
        folder = by_id.get(cur)
        if folder is None:
            break
        seen.add(cur)
        chain.append(folder)
        cur = folder.parent_id or None

    return chain


def build_breadcrumb_path(
    folder_id: Optional[str],
    all_folders: Sequence[FolderNode],
) -> BreadcrumbPath:
    """
    Build the root-first breadcrumb path for folder_id.

    The first entry is always the synthetic root crumb. Broken parent chains
    yield the partial path found so far; this never raises.
    """
    chain = _ancestor_chain(folder_id, all_folders)
    path: BreadcrumbPath = [ROOT_CRUMB]
    path.extend(Crumb(id=f.id, name=f.name) for f in reversed(chain))
    return path


def breadcrumb_path_string(path: BreadcrumbPath) -> str:
    """Join crumb names after the root entry with '/'."""
    return "/".join(c.name for c in path if c.id is not None)


def get_folder_path(folder_id: Optional[str], all_folders: Sequence[FolderNode]) -> str:
    """Slash-joined folder names from root to folder_id ('' for root)."""
    if folder_id is None:
        return ""
    return breadcrumb_path_string(build_breadcrumb_path(folder_id, all_folders))


def get_containing_folder_path(
    parent_id: Optional[str],
    all_folders: Sequence[FolderNode],
) -> str:
    """Display path of an item's parent folder, falling back to the root label."""
    if not parent_id:
        return ROOT_LABEL
    return get_folder_path(parent_id, all_folders) or ROOT_LABEL


def resolve_file_parent(
    parent_id: Optional[str],
    all_folders: Sequence[FolderNode],
) -> Optional[str]:
    """
    Resolve an item's parent to a navigable folder id (None for root).

    Raises:
        NotFoundError: if parent_id is set but not present in all_folders.
    """
    if not parent_id:
        return None
    for folder in all_folders:
        if folder.id == parent_id:
            return folder.id
    raise NotFoundError("Parent folder not found", details={"parent_id": parent_id})


def resolve_path_segment(path: str, all_folders: Sequence[FolderNode]) -> Optional[str]:
    """
    Resolve a slash-separated folder path to a folder id.

    Matching is exact and case-sensitive, one level at a time from root.
    When several siblings share a name, the first in listing order wins.

    Returns:
        None when the path has no segments (root), otherwise the folder id.

    Raises:
        PathResolutionError: if a segment has no matching folder.
    """
    parts = [p for p in path.split("/") if p]
    if not parts:
        return None

    known_ids = {f.id for f in all_folders}
    current: Optional[str] = None

    for depth, part in enumerate(parts):
        match = next(
            (
                f for f in all_folders
                if f.name == part and effective_parent_id(f, known_ids) == current
            ),
            None,
        )
        if match is None:
            raise PathResolutionError(
                f'Folder "{part}" not found in path "{path}"',
                details={
                    "path": path,
                    "segment": part,
                    "depth": depth,
                    "parent_id": current,
                },
            )
        current = match.id

    return current
