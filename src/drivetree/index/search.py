"""Name search restricted to a folder subtree."""

from __future__ import annotations

from typing import Optional, Sequence

from drivetree.models import FileNode, FileSystemItem, FolderNode
from drivetree.util.text import fold_text

from .subtree import compute_subtree_ids


def normalize_for_search(text: str) -> str:
    """Case-, accent- and surrounding-whitespace-insensitive search key."""
    return fold_text(text.strip())


def contains_normalized(haystack: str, needle: str) -> bool:
    return normalize_for_search(needle) in fold_text(haystack)


def search_subtree(
    term: str,
    start_folder_id: Optional[str],
    all_folders: Sequence[FolderNode],
    all_files: Sequence[FileNode],
) -> list[FileSystemItem]:
    """
    Find folders and files whose names contain term, within a subtree.

    Rules:
        - Blank term -> no results.
        - From root: every matching folder, and files at root or under any
          reachable folder.
        - From a folder: the folder itself and its descendants, and files
          directly in any of those folders.
        - Folders first, then files; listing order is preserved.
    """
    if not term.strip():
        return []

    subtree_ids = compute_subtree_ids(all_folders, start_folder_id)

    folders: list[FileSystemItem] = [
        f for f in all_folders
        if (start_folder_id is None or f.id in subtree_ids)
        and contains_normalized(f.name, term)
    ]

    def _file_in_scope(node: FileNode) -> bool:
        if node.parent_id is None:
            return start_folder_id is None
        return node.parent_id in subtree_ids

    files: list[FileSystemItem] = [
        f for f in all_files
        if _file_in_scope(f) and contains_normalized(f.name, term)
    ]

    return folders + files
