"""Parent -> children index and subtree membership over a flat folder list."""

from __future__ import annotations

from typing import Optional, Sequence

from drivetree.models import FolderNode


def effective_parent_id(folder: FolderNode, known_ids: set[str]) -> Optional[str]:
    """
    Parent id used for tree queries.

    A parent that is not present in the listing is treated as root (None).
    """
    parent = folder.parent_id or None
    if parent is not None and parent not in known_ids:
        return None
    return parent


def build_children_index(
    all_folders: Sequence[FolderNode],
) -> dict[Optional[str], list[str]]:
    """
    Build parent_id -> [child folder ids] in one pass.

    Child order follows the listing order. Root children are keyed by None.
    """
    known_ids = {f.id for f in all_folders}
    children: dict[Optional[str], list[str]] = {}
    for folder in all_folders:
        key = effective_parent_id(folder, known_ids)
        children.setdefault(key, []).append(folder.id)
    return children


def compute_subtree_ids(
    all_folders: Sequence[FolderNode],
    start_folder_id: Optional[str],
) -> set[str]:
    """
    Return the ids of start_folder_id and all of its descendants.

    When start_folder_id is None, returns every folder reachable from the
    root (root itself has no id and is not included).
    """
    children = build_children_index(all_folders)

    if start_folder_id is not None:
        stack: list[str] = [start_folder_id]
    else:
        stack = list(reversed(children.get(None, [])))

    subtree: set[str] = set()
    while stack:
        cur = stack.pop()
        if cur in subtree:
            continue
        subtree.add(cur)
        for child_id in reversed(children.get(cur, [])):
            if child_id not in subtree:
                stack.append(child_id)

    return subtree
