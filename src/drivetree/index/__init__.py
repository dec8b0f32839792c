"""Read-only tree queries over flat folder listings."""

from __future__ import annotations

from .paths import (
    breadcrumb_path_string,
    build_breadcrumb_path,
    get_containing_folder_path,
    get_folder_path,
    resolve_file_parent,
    resolve_path_segment,
)
from .search import contains_normalized, normalize_for_search, search_subtree
from .subtree import build_children_index, compute_subtree_ids, effective_parent_id

__all__ = [
    "build_children_index",
    "compute_subtree_ids",
    "effective_parent_id",
    "build_breadcrumb_path",
    "breadcrumb_path_string",
    "get_folder_path",
    "get_containing_folder_path",
    "resolve_file_parent",
    "resolve_path_segment",
    "normalize_for_search",
    "contains_normalized",
    "search_subtree",
]
