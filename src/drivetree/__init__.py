"""drivetree public API."""

from __future__ import annotations

from drivetree.errors import (
    ApiError,
    AuthError,
    ConflictError,
    DirectoryReadError,
    DriveTreeError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    NotFoundError,
    PathResolutionError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    RemoteOperationError,
    map_http_error,
)
from drivetree.index import (
    breadcrumb_path_string,
    build_breadcrumb_path,
    compute_subtree_ids,
    get_containing_folder_path,
    get_folder_path,
    resolve_file_parent,
    resolve_path_segment,
    search_subtree,
)
from drivetree.models import (
    BreadcrumbPath,
    Crumb,
    FileNode,
    FileSystemItem,
    FolderNode,
    TraversalResult,
    UploadReport,
    item_kind,
)
from drivetree.remote import DriveRemote
from drivetree.upload import (
    InMemoryFile,
    LocalDirectoryEntry,
    LocalFileEntry,
    RemoteOps,
    UploadEntry,
    UploadPlan,
    entries_from_paths,
    extract_dropped_entries,
    upload_folder,
    upload_tree,
)
from drivetree.view import SortDirection, SortField, sort_items

__all__ = [
    # Tree queries
    "compute_subtree_ids",
    "build_breadcrumb_path",
    "breadcrumb_path_string",
    "resolve_path_segment",
    "get_folder_path",
    "get_containing_folder_path",
    "resolve_file_parent",
    "search_subtree",
    # Upload
    "extract_dropped_entries",
    "entries_from_paths",
    "upload_tree",
    "upload_folder",
    "UploadEntry",
    "UploadPlan",
    "InMemoryFile",
    "LocalFileEntry",
    "LocalDirectoryEntry",
    "RemoteOps",
    # Sorting
    "sort_items",
    "SortField",
    "SortDirection",
    # Remote
    "DriveRemote",
    # Models
    "FolderNode",
    "FileNode",
    "FileSystemItem",
    "item_kind",
    "Crumb",
    "BreadcrumbPath",
    "TraversalResult",
    "UploadReport",
    # Errors
    "DriveTreeError",
    "InvalidArgumentError",
    "NotFoundError",
    "PathResolutionError",
    "DirectoryReadError",
    "RemoteOperationError",
    "AuthError",
    "PermissionError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
