"""Local selection traversal and folder upload orchestration."""

from __future__ import annotations

from .entries import (
    DirectoryEntry,
    DirectoryReader,
    Entry,
    FileContent,
    FileEntry,
    InMemoryFile,
    UploadEntry,
    join_relative_path,
    normalize_relative_path,
    split_relative_path,
)
from .local_fs import LocalDirectoryEntry, LocalFile, LocalFileEntry, entries_from_paths
from .orchestrator import RemoteOps, skip_empty_files, upload_folder, upload_tree
from .plan import UploadPlan
from .traverser import extract_dropped_entries, has_directories, read_all_entries

__all__ = [
    "FileContent",
    "InMemoryFile",
    "UploadEntry",
    "FileEntry",
    "DirectoryEntry",
    "DirectoryReader",
    "Entry",
    "split_relative_path",
    "normalize_relative_path",
    "join_relative_path",
    "LocalFile",
    "LocalFileEntry",
    "LocalDirectoryEntry",
    "entries_from_paths",
    "extract_dropped_entries",
    "has_directories",
    "read_all_entries",
    "UploadPlan",
    "RemoteOps",
    "upload_tree",
    "upload_folder",
    "skip_empty_files",
]
