"""Flatten dropped files/directories into (content, relative path) pairs."""

from __future__ import annotations

import logging
from typing import Iterable

from drivetree.errors import DirectoryReadError
from drivetree.models import TraversalResult

from .entries import DirectoryEntry, Entry, FileEntry, UploadEntry, join_relative_path

logger = logging.getLogger(__name__)


async def read_all_entries(directory: DirectoryEntry) -> list[Entry]:
    """Drain a directory's reader until it returns an empty batch."""
    reader = directory.create_reader()
    children: list[Entry] = []
    while True:
        batch = await reader.read_entries()
        if not batch:
            return children
        children.extend(batch)


def has_directories(entries: Iterable[Entry]) -> bool:
    return any(isinstance(e, DirectoryEntry) for e in entries)


async def extract_dropped_entries(entries: Iterable[Entry]) -> TraversalResult:
    """
    Walk dropped entries depth-first into a flat list of UploadEntry.

    Notes:
        - Sibling order from the platform is kept; nothing is sorted here.
        - Empty directories contribute nothing.
        - If a directory cannot be read (or a file cannot be resolved), that
          subtree is skipped and recorded in TraversalResult.errors; siblings
          are still collected.
    """
    result = TraversalResult()
    stack: list[tuple[Entry, str]] = [(e, "") for e in reversed(list(entries))]

    while stack:
        entry, base = stack.pop()
        if not isinstance(entry, (FileEntry, DirectoryEntry)):
            raise TypeError(f"Unsupported directory entry: {type(entry).__name__}")
        path = join_relative_path(base, entry.name)

        if isinstance(entry, FileEntry):
            try:
                content = await entry.file()
            except Exception as exc:
                _record_failure(result, path, exc)
                continue
            result.entries.append(UploadEntry(content=content, relative_path=path))
            continue

        if isinstance(entry, DirectoryEntry):
            try:
                children = await read_all_entries(entry)
            except Exception as exc:
                _record_failure(result, path, exc)
                continue
            stack.extend((child, path) for child in reversed(children))

    if result.errors:
        logger.warning(
            "Failed to read %d item(s) from dropped entries; %d file(s) collected",
            len(result.errors),
            len(result.entries),
        )
    return result


def _record_failure(result: TraversalResult, path: str, exc: Exception) -> None:
    logger.debug("Failed to read %s: %s", path, exc)
    result.errors.append(
        DirectoryReadError(
            f"Failed to read {path}",
            details={"path": path},
            cause=exc,
        )
    )
