"""Local filesystem implementation of the directory-entry abstraction."""

from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Optional

from .entries import DirectoryEntry, DirectoryReader, Entry, FileEntry

DEFAULT_BATCH_SIZE: int = 100


@dataclass(slots=True, frozen=True)
class LocalFile:
    """FileContent for a file on the local disk. size is captured at stat time."""

    path: str
    name: str
    size: int

    @classmethod
    def from_path(cls, path: str) -> LocalFile:
        st = os.stat(path)
        return cls(path=path, name=os.path.basename(path), size=st.st_size)

    def open(self) -> BinaryIO:
        return open(self.path, "rb")


class LocalFileEntry(FileEntry):
    def __init__(self, path: str) -> None:
        self.path = path
        self.name = os.path.basename(os.path.normpath(path))

    async def file(self) -> LocalFile:
        return await asyncio.to_thread(LocalFile.from_path, self.path)

    def __repr__(self) -> str:
        return f"LocalFileEntry({self.path!r})"


class LocalDirectoryEntry(DirectoryEntry):
    def __init__(self, path: str, *, batch_size: int = DEFAULT_BATCH_SIZE) -> None:
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.path = path
        self.name = os.path.basename(os.path.normpath(path))
        self.batch_size = batch_size

    def create_reader(self) -> DirectoryReader:
        return _ScandirReader(self.path, self.batch_size)

    def __repr__(self) -> str:
        return f"LocalDirectoryEntry({self.path!r})"


class _ScandirReader(DirectoryReader):
    """
    Returns children in batches of batch_size, then an empty batch.

    Children are ordered by name. Symlinked directories are not followed.
    """

    def __init__(self, path: str, batch_size: int) -> None:
        self._path = path
        self._batch_size = batch_size
        self._pending: Optional[list[Entry]] = None

    async def read_entries(self) -> list[Entry]:
        if self._pending is None:
            self._pending = await asyncio.to_thread(
                _list_directory, self._path, self._batch_size
            )
        batch = self._pending[: self._batch_size]
        del self._pending[: self._batch_size]
        return batch


def _list_directory(path: str, batch_size: int) -> list[Entry]:
    children: list[Entry] = []
    with os.scandir(path) as it:
        dirents = sorted(it, key=lambda d: d.name)
    for d in dirents:
        if d.is_dir(follow_symlinks=False):
            children.append(LocalDirectoryEntry(d.path, batch_size=batch_size))
        elif d.is_file():
            children.append(LocalFileEntry(d.path))
    return children


def entries_from_paths(
    paths: Iterable[str],
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> list[Entry]:
    """Wrap local paths as dropped entries (directories vs. files by stat)."""
    entries: list[Entry] = []
    for p in paths:
        if os.path.isdir(p):
            entries.append(LocalDirectoryEntry(p, batch_size=batch_size))
        else:
            entries.append(LocalFileEntry(p))
    return entries
