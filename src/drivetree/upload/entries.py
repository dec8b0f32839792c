"""Upload entry model and the directory-entry abstraction walked by the traverser."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Protocol, Union, runtime_checkable


@runtime_checkable
class FileContent(Protocol):
    """Opaque file handle passed through to add_file."""

    @property
    def name(self) -> str: ...

    @property
    def size(self) -> int: ...

    def open(self) -> BinaryIO: ...


@dataclass(slots=True, frozen=True)
class InMemoryFile:
    """FileContent backed by bytes."""

    name: str
    data: bytes = b""

    @property
    def size(self) -> int:
        return len(self.data)

    def open(self) -> BinaryIO:
        return io.BytesIO(self.data)


@dataclass(slots=True, frozen=True)
class UploadEntry:
    """A file plus its '/'-joined path relative to the upload target."""

    content: FileContent
    relative_path: str


class FileEntry(ABC):
    """A file in a dropped/selected directory structure."""

    name: str

    @abstractmethod
    async def file(self) -> FileContent:
        """Resolve the entry to its content handle."""


class DirectoryReader(ABC):
    """Enumerates one directory's direct children in bounded batches."""

    @abstractmethod
    async def read_entries(self) -> list["Entry"]:
        """Return the next batch of children; an empty list means exhausted."""


class DirectoryEntry(ABC):
    """A directory in a dropped/selected directory structure."""

    name: str

    @abstractmethod
    def create_reader(self) -> DirectoryReader:
        """Return a fresh reader positioned at the first child."""


Entry = Union[FileEntry, DirectoryEntry]


def split_relative_path(path: str) -> list[str]:
    """Split a relative path into non-empty segments ('\\' counts as '/')."""
    return [p for p in path.replace("\\", "/").split("/") if p]


def normalize_relative_path(path: str) -> str:
    """
    Normalize a browser/OS relative path.

    Leading slashes are removed, backslashes become '/', and empty
    segments are dropped: '/a\\\\b//c.txt' -> 'a/b/c.txt'.
    """
    return "/".join(split_relative_path(path))


def join_relative_path(base: str, name: str) -> str:
    return f"{base}/{name}" if base else name
