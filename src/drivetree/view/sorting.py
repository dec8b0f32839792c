"""Deterministic ordering for mixed file/folder listings."""

from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import Any, Iterable, Union

from drivetree.models import FileNode, FileSystemItem, FolderNode, item_kind
from drivetree.util.mime import file_type_label
from drivetree.util.text import compare_folded
from drivetree.util.time import to_timestamp


class SortField(str, Enum):
    NAME = "name"
    SIZE = "size"
    TYPE = "type"
    CREATED = "created"
    UPDATED = "updated"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _size(item: FileSystemItem) -> int:
    return item.size if isinstance(item, FileNode) else 0


def _type_label(item: FileSystemItem) -> str:
    if isinstance(item, FolderNode):
        return "Folder"
    return file_type_label(item.name)


def _primary(a: FileSystemItem, b: FileSystemItem, field: SortField) -> int:
    if field is SortField.NAME:
        return compare_folded(a.name, b.name)
    if field is SortField.SIZE:
        return _cmp(_size(a), _size(b))
    if field is SortField.TYPE:
        return compare_folded(_type_label(a), _type_label(b))
    if field is SortField.CREATED:
        return _cmp(to_timestamp(a.created_time), to_timestamp(b.created_time))
    if field is SortField.UPDATED:
        return _cmp(to_timestamp(a.modified_time), to_timestamp(b.modified_time))
    raise ValueError(f"Unsupported sort field: {field}")


_KIND_RANK = {"folder": 0, "file": 1}


def sort_items(
    items: Iterable[FileSystemItem],
    field: Union[SortField, str],
    direction: Union[SortDirection, str] = SortDirection.ASC,
) -> list[FileSystemItem]:
    """
    Return a new, totally ordered list of items.

    Ordering:
        1. Primary field (negated for desc).
        2. Kind: folders first for asc, files first for desc.
        3. Name ascending, regardless of direction.
        4. Raw id ascending, regardless of direction.
    """
    field = SortField(field)
    direction = SortDirection(direction)
    sign = -1 if direction is SortDirection.DESC else 1

    def compare(a: FileSystemItem, b: FileSystemItem) -> int:
        result = sign * _primary(a, b, field)
        if result:
            return result

        result = sign * _cmp(_KIND_RANK[item_kind(a)], _KIND_RANK[item_kind(b)])
        if result:
            return result

        result = compare_folded(a.name, b.name)
        if result:
            return result

        return _cmp(a.id, b.id)

    return sorted(items, key=cmp_to_key(compare))
