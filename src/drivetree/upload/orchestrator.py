"""Replay a local folder structure on the remote side, one call at a time."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Protocol, Sequence

from drivetree.errors import InvalidArgumentError, RemoteOperationError
from drivetree.models import UploadReport

from .entries import FileContent, UploadEntry, split_relative_path
from .plan import UploadPlan

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]
SkipCallback = Callable[[str], None]


class RemoteOps(Protocol):
    """Remote mutation primitives used by upload_tree."""

    async def create_folder(self, name: str, parent_id: Optional[str]) -> str: ...

    async def add_file(
        self,
        name: str,
        size: int,
        content: FileContent,
        parent_id: Optional[str],
    ) -> None: ...


async def upload_tree(
    entries: Iterable[UploadEntry],
    target_folder_id: Optional[str],
    ops: RemoteOps,
    *,
    on_progress: Optional[ProgressCallback] = None,
) -> UploadPlan:
    """
    Create the folders implied by entries' relative paths, then add each file.

    Entries are processed shallowest first. Each distinct folder path is
    created exactly once and reused by every later entry beneath it. Calls
    are issued strictly one at a time.

    Returns:
        The UploadPlan (folder path -> remote id) built during the upload.

    Raises:
        InvalidArgumentError: if an entry's relative path has no segments.
            Raised before any remote call.
        RemoteOperationError: on the first failing create_folder/add_file.
            Nothing is retried or rolled back.
    """
    plan = UploadPlan(target_folder_id)
    items = list(entries)
    if not items:
        logger.info("Nothing to upload")
        return plan

    prepared = _prepare(items)
    prepared.sort(key=lambda p: len(p[0]))

    total = len(prepared)
    for processed, (segments, entry) in enumerate(prepared, start=1):
        parent_id = await _ensure_folders(segments[:-1], plan, ops, processed - 1)
        leaf = segments[-1]
        content = entry.content

        logger.debug("add_file %r (%d bytes) under %r", leaf, content.size, parent_id)
        try:
            await ops.add_file(leaf, content.size, content, parent_id)
        except Exception as exc:
            raise RemoteOperationError(
                f"Failed to add file {entry.relative_path}",
                details={
                    "operation": "add_file",
                    "path": entry.relative_path,
                    "processed": processed - 1,
                    "total": total,
                },
                cause=exc,
            ) from exc

        if on_progress is not None:
            on_progress(processed, total, leaf)

    return plan


def skip_empty_files(
    entries: Iterable[UploadEntry],
) -> tuple[list[UploadEntry], list[str]]:
    """Split entries into non-empty ones and the names of zero-byte files."""
    kept: list[UploadEntry] = []
    skipped: list[str] = []
    for entry in entries:
        if entry.content.size == 0:
            skipped.append(entry.content.name)
        else:
            kept.append(entry)
    return kept, skipped


async def upload_folder(
    entries: Iterable[UploadEntry],
    target_folder_id: Optional[str],
    ops: RemoteOps,
    *,
    on_progress: Optional[ProgressCallback] = None,
    on_skip_empty: Optional[SkipCallback] = None,
) -> UploadReport:
    """
    Upload a folder selection, skipping zero-byte files.

    Each skipped name is passed to on_skip_empty before any remote call.
    """
    items = list(entries)
    kept, skipped = skip_empty_files(items)

    if skipped:
        if len(skipped) == 1:
            logger.info("Skipped empty file: %s", skipped[0])
        else:
            logger.info("Skipped %d empty files", len(skipped))
        if on_skip_empty is not None:
            for name in skipped:
                on_skip_empty(name)

    if items and not kept:
        logger.info("No non-empty files to upload")

    plan = await upload_tree(kept, target_folder_id, ops, on_progress=on_progress)
    return UploadReport(
        total=len(items),
        uploaded=len(kept),
        created_folders=len(plan.created_paths),
        skipped_empty=skipped,
    )


def _prepare(items: Sequence[UploadEntry]) -> list[tuple[list[str], UploadEntry]]:
    prepared: list[tuple[list[str], UploadEntry]] = []
    for entry in items:
        segments = split_relative_path(entry.relative_path)
        if not segments:
            raise InvalidArgumentError(
                "Upload entry has an empty relative path",
                details={"relative_path": entry.relative_path},
            )
        prepared.append((segments, entry))
    return prepared


async def _ensure_folders(
    chain: list[str],
    plan: UploadPlan,
    ops: RemoteOps,
    processed: int,
) -> Optional[str]:
    """Resolve (creating as needed) each cumulative folder path in chain."""
    parent_id = plan.target_folder_id
    key = ""
    for name in chain:
        key = f"{key}/{name}" if key else name
        if key in plan:
            parent_id = plan.get(key)
            continue

        logger.debug("create_folder %r under %r", name, parent_id)
        try:
            folder_id = await ops.create_folder(name, parent_id)
        except Exception as exc:
            raise RemoteOperationError(
                f"Failed to create folder {key}",
                details={"operation": "create_folder", "path": key, "processed": processed},
                cause=exc,
            ) from exc

        plan.record(key, folder_id)
        parent_id = folder_id
    return parent_id
