"""Google Drive v3 implementation of the remote tree primitives."""

from __future__ import annotations

import asyncio
import json
import logging
from collections import deque
from typing import Any, Callable, Optional, TypeVar

from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from drivetree.errors import ApiError, HttpErrorInfo, NetworkError, map_http_error
from drivetree.models import FileNode, FileSystemItem, FolderNode
from drivetree.upload.entries import FileContent
from drivetree.util.mime import FOLDER_MIME, guess_mime_type, is_folder
from drivetree.util.time import parse_rfc3339

from .fields import LIST_FIELDS

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DriveRemote:
    """
    Remote tree backed by a Google Drive folder.

    Notes:
        - `service` is a built Drive v3 resource
          (googleapiclient.discovery.build("drive", "v3", credentials=...)).
          Obtaining credentials is the caller's job.
        - Items directly under root_folder_id are reported with parent_id None,
          and parent_id None maps back to root_folder_id on writes.
        - Every request is executed once; errors are mapped, never retried.
    """

    def __init__(
        self,
        service: Any,
        *,
        root_folder_id: str = "root",
        supports_all_drives: bool = True,
    ) -> None:
        self._service = service
        self._root_folder_id = root_folder_id
        self._supports_all_drives = supports_all_drives

    @property
    def root_folder_id(self) -> str:
        return self._root_folder_id

    # ----------------------------
    # Reads
    # ----------------------------
    async def list_folders(self) -> list[FolderNode]:
        folders, _ = await asyncio.to_thread(self._list_tree)
        return folders

    async def list_files(self) -> list[FileNode]:
        _, files = await asyncio.to_thread(self._list_tree)
        return files

    async def get_folder_contents(self, folder_id: Optional[str]) -> list[FileSystemItem]:
        return await asyncio.to_thread(self._list_children, folder_id)

    # ----------------------------
    # Writes
    # ----------------------------
    async def create_folder(self, name: str, parent_id: Optional[str]) -> str:
        return await asyncio.to_thread(self._create_folder, name, parent_id)

    async def add_file(
        self,
        name: str,
        size: int,
        content: FileContent,
        parent_id: Optional[str],
    ) -> None:
        await asyncio.to_thread(self._upload, name, size, content, parent_id)

    # ----------------------------
    # Internals
    # ----------------------------
    def _list_tree(self) -> tuple[list[FolderNode], list[FileNode]]:
        """Walk the whole tree under the root (BFS), folders and files."""
        folders: list[FolderNode] = []
        files: list[FileNode] = []
        queue: deque[Optional[str]] = deque([None])
        seen: set[Optional[str]] = set()

        while queue:
            parent_id = queue.popleft()
            if parent_id in seen:
                continue
            seen.add(parent_id)

            for item in self._list_children(parent_id):
                if isinstance(item, FolderNode):
                    folders.append(item)
                    queue.append(item.id)
                else:
                    files.append(item)

        logger.debug("Listed %d folders and %d files", len(folders), len(files))
        return folders, files

    def _list_children(self, parent_id: Optional[str]) -> list[FileSystemItem]:
        drive_parent = self._drive_parent(parent_id)
        q = f"'{_escape_query(drive_parent)}' in parents and trashed=false"

        items: list[FileSystemItem] = []
        page_token: Optional[str] = None
        while True:
            req = self._service.files().list(
                q=q,
                fields=LIST_FIELDS,
                pageToken=page_token,
                **self._common_list_kwargs(),
            )
            data = self._execute(req.execute)
            for f in data.get("files", []):
                items.append(_file_dict_to_item(f, parent_id))

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        return items

    def _create_folder(self, name: str, parent_id: Optional[str]) -> str:
        body = {
            "name": name,
            "mimeType": FOLDER_MIME,
            "parents": [self._drive_parent(parent_id)],
        }
        req = self._service.files().create(
            body=body,
            fields="id",
            **self._common_write_kwargs(),
        )
        data = self._execute(req.execute)
        return _require_id(data)

    def _upload(
        self,
        name: str,
        size: int,
        content: FileContent,
        parent_id: Optional[str],
    ) -> str:
        body = {"name": name, "parents": [self._drive_parent(parent_id)]}
        logger.debug("Uploading %r (%d bytes)", name, size)

        with content.open() as stream:
            media = MediaIoBaseUpload(
                stream,
                mimetype=guess_mime_type(name),
                resumable=size > 0,
            )
            req = self._service.files().create(
                body=body,
                media_body=media,
                fields="id",
                **self._common_write_kwargs(),
            )
            data = self._execute(req.execute)
        return _require_id(data)

    def _drive_parent(self, parent_id: Optional[str]) -> str:
        return parent_id if parent_id is not None else self._root_folder_id

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _common_write_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except HttpError as exc:
            raise map_http_error(_http_error_to_info(exc), cause=exc) from exc
        except (OSError, TimeoutError) as exc:
            raise NetworkError("Network error", cause=exc) from exc


def _escape_query(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


def _require_id(data: dict[str, Any]) -> str:
    file_id = data.get("id")
    if not isinstance(file_id, str) or not file_id:
        raise ApiError("Drive did not return an id for the created item")
    return file_id


def _file_dict_to_item(data: dict[str, Any], parent_id: Optional[str]) -> FileSystemItem:
    """Convert a Drive file resource; parent_id is the folder that was listed."""
    file_id = data.get("id")
    name = data.get("name")
    mime_type = data.get("mimeType")

    created_time = _parse_time(data.get("createdTime"))
    modified_time = _parse_time(data.get("modifiedTime"))

    if is_folder(mime_type if isinstance(mime_type, str) else ""):
        return FolderNode(
            id=file_id if isinstance(file_id, str) else "",
            name=name if isinstance(name, str) else "",
            parent_id=parent_id,
            created_time=created_time,
            modified_time=modified_time,
        )

    size = 0
    if isinstance(data.get("size"), str) and data["size"].isdigit():
        size = int(data["size"])
    elif isinstance(data.get("size"), int):
        size = data["size"]

    return FileNode(
        id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        size=size,
        parent_id=parent_id,
        mime_type=mime_type if isinstance(mime_type, str) else None,
        created_time=created_time,
        modified_time=modified_time,
    )


def _parse_time(value: Any):
    if not isinstance(value, str):
        return None
    try:
        return parse_rfc3339(value)
    except ValueError:
        return None


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        err = payload.get("error", {}) if isinstance(payload, dict) else {}
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
