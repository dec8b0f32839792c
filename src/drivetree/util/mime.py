from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"
DEFAULT_MIME: str = "application/octet-stream"

_MIME_BY_EXTENSION: dict[str, str] = {
    # images
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "webp": "image/webp",
    "bmp": "image/bmp",
    "ico": "image/x-icon",
    # video
    "mp4": "video/mp4",
    "avi": "video/x-msvideo",
    "mov": "video/quicktime",
    "wmv": "video/x-ms-wmv",
    "flv": "video/x-flv",
    "webm": "video/webm",
    "mkv": "video/x-matroska",
    # audio
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "ogg": "audio/ogg",
    "flac": "audio/flac",
    "aac": "audio/aac",
    "m4a": "audio/mp4",
    # documents
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "rtf": "application/rtf",
    "odt": "application/vnd.oasis.opendocument.text",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    # archives
    "zip": "application/zip",
    "rar": "application/x-rar-compressed",
    "7z": "application/x-7z-compressed",
    "tar": "application/x-tar",
    "gz": "application/gzip",
    "bz2": "application/x-bzip2",
    # text
    "txt": "text/plain",
    "html": "text/html",
    "css": "text/css",
    "js": "text/javascript",
    "json": "application/json",
    "xml": "application/xml",
    "md": "text/markdown",
    "csv": "text/csv",
}

_CATEGORY_BY_MIME_PREFIX: tuple[tuple[str, str], ...] = (
    ("image/", "Image"),
    ("video/", "Video"),
    ("audio/", "Audio"),
    ("text/", "Text"),
)

_ARCHIVE_EXTENSIONS: set[str] = {"zip", "rar", "7z", "tar", "gz", "bz2"}
_DOCUMENT_EXTENSIONS: set[str] = {
    "pdf", "doc", "docx", "rtf", "odt", "xls", "xlsx", "ppt", "pptx",
}


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def file_extension(name: str) -> str:
    """Lowercased extension without the dot, or '' when there is none."""
    base, dot, ext = name.rpartition(".")
    if not dot or not base:
        return ""
    return ext.lower()


def guess_mime_type(name: str) -> str:
    return _MIME_BY_EXTENSION.get(file_extension(name), DEFAULT_MIME)


def file_type_label(name: str) -> str:
    """
    Human-readable type label used for the 'type' sort field.

    Examples: 'PNG Image', 'PDF Document', 'ZIP Archive', 'JSON File', 'File'.
    """
    ext = file_extension(name)
    if not ext:
        return "File"

    if ext in _ARCHIVE_EXTENSIONS:
        return f"{ext.upper()} Archive"
    if ext in _DOCUMENT_EXTENSIONS:
        return f"{ext.upper()} Document"

    mime = _MIME_BY_EXTENSION.get(ext, DEFAULT_MIME)
    for prefix, category in _CATEGORY_BY_MIME_PREFIX:
        if mime.startswith(prefix):
            return f"{ext.upper()} {category}"
    return f"{ext.upper()} File"
