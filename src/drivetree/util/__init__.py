from .mime import (
    DEFAULT_MIME,
    FOLDER_MIME,
    file_extension,
    file_type_label,
    guess_mime_type,
    is_folder,
)
from .text import compare_folded, fold_text
from .time import parse_rfc3339, to_timestamp

__all__ = [
    "FOLDER_MIME",
    "DEFAULT_MIME",
    "is_folder",
    "file_extension",
    "guess_mime_type",
    "file_type_label",
    "fold_text",
    "compare_folded",
    "parse_rfc3339",
    "to_timestamp",
]
