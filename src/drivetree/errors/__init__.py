"""Public error exports for drivetree."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
