"""Exception hierarchy and HTTP error mapping for drivetree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class DriveTreeError(Exception):
    """
    Base exception for drivetree.

    Attributes:
        details: Optional structured information (e.g., path, HTTP status).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidArgumentError(DriveTreeError):
    """Raised when arguments are invalid (bad relative path, HTTP 400, etc.)."""


class NotFoundError(DriveTreeError):
    """Raised when a folder or remote resource is not found."""


class PathResolutionError(NotFoundError):
    """Raised when a path segment has no matching folder under its parent."""


class DirectoryReadError(DriveTreeError):
    """A local subtree could not be enumerated; its files were dropped."""


class RemoteOperationError(DriveTreeError):
    """
    A create_folder/add_file call failed during an upload.

    Remote effects committed before the failure are left in place.
    """


class AuthError(DriveTreeError):
    """Raised when the remote rejects credentials (HTTP 401)."""


class PermissionError(DriveTreeError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class ConflictError(DriveTreeError):
    """Raised when a conflict occurs (HTTP 409/412)."""


class RateLimitError(DriveTreeError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(DriveTreeError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(DriveTreeError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(DriveTreeError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to drivetree exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> DriveTreeError:
    """
    Map an HTTP error to a drivetree exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError
        - 403 -> PermissionError, or QuotaExceededError if quota-related
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code in (409, 412):
        return ConflictError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
