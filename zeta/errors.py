"""Errors surfaced to callers of the listing pipeline."""

from __future__ import annotations

import errno
from pathlib import Path

REASON_NOT_FOUND = "not_found"
REASON_NOT_A_DIRECTORY = "not_a_directory"
REASON_PERMISSION_DENIED = "permission_denied"
REASON_ERROR = "error"

_REASON_MESSAGES = {
    REASON_NOT_FOUND: "No such file or directory",
    REASON_NOT_A_DIRECTORY: "Not a directory",
    REASON_PERMISSION_DENIED: "Permission denied",
}


class ListingError(OSError):
    """The target directory could not be opened; nothing was listed."""

    def __init__(self, path: Path, reason: str, detail: str | None = None) -> None:
        self.path = Path(path)
        self.reason = reason
        message = _REASON_MESSAGES.get(reason) or detail or "cannot open directory"
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"cannot access '{self.path}': {self.message}"

    @classmethod
    def from_os_error(cls, path: Path, exc: OSError) -> "ListingError":
        """Classify an ``OSError`` raised while opening ``path``."""
        if isinstance(exc, FileNotFoundError):
            reason = REASON_NOT_FOUND
        elif isinstance(exc, NotADirectoryError) or exc.errno == errno.ENOTDIR:
            reason = REASON_NOT_A_DIRECTORY
        elif isinstance(exc, PermissionError):
            reason = REASON_PERMISSION_DENIED
        else:
            reason = REASON_ERROR
        return cls(path, reason, detail=exc.strerror or str(exc))


__all__ = [
    "REASON_NOT_FOUND",
    "REASON_NOT_A_DIRECTORY",
    "REASON_PERMISSION_DENIED",
    "REASON_ERROR",
    "ListingError",
]
