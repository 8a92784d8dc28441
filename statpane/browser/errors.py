"""Filesystem error kinds raised and absorbed by the browser core."""

from __future__ import annotations


class BrowserError(Exception):
    """Base error carrying the offending path and the underlying OS error."""

    action = "filesystem error on"

    def __init__(self, path: str, cause: OSError | None = None) -> None:
        self.path = path
        self.cause = cause
        detail = f": {cause.strerror or cause}" if cause is not None else ""
        super().__init__(f"{self.action} {path!r}{detail}")


class DirectoryOpenFailure(BrowserError):
    action = "cannot open directory"


class DirectoryChangeFailure(BrowserError):
    action = "cannot change directory to"


class MetadataLookupFailure(BrowserError):
    action = "cannot stat"


__all__ = [
    "BrowserError",
    "DirectoryOpenFailure",
    "DirectoryChangeFailure",
    "MetadataLookupFailure",
]
