"""Browser core: directory scanning, metadata formatting, and navigation state.

This package has no terminal concerns. Rendering and input live in the
top-level ``statpane`` modules and only read from ``NavigationState``.
"""

from __future__ import annotations

from .errors import BrowserError, DirectoryChangeFailure, DirectoryOpenFailure, MetadataLookupFailure
from .metadata import (
    METADATA_BUFFER_SIZE,
    METADATA_UNAVAILABLE,
    FileMetadata,
    describe,
    metadata_lines,
    stat_metadata,
)
from .navigation import NavigationState
from .scanner import MAX_ENTRIES, scan_directory

__all__ = [
    "BrowserError",
    "DirectoryChangeFailure",
    "DirectoryOpenFailure",
    "MetadataLookupFailure",
    "METADATA_BUFFER_SIZE",
    "METADATA_UNAVAILABLE",
    "FileMetadata",
    "describe",
    "metadata_lines",
    "stat_metadata",
    "NavigationState",
    "MAX_ENTRIES",
    "scan_directory",
]
