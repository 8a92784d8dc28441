"""Stat-backed metadata text for the selected entry.

``stat_metadata`` exposes raw fields and raises on lookup failure.
``describe`` is the non-raising formatter the render path uses.
"""

from __future__ import annotations

import logging
import os
import stat
import time
from dataclasses import dataclass

from .errors import MetadataLookupFailure

logger = logging.getLogger(__name__)

METADATA_BUFFER_SIZE = 256
METADATA_UNAVAILABLE = "Error retrieving info"


@dataclass(frozen=True)
class FileMetadata:
    """Subset of ``os.stat`` fields shown in the metadata pane."""

    size: int
    permissions: int
    mtime: float
    uid: int
    gid: int
    is_dir: bool

    def lines(self) -> list[str]:
        """Return the pane lines in display order."""
        return [
            f"Size: {self.size} bytes",
            f"Permissions: {self.permissions:03o}",
            f"Last modified: {time.ctime(self.mtime)}",
            f"Owner UID: {self.uid}",
            f"Owner GID: {self.gid}",
            f"Is Directory: {'Yes' if self.is_dir else 'No'}",
        ]


def stat_metadata(path: str) -> FileMetadata:
    """Stat ``path`` (following symlinks) or raise ``MetadataLookupFailure``."""
    try:
        st = os.stat(path)
    except OSError as exc:
        raise MetadataLookupFailure(path, exc) from exc
    return FileMetadata(
        size=int(st.st_size),
        permissions=stat.S_IMODE(st.st_mode) & 0o777,
        mtime=st.st_mtime,
        uid=int(st.st_uid),
        gid=int(st.st_gid),
        is_dir=stat.S_ISDIR(st.st_mode),
    )


def _bounded_text(lines: list[str], limit: int) -> str:
    """Join ``lines`` with newlines, cutting only at the tail once ``limit`` is hit."""
    out: list[str] = []
    used = 0
    for line in lines:
        chunk = line + "\n"
        remaining = limit - used
        if remaining <= 0:
            break
        if len(chunk) > remaining:
            out.append(chunk[:remaining])
            break
        out.append(chunk)
        used += len(chunk)
    return "".join(out)


def describe(path: str, limit: int = METADATA_BUFFER_SIZE) -> str:
    """Return newline-separated metadata for ``path``.

    Never raises: a failed lookup yields ``METADATA_UNAVAILABLE``.
    """
    try:
        metadata = stat_metadata(path)
    except MetadataLookupFailure as exc:
        logger.warning("%s", exc)
        return METADATA_UNAVAILABLE
    return _bounded_text(metadata.lines(), limit)


def metadata_lines(text: str) -> list[str]:
    """Split formatted metadata into display rows, skipping blank lines."""
    return [line for line in text.splitlines() if line]


__all__ = [
    "METADATA_BUFFER_SIZE",
    "METADATA_UNAVAILABLE",
    "FileMetadata",
    "stat_metadata",
    "describe",
    "metadata_lines",
]
