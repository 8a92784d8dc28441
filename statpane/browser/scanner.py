"""Directory enumeration for the entry list."""

from __future__ import annotations

import os

from .errors import DirectoryOpenFailure

MAX_ENTRIES = 1024
PSEUDO_ENTRIES = frozenset({".", ".."})


def scan_directory(path: str, max_entries: int = MAX_ENTRIES) -> list[str]:
    """Return entry names of ``path`` in filesystem enumeration order.

    Self/parent pseudo-entries are skipped. Enumeration stops once
    ``max_entries`` names are collected; the remainder is dropped without
    notice. Raises ``DirectoryOpenFailure`` when ``path`` cannot be listed.
    """
    if max_entries <= 0:
        raise ValueError(f"max_entries must be positive, got {max_entries}")

    names: list[str] = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if len(names) >= max_entries:
                    break
                if entry.name in PSEUDO_ENTRIES:
                    continue
                names.append(entry.name)
    except OSError as exc:
        raise DirectoryOpenFailure(path, exc) from exc
    return names


__all__ = ["MAX_ENTRIES", "PSEUDO_ENTRIES", "scan_directory"]
