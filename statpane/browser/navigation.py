"""Browsing state machine: current directory, entry list, and selection.

``NavigationState`` is the single owner of the browsing triple. Every
transition keeps ``0 <= selected < len(entries)`` for non-empty lists, and
directory changes either fully succeed or leave the previous state (and the
process working directory) in place.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable

from .errors import DirectoryChangeFailure, DirectoryOpenFailure
from .metadata import describe
from .scanner import MAX_ENTRIES, scan_directory

logger = logging.getLogger(__name__)

Scanner = Callable[[str, int], list[str]]


class NavigationState:
    """Current path, its entry names, and the selected index."""

    def __init__(
        self,
        path: str,
        entries: list[str],
        *,
        max_entries: int = MAX_ENTRIES,
        scanner: Scanner = scan_directory,
    ) -> None:
        self.path = path
        self.entries = list(entries[:max_entries])
        self.selected = 0
        self.max_entries = max_entries
        self._scanner = scanner

    @classmethod
    def from_cwd(
        cls,
        *,
        max_entries: int = MAX_ENTRIES,
        scanner: Scanner = scan_directory,
    ) -> NavigationState:
        """Build state for the process working directory.

        An unreadable start directory yields an empty entry list.
        """
        path = os.getcwd()
        try:
            entries = scanner(path, max_entries)
        except DirectoryOpenFailure as exc:
            logger.warning("%s", exc)
            entries = []
        logger.info("Current path: %s", path)
        return cls(path, entries, max_entries=max_entries, scanner=scanner)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def selected_name(self) -> str | None:
        if self.is_empty:
            return None
        return self.entries[self.selected]

    @property
    def selected_path(self) -> str | None:
        name = self.selected_name
        if name is None:
            return None
        return os.path.join(self.path, name)

    def metadata(self) -> str | None:
        """Return formatted metadata for the selection, ``None`` when empty."""
        selected_path = self.selected_path
        if selected_path is None:
            return None
        return describe(selected_path)

    def move_up(self) -> bool:
        if self.is_empty or self.selected <= 0:
            return False
        self.selected -= 1
        return True

    def move_down(self) -> bool:
        if self.is_empty or self.selected >= len(self.entries) - 1:
            return False
        self.selected += 1
        return True

    def enter(self) -> bool:
        """Descend into the selected entry when it is a directory."""
        candidate = self.selected_path
        if candidate is None:
            return False
        try:
            st = os.stat(candidate)
        except OSError as exc:
            logger.debug("Cannot stat %s: %s", candidate, exc)
            return False
        if not stat.S_ISDIR(st.st_mode):
            return False
        logger.debug("Changing directory to: %s", candidate)
        return self._change_directory(candidate)

    def ascend(self) -> bool:
        """Move to the parent directory; at the filesystem root this rescans root."""
        return self._change_directory(os.path.join(self.path, os.pardir))

    def _change_directory(self, target: str) -> bool:
        previous_path = self.path
        try:
            os.chdir(target)
        except OSError as exc:
            logger.warning("%s", DirectoryChangeFailure(target, exc))
            return False

        try:
            new_path = os.getcwd()
        except OSError as exc:
            logger.warning("Cannot read working directory after entering %s: %s", target, exc)
            self._restore_directory(previous_path)
            return False

        try:
            entries = self._scanner(new_path, self.max_entries)
        except DirectoryOpenFailure as exc:
            logger.warning("%s; staying in %s", exc, previous_path)
            self._restore_directory(previous_path)
            return False

        self.path = new_path
        self.entries = entries
        self.selected = 0
        logger.info("Changed directory to %s (%d entries)", new_path, len(entries))
        return True

    @staticmethod
    def _restore_directory(path: str) -> None:
        try:
            os.chdir(path)
        except OSError as exc:
            logger.warning("%s", DirectoryChangeFailure(path, exc))


__all__ = ["NavigationState", "Scanner"]
