"""Display-width helpers for fitting text into pane cells.

ANSI escape sequences pass through untouched and take no columns; East Asian
wide characters take two.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return terminal columns used by ``text`` once escapes are stripped."""
    return sum(char_display_width(ch) for ch in ANSI_ESCAPE_RE.sub("", text))


def printable(text: str) -> str:
    """Replace control characters (e.g. newlines in file names) with ``?``."""
    return "".join("?" if unicodedata.category(ch) == "Cc" else ch for ch in text)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns, keeping escapes."""
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    while i < len(text) and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        w = char_display_width(text[i])
        if col + w > max_cols:
            break
        out.append(text[i])
        col += w
        i += 1
    return "".join(out)

