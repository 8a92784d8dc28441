"""Frame composition for the two-pane browser view.

``build_frame_lines`` is pure: it turns a ``RenderContext`` into screen rows.
``render_frame`` writes those rows to the terminal in a single write.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

from .ansi import clip_ansi_line, display_width, printable
from .browser import NavigationState, metadata_lines
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)

MIN_PANE_WIDTH = 12
DEFAULT_LEFT_PANE_PERCENT = 50.0
EMPTY_SELECTION_LABEL = "(empty)"
EMPTY_PLACEHOLDER = "No entries"


@dataclass
class RenderContext:
    path: str
    entries: list[str]
    selected: int
    metadata_text: str | None
    width: int
    height: int
    left_width: int
    theme: UITheme = DEFAULT_THEME


def compute_left_width(total_width: int, percent: float | None = None) -> int:
    """Return left pane width for ``percent`` of ``total_width``.

    Both panes keep ``MIN_PANE_WIDTH`` columns when the terminal is wide
    enough; narrower terminals are split in half.
    """
    if percent is None:
        percent = DEFAULT_LEFT_PANE_PERCENT
    if total_width < 2 * MIN_PANE_WIDTH:
        return max(1, total_width // 2)
    desired = int(total_width * percent / 100.0)
    return max(MIN_PANE_WIDTH, min(desired, total_width - MIN_PANE_WIDTH))


def list_window_start(selected: int, count: int, rows: int) -> int:
    """First entry index to show so ``selected`` stays inside ``rows`` rows."""
    if rows <= 0 or count <= rows:
        return 0
    return max(0, min(selected - rows + 1, count - rows))


def _cell(text: str, width: int, style: str = "", reset: str = "") -> str:
    clipped = clip_ansi_line(text, width)
    padding = " " * max(0, width - display_width(clipped))
    if style and clipped:
        return f"{style}{clipped}{reset}{padding}"
    return clipped + padding


def _box_rows(
    body: list[str],
    width: int,
    height: int,
    theme: UITheme,
    title: str = "",
) -> list[str]:
    """Draw a bordered box of ``width`` x ``height`` around pre-styled ``body`` rows."""
    if width < 2 or height < 2:
        return [" " * max(0, width) for _ in range(max(0, height))]

    inner_width = width - 2
    border = theme.border
    reset = theme.reset if border else ""
    title_text = clip_ansi_line(f" {printable(title)} ", inner_width) if title else ""
    top_fill = "─" * (inner_width - display_width(title_text))
    if title_text and theme.title:
        top = f"{border}┌{reset}{theme.title}{title_text}{theme.reset}{border}{top_fill}┐{reset}"
    else:
        top = f"{border}┌{title_text}{top_fill}┐{reset}"

    rows = [top]
    for row in range(height - 2):
        text = body[row] if row < len(body) else " " * inner_width
        rows.append(f"{border}│{reset}{text}{border}│{reset}")
    rows.append(f"{border}└{'─' * inner_width}┘{reset}")
    return rows


def _entry_rows(context: RenderContext, inner_width: int, inner_rows: int) -> list[str]:
    theme = context.theme
    start = list_window_start(context.selected, len(context.entries), inner_rows)
    rows: list[str] = []
    for idx in range(start, min(len(context.entries), start + inner_rows)):
        name = printable(context.entries[idx])
        if idx == context.selected:
            rows.append(_cell(name, inner_width, theme.reverse, theme.reset))
        else:
            rows.append(_cell(name, inner_width))
    return rows


def _detail_rows(context: RenderContext, inner_width: int, inner_rows: int) -> list[str]:
    theme = context.theme
    if not context.entries or context.metadata_text is None:
        rows = [
            _cell(f"Selected: {EMPTY_SELECTION_LABEL}", inner_width, theme.header, theme.reset),
            _cell(EMPTY_PLACEHOLDER, inner_width, theme.placeholder, theme.reset),
        ]
        return rows[:inner_rows]

    name = printable(context.entries[context.selected])
    rows = [_cell(f"Selected: {name}", inner_width, theme.header, theme.reset)]
    for line in metadata_lines(context.metadata_text):
        if len(rows) >= inner_rows:
            break
        rows.append(_cell(line, inner_width))
    return rows[:inner_rows]


def build_frame_lines(context: RenderContext) -> list[str]:
    """Compose ``context.height`` screen rows: entry box left, detail box right."""
    height = max(0, context.height)
    left_width = max(0, min(context.left_width, context.width))
    right_width = max(0, context.width - left_width)
    inner_rows = max(0, height - 2)

    left_rows = _box_rows(
        _entry_rows(context, max(0, left_width - 2), inner_rows),
        left_width,
        height,
        context.theme,
        title=context.path,
    )
    right_rows = _box_rows(
        _detail_rows(context, max(0, right_width - 2), inner_rows),
        right_width,
        height,
        context.theme,
    )
    return [left + right for left, right in zip(left_rows, right_rows)]


def frame_context_for_state(
    state: NavigationState,
    width: int,
    height: int,
    left_width: int,
    theme: UITheme = DEFAULT_THEME,
) -> RenderContext:
    """Snapshot ``state`` for one frame; metadata is only looked up for a real selection."""
    return RenderContext(
        path=state.path,
        entries=state.entries,
        selected=state.selected,
        metadata_text=None if state.is_empty else state.metadata(),
        width=width,
        height=height,
        left_width=left_width,
        theme=theme,
    )


def render_frame(context: RenderContext) -> None:
    logger.debug("Drawing UI: selected=%d", context.selected)
    out = "\033[H\033[J" + "\r\n".join(build_frame_lines(context))
    os.write(sys.stdout.fileno(), out.encode("utf-8", errors="replace"))


__all__ = [
    "MIN_PANE_WIDTH",
    "DEFAULT_LEFT_PANE_PERCENT",
    "EMPTY_SELECTION_LABEL",
    "EMPTY_PLACEHOLDER",
    "RenderContext",
    "compute_left_width",
    "list_window_start",
    "build_frame_lines",
    "frame_context_for_state",
    "render_frame",
]
