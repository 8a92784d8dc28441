"""Runtime bootstrap and the interactive event loop.

The loop is strictly sequential: draw when dirty, read one key, apply one
transition. Terminal size is re-read every iteration so resizes relayout.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass

from .ansi import printable
from .browser import MAX_ENTRIES, NavigationState
from .config import load_left_pane_percent, load_max_entries, load_theme_name
from .input import read_key
from .keys import BrowserKeyHandler
from .render import RenderContext, compute_left_width, frame_context_for_state, render_frame
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme, resolve_theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowserSettings:
    """Presentation and capacity settings resolved from CLI flags and config."""

    max_entries: int = MAX_ENTRIES
    left_pane_percent: float | None = None
    theme: UITheme = DEFAULT_THEME


def resolve_settings(max_entries: int | None = None, theme_name: str | None = None) -> BrowserSettings:
    """Merge explicit overrides over persisted config values."""
    if max_entries is None:
        max_entries = load_max_entries()
    if theme_name is None:
        theme_name = load_theme_name()
    return BrowserSettings(
        max_entries=max_entries if max_entries is not None else MAX_ENTRIES,
        left_pane_percent=load_left_pane_percent(),
        theme=resolve_theme(theme_name),
    )


def run_main_loop(
    state: NavigationState,
    stdin_fd: int,
    settings: BrowserSettings,
    *,
    read_key_fn: Callable[[int], str] = read_key,
    draw: Callable[[RenderContext], None] = render_frame,
    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
) -> None:
    """Run until a quit key is read or input reaches EOF."""
    handler = BrowserKeyHandler(state)
    dirty = True
    last_size: tuple[int, int] | None = None

    while True:
        term = get_terminal_size((80, 24))
        size = (term.columns, term.lines)
        if size != last_size:
            last_size = size
            dirty = True

        if dirty:
            left_width = compute_left_width(term.columns, settings.left_pane_percent)
            draw(frame_context_for_state(state, term.columns, term.lines, left_width, settings.theme))
            dirty = False

        key = read_key_fn(stdin_fd)
        if not key:
            logger.info("Input closed, exiting")
            return
        if handler.handle(key):
            logger.info("Quit requested")
            return
        dirty = handler.changed


def print_entries(state: NavigationState) -> None:
    """Non-interactive fallback: write the current entry list, one per line.

    Names go out as raw filesystem bytes so undecodable names survive.
    """
    sys.stdout.flush()
    out = sys.stdout.buffer
    for name in state.entries:
        out.write(os.fsencode(printable(name)) + b"\n")
    out.flush()


def run_browser(settings: BrowserSettings) -> None:
    """Build navigation state from the working directory and run the TUI."""
    logger.info("Starting file browser")
    state = NavigationState.from_cwd(max_entries=settings.max_entries)

    stdin_fd = sys.stdin.fileno()
    if not os.isatty(stdin_fd) or not os.isatty(sys.stdout.fileno()):
        print_entries(state)
        return

    terminal = TerminalController(stdin_fd=stdin_fd, stdout_fd=sys.stdout.fileno())
    with terminal.raw_mode():
        run_main_loop(state, stdin_fd, settings)
