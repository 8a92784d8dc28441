"""UI theme definitions and selection helpers.

Themes only change ANSI styling of borders, headers, and the selection bar.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    border: str
    title: str
    reverse: str
    reset: str
    header: str
    placeholder: str


DEFAULT_THEME = UITheme(
    name="default",
    border="\033[2m",
    title="\033[1;38;5;81m",
    reverse="\033[7m",
    reset="\033[0m",
    header="\033[1m",
    placeholder="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    reverse="\033[7m",
    reset="\033[0m",
    header="\033[1;38;5;117m",
    placeholder="\033[2;38;5;110m",
)

# Reverse video only, for terminals without color support.
MONO_THEME = UITheme(
    name="mono",
    border="",
    title="",
    reverse="\033[7m",
    reset="\033[0m",
    header="",
    placeholder="",
)

_THEMES: dict[str, UITheme] = {
    theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME, MONO_THEME)
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None) -> UITheme:
    """Return the theme registered under ``name``; unknown names use the default."""
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
