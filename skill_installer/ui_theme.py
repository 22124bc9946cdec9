"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the selector rows, footer, and install messages.
The plain theme carries empty strings so output degrades to bare text.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    pointer: str
    selected: str
    unselected: str
    path: str
    footer: str
    heading: str
    success: str
    error: str
    reset: str


DEFAULT_THEME = UITheme(
    name="default",
    pointer="\033[36m",
    selected="\033[1;36m",
    unselected="",
    path="\033[2m",
    footer="\033[2m",
    heading="\033[1m",
    success="\033[32m",
    error="\033[31m",
    reset="\033[0m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    pointer="\033[38;5;39m",
    selected="\033[1;38;5;45m",
    unselected="\033[38;5;252m",
    path="\033[2;38;5;110m",
    footer="\033[2;38;5;110m",
    heading="\033[1;38;5;45m",
    success="\033[38;5;84m",
    error="\033[38;5;203m",
    reset="\033[0m",
)

PLAIN_THEME = UITheme(
    name="plain",
    pointer="",
    selected="",
    unselected="",
    path="",
    footer="",
    heading="",
    success="",
    error="",
    reset="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def color_disabled(stream: TextIO, no_color: bool = False) -> bool:
    """Whether styling should be dropped for ``stream``.

    ``NO_COLOR`` in the environment and non-tty streams both disable color.
    """
    if no_color or os.environ.get("NO_COLOR"):
        return True
    isatty = getattr(stream, "isatty", None)
    return not (callable(isatty) and isatty())
