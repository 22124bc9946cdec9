"""Selector row formatting and the terminal rendering surface.

Row formatting is pure so tests can assert on exact text. ``TerminalSurface``
is the only place that writes cursor-movement escapes, which lets tests and
alternate terminals substitute their own surface.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .agents import AgentOption
from .ui_theme import DEFAULT_THEME, UITheme

POINTER_GLYPH = "❯"
BLANK_GLYPH = " "
CURSOR_UP = "\x1b[1A"
CLEAR_LINE = "\x1b[2K"
# Raw mode turns off output post-processing, so rows end with an explicit CR.
LINE_END = "\r\n"


def format_option_line(
    option: AgentOption,
    index: int,
    selected: bool,
    theme: UITheme = DEFAULT_THEME,
) -> str:
    """Format one selector row.

    The selected row carries the pointer glyph and an emphasized label; other
    rows get a blank glyph and the plain label. Both show the option's path
    (or the custom-path placeholder) dimmed.
    """
    label = f"{index + 1}. {option.name}"
    path = f"{theme.path}({option.display_path}){theme.reset}"
    if selected:
        return f"{theme.pointer}{POINTER_GLYPH}{theme.reset} {theme.selected}{label}{theme.reset} {path}"
    return f"{BLANK_GLYPH} {theme.unselected}{label}{theme.reset} {path}"


def render_lines(
    options: Sequence[AgentOption],
    selected_index: int,
    footer: str | None = None,
    theme: UITheme = DEFAULT_THEME,
) -> list[str]:
    """Build every line of one selector frame, options first then footer."""
    lines = [
        format_option_line(option, index, index == selected_index, theme)
        for index, option in enumerate(options)
    ]
    if footer:
        lines.append("")
        lines.append(f"{theme.footer}{footer}{theme.reset}")
    return lines


class TerminalSurface:
    """Line-oriented output target supporting render and erase."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def render(self, lines: Sequence[str]) -> int:
        """Write ``lines`` below the cursor and return how many were written."""
        self.stream.write("".join(f"{line}{LINE_END}" for line in lines))
        self.stream.flush()
        return len(lines)

    def erase(self, line_count: int) -> None:
        """Move up and clear ``line_count`` rows, leaving the cursor at the top one."""
        if line_count <= 0:
            return
        self.stream.write(f"{CURSOR_UP}{CLEAR_LINE}" * line_count)
        self.stream.flush()
