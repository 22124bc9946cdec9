"""Interactive single-choice selector.

``SelectionMachine`` holds the transition rules and knows nothing about the
terminal. ``Selector`` pairs it with a rendering surface and an input stream;
``select`` adds raw-mode handling around one interactive run.
"""

from __future__ import annotations

import enum
import sys
from collections.abc import AsyncIterable, Sequence

from loguru import logger

from .agents import AgentOption
from .input import Key, KeyStream, decode_chunk
from .render import TerminalSurface, render_lines
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme

CANCEL_EXIT_CODE = 130
ENTER_KEYS = frozenset({Key.ENTER_CR, Key.ENTER_LF})
DIGIT_KEYS = frozenset("123456789")


class SelectionCancelled(SystemExit):
    """Raised when the user interrupts a selection.

    Subclasses ``SystemExit`` so that, left uncaught, it ends the process
    once the terminal has been restored.
    """

    def __init__(self) -> None:
        super().__init__(CANCEL_EXIT_CODE)


class SelectionOutcome(enum.Enum):
    IGNORED = "ignored"
    MOVED = "moved"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class SelectionMachine:
    """Key-driven state for one selection over ``option_count`` rows."""

    def __init__(self, option_count: int, selected_index: int = 0) -> None:
        if option_count <= 0:
            raise ValueError("selection requires at least one option")
        if not 0 <= selected_index < option_count:
            raise ValueError(f"selected index {selected_index} out of range for {option_count} options")
        self.option_count = option_count
        self.selected_index = selected_index
        self.confirmed = False
        self.cancelled = False

    @property
    def finished(self) -> bool:
        return self.confirmed or self.cancelled

    def feed(self, key: Key | str) -> SelectionOutcome:
        """Apply one key token and report what changed.

        Once the selection is confirmed or cancelled every later key is
        ignored.
        """
        if self.finished:
            return SelectionOutcome.IGNORED
        if key is Key.UP:
            self.selected_index = (self.selected_index - 1 + self.option_count) % self.option_count
            return SelectionOutcome.MOVED
        if key is Key.DOWN:
            self.selected_index = (self.selected_index + 1) % self.option_count
            return SelectionOutcome.MOVED
        if key in DIGIT_KEYS:
            target = int(key) - 1
            if target >= self.option_count:
                return SelectionOutcome.IGNORED
            self.selected_index = target
            return SelectionOutcome.MOVED
        if key in ENTER_KEYS:
            self.confirmed = True
            return SelectionOutcome.CONFIRMED
        if key is Key.CTRL_C:
            self.cancelled = True
            return SelectionOutcome.CANCELLED
        return SelectionOutcome.IGNORED


class Selector:
    """Draws the option list and resolves one choice from raw input chunks."""

    def __init__(
        self,
        options: Sequence[AgentOption],
        footer: str | None = None,
        *,
        surface: TerminalSurface | None = None,
        theme: UITheme = DEFAULT_THEME,
    ) -> None:
        if not options:
            raise ValueError("select() requires at least one option")
        self.options = tuple(options)
        self.footer = footer
        self.surface = surface if surface is not None else TerminalSurface()
        self.theme = theme
        self.machine = SelectionMachine(len(self.options))
        self._rendered_lines = 0

    @property
    def selected_index(self) -> int:
        return self.machine.selected_index

    def render(self) -> None:
        lines = render_lines(self.options, self.machine.selected_index, self.footer, self.theme)
        self._rendered_lines = self.surface.render(lines)

    def redraw(self) -> None:
        self.surface.erase(self._rendered_lines)
        self.render()

    def handle_chunk(self, chunk: bytes) -> SelectionOutcome:
        outcome = self.machine.feed(decode_chunk(chunk))
        if outcome is SelectionOutcome.MOVED:
            self.redraw()
        return outcome

    async def run(self, chunks: AsyncIterable[bytes]) -> int:
        """Consume ``chunks`` until confirm and return the chosen index.

        Raises ``SelectionCancelled`` on interrupt, or when input ends before
        a choice was confirmed.
        """
        async for chunk in chunks:
            outcome = self.handle_chunk(chunk)
            if outcome is SelectionOutcome.CONFIRMED:
                return self.machine.selected_index
            if outcome is SelectionOutcome.CANCELLED:
                raise SelectionCancelled()
        raise SelectionCancelled()


async def select(
    options: Sequence[AgentOption],
    footer: str | None = None,
    *,
    stdin_fd: int | None = None,
    surface: TerminalSurface | None = None,
    theme: UITheme = DEFAULT_THEME,
) -> int:
    """Let the user pick one of ``options`` and return its index.

    Draws the list, then holds ``stdin_fd`` in raw mode while listening for
    keys. The terminal mode is restored before this returns or raises
    ``SelectionCancelled``. Only one selection may run at a time per process.
    """
    selector = Selector(options, footer, surface=surface, theme=theme)
    fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    selector.render()
    terminal = TerminalController(fd)
    with terminal.raw_mode(), KeyStream(fd) as chunks:
        index = await selector.run(chunks)
    logger.debug("selected option {} ({})", index, selector.options[index].name)
    return index
