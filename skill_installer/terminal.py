"""Terminal mode control for the selector.

Owns the raw-mode lifecycle of the input tty: the attributes in effect at
construction are saved and restored when raw mode ends.
"""

from __future__ import annotations

import contextlib
import termios
import tty

from loguru import logger


class TerminalController:
    """Switch a tty between its saved mode and raw byte-at-a-time input."""

    def __init__(self, stdin_fd: int) -> None:
        """Capture tty state for ``stdin_fd``."""
        self.stdin_fd = stdin_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._raw = False

    @property
    def is_raw(self) -> bool:
        return self._raw

    def enable_raw_mode(self) -> None:
        """Deliver keys unbuffered, without echo or signal generation."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._raw = True

    def disable_raw_mode(self) -> None:
        """Restore the tty attributes captured at construction."""
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        self._raw = False

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that holds raw mode for the enclosed block."""
        try:
            self.enable_raw_mode()
            yield self
        finally:
            self.disable_raw_mode()
            logger.debug("restored terminal mode on fd {}", self.stdin_fd)
