"""Tests for terminal raw-mode control.

Verifies the saved tty state is restored on every exit path out of raw mode.
"""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from skill_installer.terminal import TerminalController


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_raw_mode_round_trip_saved_state(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("skill_installer.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "skill_installer.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("skill_installer.terminal.termios.tcsetattr") as setattr_mock:
            controller = TerminalController(stdin_fd=0)
            controller.enable_raw_mode()
            self.assertTrue(controller.is_raw)
            controller.disable_raw_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)
        self.assertFalse(controller.is_raw)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("skill_installer.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0)

        with mock.patch.object(controller, "enable_raw_mode") as enable_mock, mock.patch.object(
            controller, "disable_raw_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_raw_mode_restores_terminal_on_system_exit(self) -> None:
        with mock.patch("skill_installer.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0)

        with mock.patch.object(controller, "enable_raw_mode"), mock.patch.object(
            controller, "disable_raw_mode"
        ) as disable_mock:
            with self.assertRaises(SystemExit):
                with controller.raw_mode():
                    raise SystemExit(130)

        disable_mock.assert_called_once()


if __name__ == "__main__":
    unittest.main()
