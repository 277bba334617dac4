"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, mouse reporting, and the
window title. ``suspended`` hands the terminal back temporarily so a tty
passphrase prompt can use it.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._tui_enabled = False
        self._title_pushed = False

    def write(self, data: bytes) -> None:
        os.write(self.stdout_fd, data)

    def size(self) -> tuple[int, int]:
        term = shutil.get_terminal_size((80, 24))
        return term.columns, term.lines

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen, hide cursor, and enable SGR mouse reporting with drag.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l\x1b[?1000h\x1b[?1002h\x1b[?1006h")
        self._tui_enabled = True

    def disable_tui_mode(self) -> None:
        # Disable mouse reporting, show cursor, and restore the main screen buffer.
        os.write(self.stdout_fd, b"\x1b[?1000l\x1b[?1002l\x1b[?1006l\x1b[?25h\x1b[?1049l")
        self._tui_enabled = False
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def set_title(self, title: str) -> None:
        """Save the current window title on the terminal's stack and replace it."""
        os.write(self.stdout_fd, f"\x1b[22;0t\x1b]0;{title}\x07".encode("utf-8", errors="replace"))
        self._title_pushed = True

    def restore_title(self) -> None:
        if not self._title_pushed:
            return
        os.write(self.stdout_fd, b"\x1b[23;0t")
        self._title_pushed = False

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()

    @contextlib.contextmanager
    def suspended(self):
        """Leave TUI mode for the duration of the block, then re-enter it."""
        if not self._tui_enabled:
            yield
            return
        self.disable_tui_mode()
        try:
            yield
        finally:
            self.enable_tui_mode()


__all__ = ["TerminalController"]
