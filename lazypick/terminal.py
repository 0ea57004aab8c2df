"""Terminal control helpers for the picker session.

Owns raw-mode lifecycle, alternate-screen switching, and mouse capture.
The controller talks to the controlling terminal directly because stdin
carries the candidate list and stdout carries the chosen line.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

from .errors import TerminalIOError

TTY_PATH = "/dev/tty"

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l\x1b[?1000h\x1b[?1002h\x1b[?1006h"
LEAVE_TUI_SEQUENCE = b"\x1b[?1000l\x1b[?1002l\x1b[?1006l\x1b[?25h\x1b[?1049l"

logger = logging.getLogger(__name__)


class TerminalController:
    """Manage terminal mode transitions for one picker session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind input/output file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalIOError(f"Cannot read terminal attributes: {exc}") from exc
        self._owned_fd: int | None = None

    @classmethod
    def open_tty(cls, path: str = TTY_PATH) -> TerminalController:
        """Open the controlling terminal for both reading and writing."""
        try:
            fd = os.open(path, os.O_RDWR | os.O_NOCTTY)
        except OSError as exc:
            raise TerminalIOError(f"Cannot open terminal {path}: {exc.strerror or exc}") from exc
        try:
            controller = cls(fd, fd)
        except TerminalIOError:
            os.close(fd)
            raise
        controller._owned_fd = fd
        return controller

    def close(self) -> None:
        if self._owned_fd is None:
            return
        os.close(self._owned_fd)
        self._owned_fd = None

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with mouse capture enabled."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
            # Enter alternate screen, hide cursor, and enable SGR mouse reporting.
            os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        except (OSError, termios.error) as exc:
            raise TerminalIOError(f"Cannot initialize terminal: {exc}") from exc
        logger.debug("entered raw alternate-screen mode")

    def disable_tui_mode(self) -> None:
        """Restore the primary screen, cursor, mouse mode, and tty attributes."""
        try:
            # Disable mouse reporting, show cursor, and restore the main screen buffer.
            os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        logger.debug("restored terminal state")

    def size(self) -> tuple[int, int]:
        """Return ``(columns, rows)`` of the terminal, at least ``(1, 1)``."""
        try:
            term = os.get_terminal_size(self.stdout_fd)
        except OSError:
            return 80, 24
        return max(1, term.columns), max(1, term.lines)

    def write(self, data: bytes) -> None:
        """Write all of ``data`` to the terminal."""
        view = memoryview(data)
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
