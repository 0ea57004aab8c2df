"""Picker session wiring tests.

Runs ``run_picker`` against a fake terminal fed through an OS pipe so key
decoding, rendering, and terminal release are exercised together.
"""

from __future__ import annotations

import contextlib
import os
import unittest

from lazypick import input as input_mod
from lazypick.app import run_picker
from lazypick.errors import TerminalIOError, UserCancelled


class FakeTerminal:
    def __init__(self, payload: bytes, columns: int = 30, rows: int = 6, fail_writes: bool = False) -> None:
        self.stdin_fd, self._write_fd = os.pipe()
        os.write(self._write_fd, payload)
        os.close(self._write_fd)
        self.columns = columns
        self.rows = rows
        self.fail_writes = fail_writes
        self.events: list[str] = []
        self.frames: list[bytes] = []

    def write(self, data: bytes) -> None:
        if self.fail_writes:
            raise OSError(5, "Input/output error")
        self.frames.append(data)

    def size(self) -> tuple[int, int]:
        return self.columns, self.rows

    @contextlib.contextmanager
    def raw_mode(self):
        self.events.append("enter")
        try:
            yield
        finally:
            self.events.append("exit")

    def close(self) -> None:
        self.events.append("close")
        os.close(self.stdin_fd)


class RunPickerTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def test_typed_query_and_enter_return_choice(self) -> None:
        terminal = FakeTerminal(b"ap\r")
        chosen = run_picker(["apple", "banana", "grape"], open_terminal=lambda: terminal)

        self.assertEqual(chosen, "grape")
        self.assertEqual(terminal.events, ["enter", "exit", "close"])
        self.assertEqual(len(terminal.frames), 3)

    def test_arrow_keys_navigate_before_confirm(self) -> None:
        terminal = FakeTerminal(b"\x1b[B\x1b[B\x1b[A\r")
        chosen = run_picker(["apple", "banana", "grape"], open_terminal=lambda: terminal)
        self.assertEqual(chosen, "banana")

    def test_escape_cancels_and_releases_terminal(self) -> None:
        terminal = FakeTerminal(b"a\x1b")
        with self.assertRaises(UserCancelled):
            run_picker(["apple"], open_terminal=lambda: terminal)
        self.assertEqual(terminal.events, ["enter", "exit", "close"])

    def test_shift_tab_and_alt_letters_do_not_cancel(self) -> None:
        terminal = FakeTerminal(b"\x1b[Z\x1bx\x1b\r\x1b[B\r")
        chosen = run_picker(["apple", "banana"], open_terminal=lambda: terminal)

        self.assertEqual(chosen, "banana")
        self.assertEqual(terminal.events, ["enter", "exit", "close"])

    def test_mouse_reports_are_ignored(self) -> None:
        terminal = FakeTerminal(b"\x1b[<0;3;3M\x1b[<64;3;3M\r")
        chosen = run_picker(["apple", "banana"], open_terminal=lambda: terminal)
        self.assertEqual(chosen, "apple")

    def test_closed_terminal_input_raises_terminal_error(self) -> None:
        terminal = FakeTerminal(b"ab")
        with self.assertRaises(TerminalIOError):
            run_picker(["apple"], open_terminal=lambda: terminal)
        self.assertEqual(terminal.events, ["enter", "exit", "close"])

    def test_write_failure_raises_terminal_error_after_release(self) -> None:
        terminal = FakeTerminal(b"\r", fail_writes=True)
        with self.assertRaises(TerminalIOError) as ctx:
            run_picker(["apple"], open_terminal=lambda: terminal)
        self.assertIsInstance(ctx.exception.__cause__, OSError)
        self.assertEqual(terminal.events, ["enter", "exit", "close"])

    def test_max_result_rows_limits_drawn_rows(self) -> None:
        terminal = FakeTerminal(b"\r", rows=20)
        run_picker([f"row-{idx}" for idx in range(10)], max_result_rows=2, open_terminal=lambda: terminal)
        frame = terminal.frames[0].decode("utf-8")
        self.assertIn("row-1", frame)
        self.assertNotIn("row-2", frame)


if __name__ == "__main__":
    unittest.main()
