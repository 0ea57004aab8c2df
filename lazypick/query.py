"""Editable single-line query buffer.

Owns the query text and a character-offset cursor. All cursor arithmetic is
in characters; display columns are derived on demand for rendering.
"""

from __future__ import annotations

from .ansi import char_display_width, display_width


class QueryBuffer:
    """Query text plus cursor, clamped to ``0 <= cursor <= len(text)``."""

    def __init__(self, text: str = "", cursor: int | None = None) -> None:
        self._text = text
        self._cursor = len(text) if cursor is None else max(0, min(cursor, len(text)))

    @property
    def cursor(self) -> int:
        return self._cursor

    def value(self) -> str:
        return self._text

    def insert(self, char: str) -> None:
        """Insert ``char`` at the cursor and advance past it."""
        self._text = self._text[: self._cursor] + char + self._text[self._cursor :]
        self._cursor += len(char)

    def delete_backward(self) -> None:
        if self._cursor == 0:
            return
        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self._cursor -= 1

    def delete_forward(self) -> None:
        if self._cursor >= len(self._text):
            return
        self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]

    def move_cursor(self, delta: int) -> None:
        self._cursor = max(0, min(len(self._text), self._cursor + delta))

    def move_to_start(self) -> None:
        self._cursor = 0

    def move_to_end(self) -> None:
        self._cursor = len(self._text)

    def _previous_word_start(self) -> int:
        idx = self._cursor
        while idx > 0 and self._text[idx - 1].isspace():
            idx -= 1
        while idx > 0 and not self._text[idx - 1].isspace():
            idx -= 1
        return idx

    def _next_word_start(self) -> int:
        idx = self._cursor
        end = len(self._text)
        while idx < end and not self._text[idx].isspace():
            idx += 1
        while idx < end and self._text[idx].isspace():
            idx += 1
        return idx

    def move_word(self, direction: int) -> None:
        """Jump to the previous (``direction < 0``) or next word start."""
        if direction < 0:
            self._cursor = self._previous_word_start()
        elif direction > 0:
            self._cursor = self._next_word_start()

    def delete_word_backward(self) -> None:
        start = self._previous_word_start()
        self._text = self._text[:start] + self._text[self._cursor :]
        self._cursor = start

    def delete_to_start(self) -> None:
        self._text = self._text[self._cursor :]
        self._cursor = 0

    def delete_to_end(self) -> None:
        self._text = self._text[: self._cursor]

    def visual_cursor(self) -> int:
        """Display column of the cursor relative to the start of the text."""
        return display_width(self._text[: self._cursor])

    def visual_scroll(self, viewport_width: int) -> int:
        """Return the minimal column offset that keeps the cursor on screen.

        The offset satisfies ``visual_cursor() - offset < viewport_width`` and
        is rounded up to the next character boundary so a wide character is
        never split at the left edge.
        """
        width = max(1, viewport_width)
        cursor_col = self.visual_cursor()
        wanted = max(0, cursor_col - width + 1)
        scroll = 0
        for ch in self._text:
            if scroll >= wanted:
                break
            scroll += char_display_width(ch)
        return scroll

    def __repr__(self) -> str:
        return f"QueryBuffer({self._text!r}, cursor={self._cursor})"
