"""Frame rendering for the picker.

``render_frame`` turns picker state into draw calls on a ``PickerSurface``.
It never touches the terminal itself, so the controller can be driven by a
recording surface in tests. ``AnsiSurface`` is the terminal implementation:
it composes one ANSI frame per iteration and writes it in a single call.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from .ansi import clip_line, display_width, sanitize_text, slice_line
from .query import QueryBuffer
from .selection import Selection
from .ui_theme import DEFAULT_THEME, UITheme

INPUT_ROWS = 1


class PickerSurface(Protocol):
    """Minimal drawing capability required by ``render_frame``."""

    def viewport(self) -> tuple[int, int]:
        """Return ``(columns, rows)`` available for the frame."""
        ...

    def draw_input_line(self, text: str, cursor_column: int) -> None: ...

    def draw_result_list(
        self,
        items: Sequence[str],
        highlighted_index: int | None,
        viewport_height: int,
    ) -> None: ...

    def flush(self) -> None: ...


def list_window_start(previous_start: int, highlighted: int | None, height: int, total: int) -> int:
    """Return the first visible list row so ``highlighted`` stays on screen.

    The window only moves when the highlighted row would fall outside it. It
    never starts later than needed to fill the viewport from the list tail.
    """
    start = max(0, min(previous_start, max(0, total - max(height, 1))))
    if highlighted is None or height <= 0:
        return start
    if highlighted < start:
        return highlighted
    if highlighted >= start + height:
        return highlighted - height + 1
    return start


def results_height(rows: int, max_result_rows: int | None = None) -> int:
    """Rows left for the result list below the input line."""
    height = max(0, rows - INPUT_ROWS)
    if max_result_rows is not None:
        height = min(height, max_result_rows)
    return height


def render_frame(
    surface: PickerSurface,
    query: QueryBuffer,
    filtered: Sequence[str],
    selection: Selection,
    max_result_rows: int | None = None,
) -> None:
    """Draw one complete frame for the current query, results, and selection."""
    columns, rows = surface.viewport()
    # The last column stays free for the cursor.
    scroll = query.visual_scroll(max(1, columns - 1))
    visible_query = slice_line(query.value(), scroll, columns)
    surface.draw_input_line(visible_query, query.visual_cursor() - scroll)
    surface.draw_result_list(filtered, selection.index, results_height(rows, max_result_rows))
    surface.flush()


class AnsiSurface:
    """``PickerSurface`` that renders ANSI frames through ``write``."""

    def __init__(
        self,
        write: Callable[[bytes], None],
        size: Callable[[], tuple[int, int]],
        theme: UITheme = DEFAULT_THEME,
    ) -> None:
        self._write = write
        self._size = size
        self.theme = theme
        self.list_start = 0
        self._columns = 1
        self._rows = 1
        self._cursor_column = 0
        self._out: list[str] = []

    def viewport(self) -> tuple[int, int]:
        self._columns, self._rows = self._size()
        return self._columns, self._rows

    def draw_input_line(self, text: str, cursor_column: int) -> None:
        theme = self.theme
        self._out.append("\033[H\033[J")
        line = clip_line(sanitize_text(text), self._columns)
        if line:
            self._out.append(f"{theme.query}{line}{theme.reset}" if theme.query else line)
        self._cursor_column = max(0, min(cursor_column, self._columns - 1))

    def draw_result_list(
        self,
        items: Sequence[str],
        highlighted_index: int | None,
        viewport_height: int,
    ) -> None:
        theme = self.theme
        height = max(0, min(viewport_height, self._rows - INPUT_ROWS))
        self.list_start = list_window_start(self.list_start, highlighted_index, height, len(items))
        for row in range(height):
            idx = self.list_start + row
            if idx >= len(items):
                break
            line = clip_line(sanitize_text(items[idx]), self._columns)
            self._out.append(f"\033[{row + 1 + INPUT_ROWS};1H")
            if idx == highlighted_index:
                padding = " " * max(0, self._columns - display_width(line))
                self._out.append(f"{theme.highlight}{line}{padding}{theme.reset}")
            elif theme.result:
                self._out.append(f"{theme.result}{line}{theme.reset}")
            else:
                self._out.append(line)

    def flush(self) -> None:
        """Place the cursor on the input line and emit the composed frame."""
        self._out.append(f"\033[1;{self._cursor_column + 1}H\033[?25h")
        frame = "".join(self._out)
        self._out = []
        self._write(frame.encode("utf-8", errors="replace"))
