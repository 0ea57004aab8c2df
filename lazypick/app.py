"""Picker session bootstrap.

Opens the controlling terminal, wires key decoding and ANSI rendering into
the event loop, and guarantees the terminal is restored however the session
ends.
"""

from __future__ import annotations

import logging
import termios
from collections.abc import Callable, Sequence

from .errors import TerminalIOError
from .input import read_key
from .loop import run_picker_loop
from .render import AnsiSurface
from .state import PickerState
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)


def run_picker(
    candidates: Sequence[str],
    *,
    theme: UITheme = DEFAULT_THEME,
    max_result_rows: int | None = None,
    best_match_first: bool = False,
    open_terminal: Callable[[], TerminalController] = TerminalController.open_tty,
) -> str:
    """Show the interactive picker over ``candidates`` and return the choice.

    Raises ``UserCancelled`` when dismissed and ``TerminalIOError`` when the
    terminal cannot be used.
    """
    terminal = open_terminal()
    try:
        state = PickerState(
            candidates=tuple(candidates),
            best_match_first=best_match_first,
            max_result_rows=max_result_rows,
        )
        surface = AnsiSurface(terminal.write, terminal.size, theme)

        def read_event() -> str:
            key = read_key(terminal.stdin_fd)
            if not key:
                raise TerminalIOError("Terminal input closed")
            return key

        logger.debug("starting picker over %d candidates", len(state.candidates))
        try:
            with terminal.raw_mode():
                return run_picker_loop(state, read_event, surface)
        except (OSError, termios.error) as exc:
            logger.debug("terminal failure", exc_info=True)
            raise TerminalIOError(f"Terminal I/O failed: {exc}") from exc
    finally:
        terminal.close()
