"""Main interactive event loop for the picker.

Each iteration refilters the candidates, reconciles the selection, draws a
full frame, and then blocks for exactly one key token.
"""

from __future__ import annotations

from collections.abc import Callable

from .keys import build_picker_key_registry, handle_picker_key
from .matching import filter_candidates
from .render import PickerSurface, render_frame, results_height
from .state import PickerState


def refresh_matches(state: PickerState) -> None:
    """Recompute ``state.filtered`` for the current query and fix the selection."""
    state.filtered = filter_candidates(
        state.query.value(),
        state.candidates,
        best_match_first=state.best_match_first,
    )
    state.selection.reconcile(len(state.filtered))


def run_picker_loop(
    state: PickerState,
    read_event: Callable[[], str],
    surface: PickerSurface,
) -> str:
    """Run the picker until a selection is confirmed and return it.

    Cancellation raises ``UserCancelled``; errors from ``read_event`` or the
    surface propagate unchanged.
    """

    def page_rows() -> int:
        return max(1, results_height(surface.viewport()[1], state.max_result_rows))

    registry = build_picker_key_registry(state, page_rows)
    while True:
        refresh_matches(state)
        render_frame(
            surface,
            state.query,
            state.filtered,
            state.selection,
            max_result_rows=state.max_result_rows,
        )
        handle_picker_key(read_event(), state, registry)
        if state.chosen is not None:
            return state.chosen
