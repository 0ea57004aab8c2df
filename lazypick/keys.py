"""Keyboard dispatch for the picker.

Named key tokens are routed through a ``KeyComboRegistry``; single printable
characters are inserted into the query. Everything else, mouse events
included, is ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .errors import UserCancelled
from .state import PickerState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Small key-dispatch table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        """Initialize empty registry with optional token normalizer."""
        self._normalize = normalize if normalize is not None else self._identity
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    @staticmethod
    def _identity(key: str) -> str:
        """Return key unchanged for exact-match dispatch registries."""
        return key

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key`` and return its handled result."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return handler()


def build_picker_key_registry(
    state: PickerState,
    page_rows: Callable[[], int],
) -> KeyComboRegistry:
    """Bind navigation, editing, confirm, and cancel keys to ``state``.

    ``page_rows`` reports the current result-list height for paging.
    """
    query = state.query
    selection = state.selection

    def edit(action: Callable[[], None]) -> Callable[[], bool]:
        def handler() -> bool:
            action()
            return True

        return handler

    def move_up() -> bool:
        selection.move_up(len(state.filtered))
        return True

    def move_down() -> bool:
        selection.move_down(len(state.filtered))
        return True

    def page_up() -> bool:
        selection.page_up(len(state.filtered), page_rows())
        return True

    def page_down() -> bool:
        selection.page_down(len(state.filtered), page_rows())
        return True

    def confirm() -> bool:
        chosen = selection.confirm(state.filtered)
        if chosen is not None:
            logger.debug("confirmed entry %d of %d", selection.index, len(state.filtered))
            state.chosen = chosen
        return True

    def cancel() -> bool:
        logger.debug("picker cancelled")
        raise UserCancelled()

    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("UP", "CTRL_P"), move_up),
        KeyComboBinding(("DOWN", "CTRL_N"), move_down),
        KeyComboBinding(("PAGE_UP",), page_up),
        KeyComboBinding(("PAGE_DOWN",), page_down),
        KeyComboBinding(("ENTER",), confirm),
        KeyComboBinding(("ESC", "CTRL_C"), cancel),
        KeyComboBinding(("BACKSPACE",), edit(query.delete_backward)),
        KeyComboBinding(("DELETE", "CTRL_D"), edit(query.delete_forward)),
        KeyComboBinding(("LEFT", "CTRL_B"), edit(lambda: query.move_cursor(-1))),
        KeyComboBinding(("RIGHT", "CTRL_F"), edit(lambda: query.move_cursor(1))),
        KeyComboBinding(("HOME", "CTRL_A"), edit(query.move_to_start)),
        KeyComboBinding(("END", "CTRL_E"), edit(query.move_to_end)),
        KeyComboBinding(("ALT_LEFT",), edit(lambda: query.move_word(-1))),
        KeyComboBinding(("ALT_RIGHT",), edit(lambda: query.move_word(1))),
        KeyComboBinding(("CTRL_W",), edit(query.delete_word_backward)),
        KeyComboBinding(("CTRL_U",), edit(query.delete_to_start)),
        KeyComboBinding(("CTRL_K",), edit(query.delete_to_end)),
    )


def handle_picker_key(key: str, state: PickerState, registry: KeyComboRegistry) -> bool:
    """Apply one key token to ``state``.

    Returns whether the key was handled. Unrecognized tokens, such as mouse
    events, leave the state untouched.
    """
    if registry.dispatch(key):
        return True
    if len(key) == 1 and key.isprintable():
        state.query.insert(key)
        return True
    return False
