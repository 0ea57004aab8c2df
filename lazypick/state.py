"""Mutable picker session state owned by the controller."""

from __future__ import annotations

from dataclasses import dataclass, field

from .query import QueryBuffer
from .selection import Selection


@dataclass
class PickerState:
    """Everything the event loop reads and mutates between frames.

    ``candidates`` never changes after startup. ``filtered`` is replaced
    wholesale on every iteration and ``chosen`` is set once a selection is
    confirmed.
    """

    candidates: tuple[str, ...]
    query: QueryBuffer = field(default_factory=QueryBuffer)
    selection: Selection = field(default_factory=Selection)
    filtered: list[str] = field(default_factory=list)
    best_match_first: bool = False
    max_result_rows: int | None = None
    chosen: str | None = None
