"""Highlight state for the filtered result list.

``Selection.index`` is ``None`` while nothing is highlighted. The controller
calls ``reconcile`` after every refilter so the index is always valid for the
list about to be rendered.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Selection:
    """Optional index into the current filtered results."""

    index: int | None = None

    @property
    def is_selected(self) -> bool:
        return self.index is not None

    def reconcile(self, count: int) -> None:
        """Clamp or populate the index for a list of ``count`` entries."""
        if self.index is not None:
            if self.index >= count:
                self.index = count - 1 if count > 0 else None
            return
        if count > 0:
            self.index = 0

    def move_up(self, count: int) -> None:
        if self.index is None:
            if count > 0:
                self.index = count - 1
            return
        if self.index > 0:
            self.index -= 1

    def move_down(self, count: int) -> None:
        if self.index is None:
            if count > 0:
                self.index = 0
            return
        if self.index + 1 < count:
            self.index += 1

    def page_up(self, count: int, rows: int) -> None:
        """Move up by one page of ``rows`` entries, stopping at the first."""
        if self.index is None:
            self.move_up(count)
            return
        self.index = max(0, self.index - max(1, rows))

    def page_down(self, count: int, rows: int) -> None:
        """Move down by one page of ``rows`` entries, stopping at the last."""
        if self.index is None:
            self.move_down(count)
            return
        if count == 0:
            return
        self.index = max(self.index, min(count - 1, self.index + max(1, rows)))

    def confirm(self, filtered: Sequence[str]) -> str | None:
        """Return the highlighted entry, or ``None`` when nothing is selected."""
        if self.index is None or not (0 <= self.index < len(filtered)):
            return None
        return filtered[self.index]
