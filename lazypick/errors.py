"""Error taxonomy for a picker session.

Every fatal condition is a ``PickerError`` subclass so the CLI can report
them uniformly on stderr with a failing exit status.
"""

from __future__ import annotations


class PickerError(Exception):
    """Base class for errors that end a picker session unsuccessfully."""


class InputReadError(PickerError):
    """Standard input could not be read or decoded into candidate lines."""


class TerminalIOError(PickerError):
    """The terminal device could not be opened, configured, read, or written."""


class UserCancelled(PickerError):
    """The user dismissed the picker without confirming a selection."""

    def __init__(self, message: str = "User cancelled") -> None:
        super().__init__(message)
