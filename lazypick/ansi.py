"""Display-width measurement and clipping for terminal rows.

Keeps rendering aligned when wide characters or combining marks are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_ansi(text: str) -> str:
    """Remove CSI escape sequences, leaving only printable content."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks and control characters consume no columns, and East Asian
    wide/fullwidth characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) in {"Cc", "Cf"}:
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return total display columns for plain ``text``."""
    return sum(char_display_width(ch) for ch in text)


def sanitize_text(text: str) -> str:
    """Replace control characters so a row cannot move the terminal cursor."""
    if text.isprintable():
        return text
    return "".join(ch if ch.isprintable() or ch == " " else "\N{REPLACEMENT CHARACTER}" for ch in text)


def clip_line(text: str, max_cols: int) -> str:
    """Trim plain text to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def slice_line(text: str, start_cols: int, max_cols: int) -> str:
    """Return the horizontal viewport of plain ``text``.

    Characters that straddle ``start_cols`` are dropped rather than split, so
    the returned text always starts on a character boundary.
    """
    if max_cols <= 0 or not text:
        return ""
    start_cols = max(0, start_cols)

    col = 0
    idx = 0
    while idx < len(text) and col < start_cols:
        col += char_display_width(text[idx])
        idx += 1
    return clip_line(text[idx:], max_cols)
