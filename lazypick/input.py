"""Low-level terminal input decoding.

Reads raw bytes from the terminal and translates them into normalized key
tokens. Handles ESC-sequence timing, editing keys, UTF-8 text, and SGR mouse
events.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x01": "CTRL_A",
    b"\x02": "CTRL_B",
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\x05": "CTRL_E",
    b"\x06": "CTRL_F",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\t": "TAB",
    b"\x0b": "CTRL_K",
    b"\x0e": "CTRL_N",
    b"\x10": "CTRL_P",
    b"\x15": "CTRL_U",
    b"\x17": "CTRL_W",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"7": "HOME",
    b"4": "END",
    b"8": "END",
    b"3": "DELETE",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_sequence_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_utf8_char(fd: int, lead: bytes) -> str:
    """Collect continuation bytes for a multi-byte UTF-8 character."""
    data = lead
    for _ in range(_utf8_sequence_length(lead[0]) - 1):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        if not 0x80 <= part[0] <= 0xBF:
            _PENDING_BYTES.append(part)
            break
        data += part
    return data.decode("utf-8", errors="replace")


def _read_sgr_mouse(fd: int) -> str:
    # SGR mouse: ESC [ < btn ; col ; row (M/m)
    payload = []
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "UNKNOWN"
        if part in {b"M", b"m"}:
            break
        payload.append(part)
        if len(payload) > 64:
            return "UNKNOWN"
    try:
        btn_s, col_s, row_s = b"".join(payload).decode("ascii").split(";")
        btn = int(btn_s)
        col = int(col_s)
        row = int(row_s)
    except ValueError:
        return "UNKNOWN"
    button = btn & 0b11
    is_wheel = (btn & 0b0100_0000) != 0
    if is_wheel:
        if button == 0:
            return f"MOUSE_WHEEL_UP:{col}:{row}"
        if button == 1:
            return f"MOUSE_WHEEL_DOWN:{col}:{row}"
        return f"MOUSE_WHEEL:{col}:{row}"
    if button == 0:
        suffix = "DOWN" if part == b"M" else "UP"
        return f"MOUSE_LEFT_{suffix}:{col}:{row}"
    return f"MOUSE:{col}:{row}"


def _read_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` sequence."""
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "UNKNOWN"
    if seq in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[seq]
    if seq == b"<":
        return _read_sgr_mouse(fd)
    if not seq.isdigit():
        return "UNKNOWN"

    params = [seq]
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "UNKNOWN"
        if part.isdigit() or part == b";":
            params.append(part)
            if len(params) > 16:
                return "UNKNOWN"
            continue
        final = part
        break

    fields = b"".join(params).split(b";")
    if final == b"~":
        return _CSI_TILDE_KEYS.get(fields[0], "UNKNOWN")
    if len(fields) == 2 and fields[0] == b"1":
        modifier = fields[1]
        if modifier in {b"3", b"9"} and final == b"C":
            return "ALT_RIGHT"
        if modifier in {b"3", b"9"} and final == b"D":
            return "ALT_LEFT"
        if final in _CSI_FINAL_KEYS:
            return _CSI_FINAL_KEYS[final]
    return "UNKNOWN"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Blocks until input is available unless ``timeout_ms`` is given. Returns
    ``""`` on timeout or end of input.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]

    if ch != b"\x1b":
        if ch[0] >= 0x80:
            return _read_utf8_char(fd, ch)
        return ch.decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in {b"b", b"B"}:
        return "ALT_LEFT"
    if seq in {b"f", b"F"}:
        return "ALT_RIGHT"
    if seq == b"O":
        # SS3 arrows and Home/End sent in application cursor mode.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "UNKNOWN"
        return _CSI_FINAL_KEYS.get(final, "UNKNOWN")
    if seq == b"[":
        return _read_csi(fd)
    # Meta-prefixed key: ALT_x, ALT_ENTER, ALT_é.
    if seq in _CONTROL_KEYS:
        return f"ALT_{_CONTROL_KEYS[seq]}"
    if seq == b"\x1b":
        return "ALT_ESC"
    if seq[0] >= 0x80:
        return f"ALT_{_read_utf8_char(fd, seq)}"
    return f"ALT_{seq.decode('ascii', errors='replace')}"
