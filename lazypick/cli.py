"""Command-line front door for lazypick.

Reads candidate lines from stdin, runs the interactive picker on the
controlling terminal, and writes the chosen line to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO

from . import __version__
from .app import run_picker
from .config import load_picker_config
from .errors import InputReadError, PickerError
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines the way a line reader would.

    Each ``\\n`` ends a line and a ``\\r`` directly before it is dropped. A
    trailing terminator does not start an extra empty line.
    """
    lines = text.split("\n")
    # The last piece has no terminator, so a trailing "\r" there is content.
    tail = lines.pop()
    out = [line[:-1] if line.endswith("\r") else line for line in lines]
    if tail:
        out.append(tail)
    return out


def read_candidates(stream: BinaryIO) -> tuple[str, ...]:
    """Read every line of ``stream`` as a UTF-8 candidate."""
    try:
        data = stream.read()
    except OSError as exc:
        raise InputReadError(f"Failed to read standard input: {exc}") from exc
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputReadError(f"Standard input is not valid UTF-8: {exc}") from exc
    return tuple(split_lines(text))


def _configure_logging(log_file: Path | None) -> None:
    """Attach a debug file handler to the package logger when requested."""
    if log_file is None:
        return
    try:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Cannot open log file {log_file}: {exc.strerror or exc}") from exc
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("lazypick")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazypick",
        description="Interactively filter lines from stdin and print the chosen one.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logging to this file.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the picker, and print the chosen line.

    Success writes exactly the chosen text to stdout with no trailing newline.
    Cancellation and failures exit non-zero with a message on stderr.
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_file)
    config = load_picker_config()

    try:
        candidates = read_candidates(sys.stdin.buffer)
        logger.debug("read %d candidates from stdin", len(candidates))
        chosen = run_picker(
            candidates,
            theme=resolve_theme(args.theme or config.theme, no_color=args.no_color),
            max_result_rows=config.max_result_rows,
            best_match_first=config.best_match_first,
        )
    except PickerError as exc:
        logger.debug("session ended without a selection: %s", exc)
        raise SystemExit(str(exc)) from exc

    # Bytes out match the UTF-8 bytes read in, whatever the locale codec.
    sys.stdout.flush()
    sys.stdout.buffer.write(chosen.encode("utf-8"))
    sys.stdout.buffer.flush()


if __name__ == "__main__":
    main()
