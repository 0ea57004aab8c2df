"""Persistent JSON config helpers.

Stores the UI theme, an optional cap on result rows, and the sort direction.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazypick"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickerConfig:
    """Validated settings read from ``config.json``."""

    theme: str | None = None
    max_result_rows: int | None = None
    best_match_first: bool = False


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_positive_int(value: object) -> int | None:
    """Booleans and non-integers are invalid; zero and negatives too."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _coerce_theme_name(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_picker_config(path: Path | None = None) -> PickerConfig:
    """Read ``config.json`` and keep only well-typed values."""
    data = load_config(path)
    best_match_first = data.get("best_match_first")
    return PickerConfig(
        theme=_coerce_theme_name(data.get("theme")),
        max_result_rows=_coerce_positive_int(data.get("max_result_rows")),
        best_match_first=best_match_first if isinstance(best_match_first, bool) else False,
    )
