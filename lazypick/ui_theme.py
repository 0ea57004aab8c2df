"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the query row and the result list.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    reset: str
    query: str
    result: str
    highlight: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    query="\033[1;38;5;81m",
    result="",
    highlight="\033[40m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    query="\033[1;38;5;45m",
    result="\033[38;5;153m",
    highlight="\033[48;5;24m",
)

# Reverse video keeps the highlighted row distinct without any color.
PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    query="",
    result="",
    highlight="\033[7m",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
