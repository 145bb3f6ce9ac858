"""ANSI palettes for the printed asset tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the row formatter."""

    name: str
    reset: str
    tree_marker: str
    tree_dir: str
    tree_file: str
    tree_timestamp: str
    tree_search_match: str
    tree_search_match_end: str
    status_hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    tree_timestamp="\033[38;5;109m",
    tree_search_match="\033[7;1m",
    tree_search_match_end="\033[27;22m",
    status_hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;153m",
    tree_timestamp="\033[38;5;73m",
    tree_search_match="\033[7;1m",
    tree_search_match_end="\033[27;22m",
    status_hint="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_marker="",
    tree_dir="",
    tree_file="",
    tree_timestamp="",
    tree_search_match="",
    tree_search_match_end="",
    status_hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return the theme for ``name``; unknown names fall back to default."""
    if no_color:
        return PLAIN_THEME
    candidate = (name or "").strip().lower()
    return _THEMES.get(candidate, DEFAULT_THEME)
