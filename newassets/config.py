"""Read-only JSON defaults for the CLI.

The file only seeds initial selections; nothing chosen at runtime is written
back. Missing, unreadable or malformed config falls back to built-in
defaults, and invalid individual values are ignored.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger
from platformdirs import user_config_dir

from .sorting import SortDirection, SortKey
from .state import ViewSettings
from .time_window import TimeRange

APP_NAME = "newassets"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class BrowserDefaults:
    """Startup defaults resolved from the config file."""

    settings: ViewSettings = field(default_factory=ViewSettings)
    show_hidden: bool = False
    skip_gitignored: bool = False
    theme: str | None = None


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object, or ``{}`` when it is absent or invalid."""
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning(f"ignoring unreadable config {config_path}: {exc}")
        return {}
    return data if isinstance(data, dict) else {}


def _load_enum(data: dict[str, object], key: str, parse, default):
    value = data.get(key)
    if not isinstance(value, str):
        return default
    try:
        return parse(value)
    except ValueError as exc:
        logger.warning(f"ignoring config value {key}: {exc}")
        return default


def _load_bool(data: dict[str, object], key: str) -> bool:
    value = data.get(key)
    return value if isinstance(value, bool) else False


def load_defaults(path: Path | None = None) -> BrowserDefaults:
    """Resolve startup selections from config, keeping built-ins for gaps."""
    data = load_config(path)
    base = ViewSettings()
    settings = ViewSettings(
        time_range=_load_enum(data, "time_range", TimeRange.from_name, base.time_range),
        sort_key=_load_enum(data, "sort_key", SortKey.from_name, base.sort_key),
        sort_direction=_load_enum(data, "sort_direction", SortDirection.from_name, base.sort_direction),
    )
    theme = data.get("theme")
    if not isinstance(theme, str) or not theme.strip():
        theme = None
    return BrowserDefaults(
        settings=settings,
        show_hidden=_load_bool(data, "show_hidden"),
        skip_gitignored=_load_bool(data, "skip_gitignored"),
        theme=theme.strip() if theme else None,
    )
