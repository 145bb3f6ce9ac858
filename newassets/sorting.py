"""Deterministic ordering of asset paths by creation time or file name."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from enum import Enum
from typing import Any

from .metadata import normalize_separators
from .time_window import CreationTimeLookup, parse_enum_name


class SortKey(Enum):
    """Primary comparison used to order assets."""

    CREATION_TIME = "creation-time"
    NAME = "name"

    @property
    def label(self) -> str:
        return _SORT_KEY_LABELS[self]

    def key_function(self, get_creation_time: CreationTimeLookup) -> Callable[[str], Any]:
        """Return the per-path sort key for this variant."""
        return _SORT_KEY_FACTORIES[self](get_creation_time)

    @classmethod
    def from_name(cls, name: str) -> SortKey:
        return parse_enum_name(cls, name, "sort key")


class SortDirection(Enum):
    """Direction applied to the primary comparison only."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    @property
    def label(self) -> str:
        return "Ascending" if self is SortDirection.ASCENDING else "Descending"

    @classmethod
    def from_name(cls, name: str) -> SortDirection:
        aliases = {"asc": "ascending", "desc": "descending"}
        normalized = name.strip().lower()
        return parse_enum_name(cls, aliases.get(normalized, normalized), "sort direction")


def file_name(path: str) -> str:
    """Return the final path segment, extension included."""
    normalized = normalize_separators(path).rstrip("/")
    return normalized.rsplit("/", 1)[-1]


def _creation_time_key(get_creation_time: CreationTimeLookup) -> Callable[[str], tuple[bool, datetime | None]]:
    def key(path: str) -> tuple[bool, datetime | None]:
        # Unknown creation time orders before every known instant.
        created = get_creation_time(path)
        return (created is not None, created)

    return key


_SORT_KEY_FACTORIES: dict[SortKey, Callable[[CreationTimeLookup], Callable[[str], Any]]] = {
    SortKey.CREATION_TIME: _creation_time_key,
    SortKey.NAME: lambda _get_creation_time: file_name,
}

_SORT_KEY_LABELS: dict[SortKey, str] = {
    SortKey.CREATION_TIME: "Creation time",
    SortKey.NAME: "Name",
}


def sort_paths(
    paths: Iterable[str],
    key: SortKey,
    direction: SortDirection,
    get_creation_time: CreationTimeLookup,
) -> list[str]:
    """Return ``paths`` ordered by ``key`` in ``direction``.

    Ties on the primary key are always broken by full path ascending, so the
    result does not depend on input order. Both passes are stable sorts;
    ``reverse=True`` keeps equal elements in their tie-break order.
    """
    by_path = sorted(paths)
    return sorted(
        by_path,
        key=key.key_function(get_creation_time),
        reverse=direction is SortDirection.DESCENDING,
    )
