"""Time-window selection and the "created after" asset filter."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from enum import Enum
from typing import TypeVar

CreationTimeLookup = Callable[[str], datetime | None]

E = TypeVar("E", bound=Enum)


def parse_enum_name(enum_cls: type[E], name: str, what: str) -> E:
    """Match ``name`` against member values, ignoring case and ``_``/``-``."""
    normalized = name.strip().lower().replace("_", "-")
    for member in enum_cls:
        if member.value == normalized:
            return member
    choices = ", ".join(member.value for member in enum_cls)
    raise ValueError(f"unknown {what} {name!r} (expected one of: {choices})")


class TimeRange(Enum):
    """Relative window of creation times shown in the browser."""

    LAST_30_MINUTES = "last-30-minutes"
    LAST_24_HOURS = "last-24-hours"
    SINCE_YESTERDAY = "since-yesterday"
    SINCE_LAST_WEEK = "since-last-week"
    TODAY = "today"

    @property
    def label(self) -> str:
        return _TIME_RANGE_LABELS[self]

    def reference_instant(self, now: datetime) -> datetime:
        """Return the cutoff: assets created strictly after it are kept."""
        return _TIME_RANGE_CUTOFFS[self](now)

    @classmethod
    def from_name(cls, name: str) -> TimeRange:
        """Parse a CLI/config name such as ``last-24-hours`` or ``LAST_24_HOURS``."""
        return parse_enum_name(cls, name, "time range")


def _start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


# SINCE_YESTERDAY is a fixed one-day offset; calendar midnight is TODAY.
_TIME_RANGE_CUTOFFS: dict[TimeRange, Callable[[datetime], datetime]] = {
    TimeRange.LAST_30_MINUTES: lambda now: now - timedelta(minutes=30),
    TimeRange.LAST_24_HOURS: lambda now: now - timedelta(hours=24),
    TimeRange.SINCE_YESTERDAY: lambda now: now - timedelta(days=1),
    TimeRange.SINCE_LAST_WEEK: lambda now: now - timedelta(days=7),
    TimeRange.TODAY: _start_of_day,
}

_TIME_RANGE_LABELS: dict[TimeRange, str] = {
    TimeRange.LAST_30_MINUTES: "Last 30 minutes",
    TimeRange.LAST_24_HOURS: "Last 24 hours",
    TimeRange.SINCE_YESTERDAY: "Since yesterday",
    TimeRange.SINCE_LAST_WEEK: "Since last week",
    TimeRange.TODAY: "Today",
}


def paths_newer_than(
    all_paths: Iterable[str],
    reference: datetime,
    get_creation_time: CreationTimeLookup,
) -> list[str]:
    """Keep paths whose creation time is known and strictly after ``reference``.

    Input order is preserved. Paths without a creation time never pass.
    """
    kept: list[str] = []
    for path in all_paths:
        created = get_creation_time(path)
        if created is not None and created > reference:
            kept.append(path)
    return kept


def filter_new_paths(
    all_paths: Iterable[str],
    time_range: TimeRange,
    now: datetime,
    get_creation_time: CreationTimeLookup,
) -> list[str]:
    """Filter ``all_paths`` down to assets created inside ``time_range``."""
    return paths_newer_than(all_paths, time_range.reference_instant(now), get_creation_time)
