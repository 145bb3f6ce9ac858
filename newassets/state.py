from __future__ import annotations

from dataclasses import dataclass

from .sorting import SortDirection, SortKey
from .time_window import TimeRange


@dataclass(frozen=True)
class ViewSettings:
    time_range: TimeRange = TimeRange.LAST_24_HOURS
    sort_key: SortKey = SortKey.CREATION_TIME
    sort_direction: SortDirection = SortDirection.DESCENDING
    search_query: str = ""
