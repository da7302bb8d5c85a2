"""Value objects describing a normalized notification query."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Generic, Sequence, TypeVar

from .notification_category import NotificationCategory

T = TypeVar("T")


class SortDirection(str, Enum):
    """Ordering applied to the notification update timestamp."""

    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class TimeInterval:
    """Half-open time range ``(start, end]``.

    A notification stamped exactly at ``start`` falls outside the interval,
    one stamped exactly at ``end`` falls inside.
    """

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start < moment <= self.end

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end


@dataclass(frozen=True)
class PageSpec:
    """Slice of the matching notifications to return.

    A ``limit`` of zero requests every remaining row after ``offset``.
    """

    limit: int
    offset: int = 0

    @property
    def unlimited(self) -> bool:
        return self.limit == 0

    def offset_start(self, total: int) -> int:
        """One-based position of the first item in the page, zero when it is empty."""

        if self.offset >= total:
            return 0
        return self.offset + 1

    def offset_end(self, total: int) -> int:
        """One-based position of the last item in the page, zero when it is empty."""

        if self.offset >= total:
            return 0
        if self.unlimited:
            return total
        return min(self.offset + self.limit, total)


@dataclass(frozen=True)
class NotificationQuery:
    """Fully resolved notification search handed to storage."""

    categories: frozenset[NotificationCategory]
    interval: TimeInterval
    order: SortDirection
    page: PageSpec
    full: bool = False


@dataclass(frozen=True)
class ResultPage(Generic[T]):
    """Ordered page of results plus the size of the unpaginated match set."""

    items: Sequence[T]
    total: int
    page: PageSpec

    @property
    def size(self) -> int:
        return len(self.items)


__all__ = [
    "NotificationQuery",
    "PageSpec",
    "ResultPage",
    "SortDirection",
    "TimeInterval",
]
