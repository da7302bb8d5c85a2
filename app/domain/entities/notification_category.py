"""Notification categories and the coverage hierarchy between them."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class NotificationCategory(str, Enum):
    """Kinds of notifications raised by the legislative record system."""

    ALL = "ALL"

    EXCEPTION = "EXCEPTION"
    REQUEST_EXCEPTION = "REQUEST_EXCEPTION"
    PROCESS_EXCEPTION = "PROCESS_EXCEPTION"
    SCRAPING_EXCEPTION = "SCRAPING_EXCEPTION"
    SPOTCHECK_EXCEPTION = "SPOTCHECK_EXCEPTION"

    WARNING = "WARNING"
    PROCESS_WARNING = "PROCESS_WARNING"
    SCRAPING_WARNING = "SCRAPING_WARNING"

    SPOTCHECK = "SPOTCHECK"
    BILL_SPOTCHECK = "BILL_SPOTCHECK"
    CALENDAR_SPOTCHECK = "CALENDAR_SPOTCHECK"
    AGENDA_SPOTCHECK = "AGENDA_SPOTCHECK"
    LAW_SPOTCHECK = "LAW_SPOTCHECK"

    NEW_API_KEY = "NEW_API_KEY"

    @classmethod
    def parse(cls, token: str) -> NotificationCategory | None:
        """Return the category spelled by ``token`` or ``None`` when unknown."""

        return _CATEGORIES_BY_TOKEN.get(token.strip().upper())

    @property
    def coverage(self) -> frozenset[NotificationCategory]:
        """Categories selected when filtering by this one (itself included)."""

        return CATEGORY_COVERAGE[self]

    def __str__(self) -> str:
        return self.value


_PARENTS: dict[NotificationCategory, NotificationCategory | None] = {
    NotificationCategory.ALL: None,
    NotificationCategory.EXCEPTION: NotificationCategory.ALL,
    NotificationCategory.REQUEST_EXCEPTION: NotificationCategory.EXCEPTION,
    NotificationCategory.PROCESS_EXCEPTION: NotificationCategory.EXCEPTION,
    NotificationCategory.SCRAPING_EXCEPTION: NotificationCategory.EXCEPTION,
    NotificationCategory.SPOTCHECK_EXCEPTION: NotificationCategory.EXCEPTION,
    NotificationCategory.WARNING: NotificationCategory.ALL,
    NotificationCategory.PROCESS_WARNING: NotificationCategory.WARNING,
    NotificationCategory.SCRAPING_WARNING: NotificationCategory.WARNING,
    NotificationCategory.SPOTCHECK: NotificationCategory.ALL,
    NotificationCategory.BILL_SPOTCHECK: NotificationCategory.SPOTCHECK,
    NotificationCategory.CALENDAR_SPOTCHECK: NotificationCategory.SPOTCHECK,
    NotificationCategory.AGENDA_SPOTCHECK: NotificationCategory.SPOTCHECK,
    NotificationCategory.LAW_SPOTCHECK: NotificationCategory.SPOTCHECK,
    NotificationCategory.NEW_API_KEY: NotificationCategory.ALL,
}


def _ancestors(category: NotificationCategory) -> set[NotificationCategory]:
    found: set[NotificationCategory] = set()
    parent = _PARENTS[category]
    while parent is not None:
        found.add(parent)
        parent = _PARENTS[parent]
    return found


def _build_coverage() -> Mapping[NotificationCategory, frozenset[NotificationCategory]]:
    covered: dict[NotificationCategory, set[NotificationCategory]] = {
        category: {category} for category in NotificationCategory
    }
    for category in NotificationCategory:
        for ancestor in _ancestors(category):
            covered[ancestor].add(category)
    return MappingProxyType(
        {category: frozenset(members) for category, members in covered.items()}
    )


_CATEGORIES_BY_TOKEN: Mapping[str, NotificationCategory] = MappingProxyType(
    {category.value: category for category in NotificationCategory}
)

# Read-only after import; shared by every request.
CATEGORY_COVERAGE = _build_coverage()

VALID_CATEGORY_TOKENS: tuple[str, ...] = tuple(
    category.value for category in NotificationCategory
)


__all__ = [
    "CATEGORY_COVERAGE",
    "NotificationCategory",
    "VALID_CATEGORY_TOKENS",
]
