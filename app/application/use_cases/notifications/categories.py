"""Expansion of ``type`` filters into concrete notification categories."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities import VALID_CATEGORY_TOKENS, NotificationCategory
from app.domain.exceptions import UnknownCategoryKind


def resolve_categories(tokens: Iterable[str] | None) -> frozenset[NotificationCategory]:
    """Return every category covered by ``tokens``.

    Each token selects its category plus all of the categories beneath it.
    When no token is supplied the whole hierarchy is selected.
    """

    resolved: set[NotificationCategory] = set()
    for token in tokens or ():
        category = NotificationCategory.parse(token)
        if category is None:
            raise UnknownCategoryKind(token, VALID_CATEGORY_TOKENS)
        resolved |= category.coverage

    if not resolved:
        return NotificationCategory.ALL.coverage
    return frozenset(resolved)


__all__ = ["resolve_categories"]
