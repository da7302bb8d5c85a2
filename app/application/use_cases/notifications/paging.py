"""Normalization of pagination and sort parameters."""

from __future__ import annotations

from app.config import get_settings
from app.domain.entities import PageSpec, SortDirection
from app.domain.exceptions import InvalidPageSpec, InvalidSortOrder

_SORT_TOKENS = tuple(direction.value for direction in SortDirection)

# Largest value a signed 64-bit SQL integer column or LIMIT/OFFSET accepts.
_MAX_SQL_INTEGER = 2**63 - 1


def _parse_non_negative(
    raw: int | str | None, field: str, default: int, maximum: int
) -> int:
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise InvalidPageSpec(field, raw)
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError as exc:
            raise InvalidPageSpec(field, raw) from exc
    if value < 0 or value > maximum:
        raise InvalidPageSpec(field, raw)
    return value


def resolve_page_sort(
    raw_limit: int | str | None,
    raw_offset: int | str | None,
    raw_order: str | None,
) -> tuple[PageSpec, SortDirection]:
    """Return the page window and sort direction, applying defaults."""

    settings = get_settings()
    limit = _parse_non_negative(
        raw_limit,
        "limit",
        settings.notification_page_size,
        settings.notification_max_page_size,
    )
    offset = _parse_non_negative(raw_offset, "offset", 0, _MAX_SQL_INTEGER)

    if raw_order is None:
        order = SortDirection.DESC
    else:
        normalized = raw_order.strip().upper()
        if normalized not in _SORT_TOKENS:
            raise InvalidSortOrder(raw_order, _SORT_TOKENS)
        order = SortDirection(normalized)

    return PageSpec(limit=limit, offset=offset), order


__all__ = ["resolve_page_sort"]
