"""Use cases for looking up and searching registered notifications."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import (
    Notification,
    NotificationQuery,
    NotificationSummaryView,
    NotificationView,
    ResultPage,
)
from app.domain.exceptions import InvalidTimeWindow, NotificationNotFoundError
from app.infrastructure.repositories import NotificationRepository

from .categories import resolve_categories
from .paging import resolve_page_sort
from .projection import project_notifications
from .time_window import resolve_time_window

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationQueryRequest:
    """Raw listing parameters as received from the caller.

    ``None`` means the parameter was omitted and its default applies.
    """

    types: Sequence[str] | None = None
    from_date: str | None = None
    to_date: str | None = None
    limit: int | str | None = None
    offset: int | str | None = None
    order: str | None = None
    full: bool = False


def normalize_query(
    request: NotificationQueryRequest, *, now: datetime | None = None
) -> NotificationQuery:
    """Resolve every default and reject invalid input before touching storage."""

    categories = resolve_categories(request.types)
    interval = resolve_time_window(request.from_date, request.to_date, now=now)
    if interval.is_empty:
        raise InvalidTimeWindow(interval.start, interval.end)
    page, order = resolve_page_sort(request.limit, request.offset, request.order)
    return NotificationQuery(
        categories=categories,
        interval=interval,
        order=order,
        page=page,
        full=request.full,
    )


def query_notifications(
    session: Session,
    request: NotificationQueryRequest,
    *,
    now: datetime | None = None,
) -> ResultPage[NotificationView | NotificationSummaryView]:
    """Return the page of notifications matching ``request``."""

    query = normalize_query(request, now=now)
    logger.debug(
        "Searching notifications in (%s, %s] for %d categories, order=%s, limit=%d, offset=%d",
        query.interval.start.isoformat(),
        query.interval.end.isoformat(),
        len(query.categories),
        query.order.value,
        query.page.limit,
        query.page.offset,
    )

    results = NotificationRepository(session).search(
        query.categories, query.interval, query.order, query.page
    )
    return ResultPage(
        items=project_notifications(results.items, full=query.full),
        total=results.total,
        page=query.page,
    )


def get_notification(session: Session, notification_id: int) -> Notification:
    """Return the notification identified by ``notification_id`` or raise an error."""

    notification = NotificationRepository(session).get(notification_id)
    if notification is None:
        raise NotificationNotFoundError(notification_id)
    return notification


__all__ = [
    "NotificationQueryRequest",
    "get_notification",
    "normalize_query",
    "query_notifications",
]
