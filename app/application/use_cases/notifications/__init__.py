"""Public helpers for resolving and running notification queries."""

from .categories import resolve_categories
from .paging import resolve_page_sort
from .projection import project_notifications
from .query import (
    NotificationQueryRequest,
    get_notification,
    normalize_query,
    query_notifications,
)
from .time_window import parse_iso_datetime, resolve_time_window

__all__ = [
    "NotificationQueryRequest",
    "get_notification",
    "normalize_query",
    "parse_iso_datetime",
    "project_notifications",
    "query_notifications",
    "resolve_categories",
    "resolve_page_sort",
    "resolve_time_window",
]
