"""Domain entities exposed by the application."""

from .notification import Notification
from .notification_category import (
    CATEGORY_COVERAGE,
    VALID_CATEGORY_TOKENS,
    NotificationCategory,
)
from .notification_query import (
    NotificationQuery,
    PageSpec,
    ResultPage,
    SortDirection,
    TimeInterval,
)
from .notification_view import NotificationSummaryView, NotificationView

__all__ = [
    "CATEGORY_COVERAGE",
    "VALID_CATEGORY_TOKENS",
    "Notification",
    "NotificationCategory",
    "NotificationQuery",
    "NotificationSummaryView",
    "NotificationView",
    "PageSpec",
    "ResultPage",
    "SortDirection",
    "TimeInterval",
]
