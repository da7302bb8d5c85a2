"""Pydantic schemas exposed by the API layer."""

from .notification import NotificationListRead, NotificationRead, NotificationSummaryRead

__all__ = ["NotificationListRead", "NotificationRead", "NotificationSummaryRead"]
