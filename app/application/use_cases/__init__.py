"""Aggregate application use cases."""

from .notifications import get_notification, query_notifications

__all__ = ["get_notification", "query_notifications"]
