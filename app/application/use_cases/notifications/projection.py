"""Mapping of notifications onto their listing representations."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities import Notification, NotificationSummaryView, NotificationView


def to_full_view(notification: Notification) -> NotificationView:
    return NotificationView(
        id=notification.id or 0,
        category=notification.category,
        title=notification.title,
        message=notification.message,
        payload=dict(notification.payload or {}),
        created_at=notification.created_at,
        updated_at=notification.updated_at,
    )


def to_summary_view(notification: Notification) -> NotificationSummaryView:
    return NotificationSummaryView(
        id=notification.id or 0,
        category=notification.category,
        title=notification.title,
        updated_at=notification.updated_at,
    )


def project_notifications(
    notifications: Iterable[Notification], *, full: bool
) -> list[NotificationView | NotificationSummaryView]:
    """Return one view per notification in the order they were given."""

    mapper = to_full_view if full else to_summary_view
    return [mapper(notification) for notification in notifications]


__all__ = ["project_notifications", "to_full_view", "to_summary_view"]
