"""Output shapes produced when listing notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .notification_category import NotificationCategory


@dataclass(frozen=True)
class NotificationSummaryView:
    """Reduced representation used by default in listings."""

    id: int
    category: NotificationCategory
    title: str
    updated_at: datetime | None


@dataclass(frozen=True)
class NotificationView:
    """Complete representation including the message body and payload."""

    id: int
    category: NotificationCategory
    title: str
    message: str
    payload: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["NotificationSummaryView", "NotificationView"]
