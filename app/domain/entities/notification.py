"""Domain entity representing a registered system notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .notification_category import NotificationCategory


@dataclass(frozen=True)
class Notification:
    """System or audit event recorded by the legislative record store."""

    id: int | None
    category: NotificationCategory
    title: str
    message: str
    payload: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Notification"]
