"""Errors raised while resolving notification requests."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence


class NotificationQueryError(ValueError):
    """Base class for rejected notification query parameters."""

    @property
    def detail(self) -> dict[str, Any]:
        return {"message": str(self)}


class UnknownCategoryKind(NotificationQueryError):
    """Raised when a ``type`` token does not name a notification category."""

    def __init__(self, token: str, valid_tokens: Sequence[str]) -> None:
        self.token = token
        self.valid_tokens = tuple(valid_tokens)
        super().__init__(
            f"Unknown notification type '{token}'. "
            f"Expected one of: {'|'.join(self.valid_tokens)}"
        )

    @property
    def detail(self) -> dict[str, Any]:
        return {
            "message": str(self),
            "parameter": "type",
            "value": self.token,
            "valid_values": list(self.valid_tokens),
        }


class MalformedTimestamp(NotificationQueryError):
    """Raised when a date boundary is not an ISO date or date-time."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Parameter '{field}' must be an ISO date or date-time, got '{value}'"
        )

    @property
    def detail(self) -> dict[str, Any]:
        return {"message": str(self), "parameter": self.field, "value": self.value}


class InvalidPageSpec(NotificationQueryError):
    """Raised when ``limit`` or ``offset`` is not a non-negative integer."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Parameter '{field}' must be a non-negative integer, got '{value}'"
        )

    @property
    def detail(self) -> dict[str, Any]:
        return {"message": str(self), "parameter": self.field, "value": str(self.value)}


class InvalidSortOrder(NotificationQueryError):
    """Raised when ``order`` is neither ascending nor descending."""

    def __init__(self, value: str, valid_values: Sequence[str]) -> None:
        self.value = value
        self.valid_values = tuple(valid_values)
        super().__init__(
            f"Parameter 'order' must be one of {'|'.join(self.valid_values)}, got '{value}'"
        )

    @property
    def detail(self) -> dict[str, Any]:
        return {
            "message": str(self),
            "parameter": "order",
            "value": self.value,
            "valid_values": list(self.valid_values),
        }


class InvalidTimeWindow(NotificationQueryError):
    """Raised when the requested window does not end after it starts."""

    def __init__(self, start: datetime, end: datetime) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"'from' ({start.isoformat()}) must be earlier than 'to' ({end.isoformat()})"
        )

    @property
    def detail(self) -> dict[str, Any]:
        return {
            "message": str(self),
            "parameter": "from",
            "value": self.start.isoformat(),
        }


class NotificationNotFoundError(LookupError):
    """Raised when a notification id does not exist."""

    def __init__(self, notification_id: int) -> None:
        self.notification_id = notification_id
        super().__init__(f"Notification {notification_id} not found")

    @property
    def detail(self) -> dict[str, Any]:
        return {"message": str(self), "notification_id": self.notification_id}


__all__ = [
    "InvalidPageSpec",
    "InvalidSortOrder",
    "InvalidTimeWindow",
    "MalformedTimestamp",
    "NotificationNotFoundError",
    "NotificationQueryError",
    "UnknownCategoryKind",
]
