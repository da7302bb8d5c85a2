"""Pydantic models describing notification responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import NotificationCategory


class NotificationSummaryRead(BaseModel):
    """Reduced representation of a notification returned in listings."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    category: NotificationCategory
    title: str
    updated_at: datetime | None = None


class NotificationRead(BaseModel):
    """Complete representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    category: NotificationCategory
    title: str
    message: str
    payload: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class NotificationListRead(BaseModel):
    """Page of notifications plus the pagination echo."""

    items: list[Union[NotificationRead, NotificationSummaryRead]]
    size: int = Field(..., description="Number of items in this page")
    total: int = Field(..., description="Number of notifications matching the filters")
    limit: int = Field(..., description="Requested page size, zero meaning unlimited")
    offset: int = Field(..., description="Number of matches skipped before this page")
    offset_start: int = Field(..., description="One-based position of the first item")
    offset_end: int = Field(..., description="One-based position of the last item")


__all__ = ["NotificationListRead", "NotificationRead", "NotificationSummaryRead"]
