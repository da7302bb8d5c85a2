"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import asc, desc
from sqlalchemy.orm import Session

from app.domain.entities import (
    Notification,
    NotificationCategory,
    PageSpec,
    ResultPage,
    SortDirection,
    TimeInterval,
)
from app.infrastructure.models import NotificationModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide read and seed operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        """Return a notification by its primary key, if present."""

        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return None
        return self._to_entity(model)

    def search(
        self,
        categories: Iterable[NotificationCategory],
        interval: TimeInterval,
        order: SortDirection,
        page: PageSpec,
    ) -> ResultPage[Notification]:
        """Return the requested page of notifications updated within ``interval``.

        The total reflects every match regardless of ``page``.
        """

        query = self.session.query(NotificationModel).filter(
            NotificationModel.category.in_([category.value for category in categories]),
            NotificationModel.updated_at > ensure_app_naive_datetime(interval.start),
            NotificationModel.updated_at <= ensure_app_naive_datetime(interval.end),
        )
        total = query.count()

        direction = asc if order is SortDirection.ASC else desc
        query = query.order_by(
            direction(NotificationModel.updated_at), direction(NotificationModel.id)
        )
        if page.offset:
            query = query.offset(page.offset)
        if not page.unlimited:
            query = query.limit(page.limit)

        items = [self._to_entity(model) for model in query.all()]
        return ResultPage(items=items, total=total, page=page)

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        created_at = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )
        model.category = notification.category.value
        model.title = notification.title
        model.message = notification.message
        model.payload = dict(notification.payload or {})
        model.created_at = created_at
        model.updated_at = (
            ensure_app_naive_datetime(notification.updated_at) or created_at
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            category=NotificationCategory(model.category),
            title=model.title,
            message=model.message,
            payload=model.payload or {},
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationRepository"]
