"""Administrative endpoints for inspecting registered notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationQueryRequest,
    get_notification as get_notification_uc,
    query_notifications as query_notifications_uc,
)
from app.domain.entities import (
    NotificationSummaryView,
    NotificationView,
    ResultPage,
)
from app.domain.exceptions import NotificationNotFoundError, NotificationQueryError
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    NotificationListRead,
    NotificationRead,
    NotificationSummaryRead,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/notifications", tags=["notifications"])


class ListingParams:
    """Query string parameters shared by every listing endpoint."""

    def __init__(
        self,
        type: list[str] | None = Query(
            default=None, description="Notification type, repeatable. Default: ALL"
        ),
        full: bool = Query(
            default=False, description="Return full views instead of summaries"
        ),
        limit: str | None = Query(default=None, description="Page size, 0 for all"),
        offset: str | None = Query(default=None, description="Matches to skip"),
        order: str | None = Query(default=None, description="ASC or DESC by update time"),
    ) -> None:
        self.types = type
        self.full = full
        self.limit = limit
        self.offset = offset
        self.order = order

    def to_request(
        self, *, from_date: str | None = None, to_date: str | None = None
    ) -> NotificationQueryRequest:
        return NotificationQueryRequest(
            types=self.types,
            from_date=from_date,
            to_date=to_date,
            limit=self.limit,
            offset=self.offset,
            order=self.order,
            full=self.full,
        )


def _view_to_schema(
    view: NotificationView | NotificationSummaryView,
) -> NotificationRead | NotificationSummaryRead:
    if isinstance(view, NotificationView):
        return NotificationRead.model_validate(view)
    return NotificationSummaryRead.model_validate(view)


def _page_to_schema(
    page: ResultPage[NotificationView | NotificationSummaryView],
) -> NotificationListRead:
    return NotificationListRead(
        items=[_view_to_schema(view) for view in page.items],
        size=page.size,
        total=page.total,
        limit=page.page.limit,
        offset=page.page.offset,
        offset_start=page.page.offset_start(page.total),
        offset_end=page.page.offset_end(page.total),
    )


def _list_notifications(
    db: Session, request: NotificationQueryRequest
) -> NotificationListRead:
    try:
        page = query_notifications_uc(db, request)
    except NotificationQueryError as exc:
        logger.warning("Rejected notification query: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=exc.detail
        ) from exc
    return _page_to_schema(page)


@router.get("/{notification_id:int}", response_model=NotificationRead)
def read_notification(
    notification_id: int,
    db: Session = Depends(get_db),
) -> NotificationRead:
    """Return the notification identified by ``notification_id``."""

    try:
        notification = get_notification_uc(db, notification_id)
    except NotificationNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.detail
        ) from exc
    return NotificationRead.model_validate(notification)


@router.get("/", response_model=NotificationListRead)
def list_recent_notifications(
    params: ListingParams = Depends(),
    db: Session = Depends(get_db),
) -> NotificationListRead:
    """Return notifications updated during the past week."""

    return _list_notifications(db, params.to_request())


@router.get("/{from_date}", response_model=NotificationListRead)
def list_notifications_since(
    from_date: str,
    params: ListingParams = Depends(),
    db: Session = Depends(get_db),
) -> NotificationListRead:
    """Return notifications updated after ``from_date`` up to now."""

    return _list_notifications(db, params.to_request(from_date=from_date))


@router.get("/{from_date}/{to_date}", response_model=NotificationListRead)
def list_notifications_between(
    from_date: str,
    to_date: str,
    params: ListingParams = Depends(),
    db: Session = Depends(get_db),
) -> NotificationListRead:
    """Return notifications updated after ``from_date`` and up to ``to_date``."""

    return _list_notifications(
        db, params.to_request(from_date=from_date, to_date=to_date)
    )


__all__ = ["router"]
