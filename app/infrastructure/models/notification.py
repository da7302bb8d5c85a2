"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, Integer, JSON, String, Text

from app.infrastructure.database import Base
from app.utils import ensure_app_naive_datetime, now_in_app_timezone


def _now_naive():
    return ensure_app_naive_datetime(now_in_app_timezone())


class NotificationModel(Base):
    """Database representation for registered notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String(50), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    payload = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=_now_naive)
    updated_at = Column(DateTime(), nullable=False, default=_now_naive, index=True)


__all__ = ["NotificationModel"]
