"""Shared fixtures for the notification API tests."""

from __future__ import annotations

import os
import sys
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "notification_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_TIMEZONE"] = "UTC"

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.domain.entities import Notification, NotificationCategory  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.repositories import NotificationRepository  # noqa: E402
from app.utils import ensure_app_timezone  # noqa: E402

NOW = ensure_app_timezone(datetime(2023, 5, 10, 15, 30))


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session():
    with SessionLocal() as session:
        yield session


@pytest.fixture()
def seed_notification(db_session):
    """Return a helper that stores a notification updated at ``updated_at``."""

    repository = NotificationRepository(db_session)

    def _seed(
        category: NotificationCategory,
        updated_at: datetime,
        *,
        title: str = "Bill processing failed",
        message: str = "Unable to parse the daybreak file",
        payload: dict | None = None,
    ) -> Notification:
        return repository.create(
            Notification(
                id=None,
                category=category,
                title=title,
                message=message,
                payload=payload or {},
                created_at=updated_at - timedelta(minutes=5),
                updated_at=updated_at,
            )
        )

    return _seed


@pytest.fixture()
def now() -> datetime:
    """Fixed reference moment used instead of the wall clock."""

    return NOW
