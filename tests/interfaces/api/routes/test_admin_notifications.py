"""Tests for the administrative notification endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.domain.entities import VALID_CATEGORY_TOKENS, NotificationCategory
from app.utils import ensure_app_timezone, now_in_app_timezone
from main import create_app


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def _local(*args: int) -> datetime:
    return ensure_app_timezone(datetime(*args))


def test_read_single_notification(client, seed_notification):
    stored = seed_notification(
        NotificationCategory.REQUEST_EXCEPTION,
        _local(2023, 5, 1, 9),
        title="Request failed",
        message="Traceback",
        payload={"url": "/api/3/bills/2023/S1"},
    )

    response = client.get(f"/admin/notifications/{stored.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == stored.id
    assert body["category"] == "REQUEST_EXCEPTION"
    assert body["message"] == "Traceback"
    assert body["payload"] == {"url": "/api/3/bills/2023/S1"}


def test_read_missing_notification_returns_404(client):
    response = client.get("/admin/notifications/12345")

    assert response.status_code == 404
    assert response.json()["detail"]["notification_id"] == 12345


def test_recent_listing_returns_summaries_by_default(client, seed_notification):
    recent = now_in_app_timezone() - timedelta(hours=1)
    seed_notification(NotificationCategory.NEW_API_KEY, recent, title="Key issued")
    seed_notification(
        NotificationCategory.NEW_API_KEY, recent - timedelta(days=30), title="Stale"
    )

    response = client.get("/admin/notifications/")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["size"] == 1
    assert body["limit"] == 25
    assert body["offset"] == 0
    (item,) = body["items"]
    assert item["title"] == "Key issued"
    assert "message" not in item


def test_explicit_window_listing_with_pagination(client, seed_notification):
    for hour in range(12):
        seed_notification(NotificationCategory.CALENDAR_SPOTCHECK, _local(2023, 5, 2, hour))
    seed_notification(NotificationCategory.PROCESS_WARNING, _local(2023, 5, 2, 12))

    response = client.get(
        "/admin/notifications/2023-05-01/2023-05-03",
        params={"type": "SPOTCHECK", "limit": 5, "offset": 5, "full": "true", "order": "asc"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 12
    assert body["size"] == 5
    assert body["offset_start"] == 6
    assert body["offset_end"] == 10
    assert [item["updated_at"][11:13] for item in body["items"]] == [
        "05",
        "06",
        "07",
        "08",
        "09",
    ]
    assert all("message" in item for item in body["items"])


def test_from_only_listing_accepts_repeated_types(client, seed_notification):
    moment = now_in_app_timezone() - timedelta(minutes=10)
    seed_notification(NotificationCategory.SCRAPING_EXCEPTION, moment)
    seed_notification(NotificationCategory.SCRAPING_WARNING, moment)
    seed_notification(NotificationCategory.LAW_SPOTCHECK, moment)

    since = (moment - timedelta(days=1)).date().isoformat()
    response = client.get(
        f"/admin/notifications/{since}",
        params=[("type", "SCRAPING_EXCEPTION"), ("type", "WARNING")],
    )

    assert response.status_code == 200
    categories = {item["category"] for item in response.json()["items"]}
    assert categories == {"SCRAPING_EXCEPTION", "SCRAPING_WARNING"}


def test_unknown_type_lists_every_valid_token(client):
    response = client.get("/admin/notifications/", params={"type": "BOGUS"})

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["parameter"] == "type"
    assert detail["value"] == "BOGUS"
    assert detail["valid_values"] == list(VALID_CATEGORY_TOKENS)


@pytest.mark.parametrize(
    ("path", "parameter"),
    [
        ("/admin/notifications/not-a-date", "from"),
        ("/admin/notifications/2023-05-01/someday", "to"),
        ("/admin/notifications/9999-12-31T23:00:00-12:00", "from"),
        ("/admin/notifications/0001-01-01T00:00:00+14:00/2023-01-01", "from"),
    ],
)
def test_malformed_dates_name_the_parameter(client, path, parameter):
    response = client.get(path)

    assert response.status_code == 400
    assert response.json()["detail"]["parameter"] == parameter


@pytest.mark.parametrize(
    ("params", "parameter"),
    [
        ({"limit": "-3"}, "limit"),
        ({"offset": "x"}, "offset"),
        ({"order": "random"}, "order"),
        ({"limit": "99999999999999999999"}, "limit"),
        ({"offset": "99999999999999999999"}, "offset"),
        ({"limit": "1001"}, "limit"),
    ],
)
def test_invalid_paging_is_rejected(client, params, parameter):
    response = client.get("/admin/notifications/", params=params)

    assert response.status_code == 400
    assert response.json()["detail"]["parameter"] == parameter


def test_inverted_window_is_rejected(client):
    response = client.get("/admin/notifications/2023-05-08/2023-05-01")

    assert response.status_code == 400
    assert response.json()["detail"]["parameter"] == "from"


def test_offset_past_the_last_match_echoes_an_empty_page(client, seed_notification):
    seed_notification(NotificationCategory.BILL_SPOTCHECK, _local(2023, 5, 2))

    response = client.get(
        "/admin/notifications/2023-05-01/2023-05-08", params={"offset": "5"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["items"] == []
    assert body["total"] == 1
    assert body["offset_start"] == 0
    assert body["offset_end"] == 0
