from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from conftest import login_headers, register_family


@pytest.fixture()
def busy_day(client: TestClient, auth_headers: dict, baby: dict) -> dict:
    """A night sleep crossing UTC midnight plus one of each daytime event."""
    baby_id = baby["id"]
    client.post(
        "/api/sleep-log",
        json={"babyId": baby_id, "startTime": "2024-06-01T22:00:00Z", "endTime": "2024-06-02T01:00:00Z", "type": "NIGHT_SLEEP"},
        headers=auth_headers,
    )
    client.post(
        "/api/feed-log",
        json={"babyId": baby_id, "time": "2024-06-01T08:00:00Z", "type": "BOTTLE", "amount": 4},
        headers=auth_headers,
    )
    client.post(
        "/api/diaper-log",
        json={"babyId": baby_id, "time": "2024-06-01T09:00:00Z", "type": "DIRTY"},
        headers=auth_headers,
    )
    client.post(
        "/api/note",
        json={"babyId": baby_id, "time": "2024-06-01T10:00:00Z", "content": "Fussy morning"},
        headers=auth_headers,
    )
    return baby


WINDOW = {"startDate": "2024-06-01T00:00:00Z", "endDate": "2024-06-02T23:59:59Z"}


def test_timeline_is_newest_first(client: TestClient, auth_headers: dict, busy_day: dict) -> None:
    response = client.get("/api/timeline", params={"babyId": busy_day["id"], **WINDOW}, headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert [item["kind"] for item in data["items"]] == ["sleep", "note", "diaper", "feed"]
    assert data["totalItems"] == 4
    assert data["totalPages"] == 1
    assert data["items"][0]["duration"] == 180


def test_timeline_filter_by_kind(client: TestClient, auth_headers: dict, busy_day: dict) -> None:
    response = client.get(
        "/api/timeline", params={"babyId": busy_day["id"], "filter": "feed", **WINDOW}, headers=auth_headers
    )
    items = response.json()["data"]["items"]
    assert len(items) == 1
    assert items[0]["unitAbbr"] == "OZ"


def test_timeline_pages(client: TestClient, auth_headers: dict, busy_day: dict) -> None:
    response = client.get(
        "/api/timeline",
        params={"babyId": busy_day["id"], "page": 2, "pageSize": 3, **WINDOW},
        headers=auth_headers,
    )
    data = response.json()["data"]
    assert data["page"] == 2
    assert data["totalPages"] == 2
    assert [item["kind"] for item in data["items"]] == ["feed"]


def test_timeline_outside_window_is_empty(client: TestClient, auth_headers: dict, busy_day: dict) -> None:
    response = client.get(
        "/api/timeline",
        params={"babyId": busy_day["id"], "startDate": "2024-07-01T00:00:00Z", "endDate": "2024-07-02T00:00:00Z"},
        headers=auth_headers,
    )
    data = response.json()["data"]
    assert data["items"] == []
    assert data["totalPages"] == 0


def test_timeline_rejects_bad_parameters(client: TestClient, auth_headers: dict, baby: dict) -> None:
    assert client.get("/api/timeline", headers=auth_headers).status_code == 400
    assert client.get(
        "/api/timeline", params={"babyId": baby["id"], "filter": "bogus"}, headers=auth_headers
    ).status_code == 400
    assert client.get(
        "/api/timeline", params={"babyId": baby["id"], "pageSize": 0}, headers=auth_headers
    ).status_code == 400
    assert client.get(
        "/api/timeline", params={"babyId": baby["id"], "days": 0}, headers=auth_headers
    ).status_code == 400
    assert client.get(
        "/api/timeline", params={"babyId": baby["id"], "days": 1_000_000_000}, headers=auth_headers
    ).status_code == 400


def test_daily_stats_in_utc(client: TestClient, auth_headers: dict, busy_day: dict) -> None:
    response = client.get(
        "/api/daily-stats", params={"babyId": busy_day["id"], "date": "2024-06-01"}, headers=auth_headers
    )
    assert response.status_code == 200
    stats = response.json()["data"]
    assert stats["day"] == "2024-06-01"
    assert stats["timezone"] == "UTC"
    assert stats["sleepMinutes"] == 120
    assert stats["awakeMinutes"] == 1320
    assert stats["sleepTime"] == "2h 0m"
    assert stats["feedCount"] == 1
    assert stats["totalConsumed"] == "4 oz"
    assert stats["diaperCount"] == 1
    assert stats["poopCount"] == 1
    assert stats["noteCount"] == 1


def test_daily_stats_follow_the_caller_timezone(client: TestClient, auth_headers: dict, busy_day: dict) -> None:
    headers = {**auth_headers, "X-Timezone": "America/New_York"}
    stats = client.get(
        "/api/daily-stats", params={"babyId": busy_day["id"], "date": "2024-06-01"}, headers=headers
    ).json()["data"]
    # the whole night sleep falls on the local evening of June 1st
    assert stats["timezone"] == "America/New_York"
    assert stats["sleepMinutes"] == 180
    assert stats["longestSleepMinutes"] == 180


def test_daily_stats_unknown_timezone(client: TestClient, auth_headers: dict, baby: dict) -> None:
    headers = {**auth_headers, "X-Timezone": "Mars/Olympus"}
    response = client.get("/api/daily-stats", params={"babyId": baby["id"]}, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Unknown timezone: Mars/Olympus"


def test_daily_stats_for_another_family_baby(client: TestClient, auth_headers: dict, baby: dict) -> None:
    other = register_family(client, family_name="Costa")
    headers = login_headers(client, other["familyId"])
    response = client.get("/api/daily-stats", params={"babyId": baby["id"]}, headers=headers)
    assert response.status_code == 404
