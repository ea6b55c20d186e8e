from __future__ import annotations

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session


def test_feed_unit_defaults_by_type(client: TestClient, auth_headers: dict, baby: dict) -> None:
    bottle = client.post(
        "/api/feed-log",
        json={"babyId": baby["id"], "time": "2024-06-01T08:00:00Z", "type": "BOTTLE", "amount": 4},
        headers=auth_headers,
    )
    assert bottle.status_code == 201
    assert bottle.json()["data"]["unitAbbr"] == "OZ"

    solids = client.post(
        "/api/feed-log",
        json={"babyId": baby["id"], "time": "2024-06-01T12:00:00Z", "type": "SOLIDS", "amount": 50, "food": "Banana"},
        headers=auth_headers,
    )
    assert solids.json()["data"]["unitAbbr"] == "G"
    assert solids.json()["data"]["food"] == "Banana"


def test_breast_only_fields_are_checked(client: TestClient, auth_headers: dict, baby: dict) -> None:
    response = client.post(
        "/api/feed-log",
        json={"babyId": baby["id"], "time": "2024-06-01T08:00:00Z", "type": "BOTTLE", "side": "LEFT"},
        headers=auth_headers,
    )
    assert response.status_code == 400

    breast = client.post(
        "/api/feed-log",
        json={
            "babyId": baby["id"],
            "time": "2024-06-01T08:00:00Z",
            "type": "BREAST",
            "side": "LEFT",
            "feedDuration": 720,
        },
        headers=auth_headers,
    )
    assert breast.status_code == 201
    assert breast.json()["data"]["feedDuration"] == 720


def test_feed_update_and_delete(client: TestClient, auth_headers: dict, baby: dict) -> None:
    feed = client.post(
        "/api/feed-log",
        json={"babyId": baby["id"], "time": "2024-06-01T08:00:00Z", "type": "BOTTLE", "amount": 4},
        headers=auth_headers,
    ).json()["data"]

    updated = client.put(f"/api/feed-log?id={feed['id']}", json={"amount": 5.5}, headers=auth_headers).json()["data"]
    assert updated["amount"] == 5.5
    assert updated["time"] == feed["time"]

    assert client.delete(f"/api/feed-log?id={feed['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/feed-log?id={feed['id']}", headers=auth_headers).status_code == 404


def test_changing_feed_type_resets_the_default_unit(client: TestClient, auth_headers: dict, baby: dict) -> None:
    feed = client.post(
        "/api/feed-log",
        json={"babyId": baby["id"], "time": "2024-06-01T08:00:00Z", "type": "BREAST", "amount": 10},
        headers=auth_headers,
    ).json()["data"]
    assert feed["unitAbbr"] == "MIN"

    bottle = client.put(
        f"/api/feed-log?id={feed['id']}", json={"type": "BOTTLE", "amount": 4}, headers=auth_headers
    ).json()["data"]
    assert bottle["unitAbbr"] == "OZ"

    # an explicit unit wins over the default
    solids = client.put(
        f"/api/feed-log?id={feed['id']}", json={"type": "SOLIDS", "unitAbbr": "TBSP"}, headers=auth_headers
    ).json()["data"]
    assert solids["unitAbbr"] == "TBSP"


def test_wet_diaper_has_no_stool_details(client: TestClient, auth_headers: dict, baby: dict) -> None:
    wet = client.post(
        "/api/diaper-log",
        json={"babyId": baby["id"], "time": "2024-06-01T08:00:00Z", "type": "WET", "condition": "LOOSE", "color": "GREEN"},
        headers=auth_headers,
    ).json()["data"]
    assert wet["condition"] is None
    assert wet["color"] is None

    dirty = client.put(
        f"/api/diaper-log?id={wet['id']}",
        json={"type": "DIRTY", "condition": "NORMAL", "color": "YELLOW"},
        headers=auth_headers,
    ).json()["data"]
    assert dirty["condition"] == "NORMAL"
    assert dirty["color"] == "YELLOW"


def test_invalid_enum_is_rejected(client: TestClient, auth_headers: dict, baby: dict) -> None:
    response = client.post(
        "/api/diaper-log",
        json={"babyId": baby["id"], "time": "2024-06-01T08:00:00Z", "type": "SOAKED"},
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_note_crud(client: TestClient, auth_headers: dict, baby: dict) -> None:
    note = client.post(
        "/api/note",
        json={"babyId": baby["id"], "time": "2024-06-01T08:00:00Z", "content": "First tooth?", "category": "Health"},
        headers=auth_headers,
    ).json()["data"]

    notes = client.get("/api/note", params={"babyId": baby["id"]}, headers=auth_headers).json()["data"]
    assert [n["content"] for n in notes] == ["First tooth?"]

    edited = client.put(f"/api/note?id={note['id']}", json={"content": "First tooth!"}, headers=auth_headers)
    assert edited.json()["data"]["content"] == "First tooth!"
    assert edited.json()["data"]["category"] == "Health"

    client.delete(f"/api/note?id={note['id']}", headers=auth_headers)
    assert client.get("/api/note", params={"babyId": baby["id"]}, headers=auth_headers).json()["data"] == []


def test_bath_log(client: TestClient, auth_headers: dict, baby: dict) -> None:
    bath = client.post(
        "/api/bath-log",
        json={"babyId": baby["id"], "time": "2024-06-01T19:00:00Z", "soapUsed": True},
        headers=auth_headers,
    )
    assert bath.status_code == 201
    assert bath.json()["data"]["soapUsed"] is True
    assert bath.json()["data"]["shampooUsed"] is False


def test_milestone(client: TestClient, auth_headers: dict, baby: dict) -> None:
    milestone = client.post(
        "/api/milestone",
        json={"babyId": baby["id"], "date": "2024-06-01T15:00:00Z", "title": "Rolled over", "category": "MOTOR"},
        headers=auth_headers,
    )
    assert milestone.status_code == 201
    data = milestone.json()["data"]
    assert data["date"] == "2024-06-01T15:00:00.000Z"

    fetched = client.get(f"/api/milestone?id={data['id']}", headers=auth_headers).json()["data"]
    assert fetched["title"] == "Rolled over"


def test_storage_failure_is_a_generic_500(client: TestClient, auth_headers: dict, baby: dict, monkeypatch) -> None:
    def broken_commit(self):
        raise OperationalError("INSERT INTO notes", {}, Exception("disk I/O error at /var/db"))

    monkeypatch.setattr(Session, "commit", broken_commit)
    response = client.post(
        "/api/note",
        json={"babyId": baby["id"], "time": "2024-06-01T08:00:00Z", "content": "Slept well"},
        headers=auth_headers,
    )
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to create note"}
    assert "disk I/O" not in response.text
    assert "/var/db" not in response.text
