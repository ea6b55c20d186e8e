from __future__ import annotations

from fastapi.testclient import TestClient

from conftest import login_headers, register_family


def test_create_and_fetch_baby(client: TestClient, auth_headers: dict, baby: dict) -> None:
    assert baby["firstName"] == "Lia"
    assert baby["birthDate"] == "2024-01-15T00:00:00.000Z"
    assert baby["deletedAt"] is None

    response = client.get(f"/api/baby?id={baby['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"]["id"] == baby["id"]


def test_birth_date_is_normalized_from_the_callers_zone(client: TestClient, auth_headers: dict) -> None:
    headers = {**auth_headers, "X-Timezone": "America/Sao_Paulo"}
    response = client.post("/api/baby", json={"firstName": "Tom", "birthDate": "2024-02-10T21:30:00"}, headers=headers)
    assert response.status_code == 201
    assert response.json()["data"]["birthDate"] == "2024-02-11T00:30:00.000Z"


def test_list_babies(client: TestClient, auth_headers: dict, baby: dict) -> None:
    client.post("/api/baby", json={"firstName": "Bia", "birthDate": "2023-05-01T00:00:00Z"}, headers=auth_headers)
    names = {b["firstName"] for b in client.get("/api/baby", headers=auth_headers).json()["data"]}
    assert names == {"Lia", "Bia"}


def test_update_keeps_unspecified_fields(client: TestClient, auth_headers: dict, baby: dict) -> None:
    response = client.put(f"/api/baby?id={baby['id']}", json={"lastName": "Silva"}, headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["lastName"] == "Silva"
    assert data["firstName"] == "Lia"
    assert data["birthDate"] == baby["birthDate"]


def test_update_can_clear_optional_fields(client: TestClient, auth_headers: dict, baby: dict) -> None:
    client.put(f"/api/baby?id={baby['id']}", json={"lastName": "Silva"}, headers=auth_headers)

    response = client.put(f"/api/baby?id={baby['id']}", json={"lastName": None, "gender": None}, headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["lastName"] is None
    assert data["gender"] is None
    assert data["firstName"] == "Lia"


def test_required_fields_cannot_be_cleared(client: TestClient, auth_headers: dict, baby: dict) -> None:
    response = client.put(f"/api/baby?id={baby['id']}", json={"firstName": None}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "first_name cannot be cleared"


def test_soft_delete_hides_the_baby(client: TestClient, auth_headers: dict, baby: dict) -> None:
    assert client.delete(f"/api/baby?id={baby['id']}", headers=auth_headers).json()["success"] is True

    response = client.get(f"/api/baby?id={baby['id']}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Baby not found"}
    assert client.get("/api/baby", headers=auth_headers).json()["data"] == []


def test_missing_id_is_a_validation_error(client: TestClient, auth_headers: dict) -> None:
    assert client.delete("/api/baby", headers=auth_headers).status_code == 400
    response = client.put("/api/baby", json={"firstName": "X"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Baby ID is required"


def test_missing_required_field(client: TestClient, auth_headers: dict) -> None:
    response = client.post("/api/baby", json={"birthDate": "2024-01-15T00:00:00Z"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_babies_are_scoped_to_the_family(client: TestClient, baby: dict) -> None:
    other = register_family(client, family_name="Souza")
    other_headers = login_headers(client, other["familyId"])

    assert client.get(f"/api/baby?id={baby['id']}", headers=other_headers).status_code == 404
    assert client.get("/api/baby", headers=other_headers).json()["data"] == []
    assert client.delete(f"/api/baby?id={baby['id']}", headers=other_headers).status_code == 404


def test_family_header_must_match_the_session(client: TestClient, auth_headers: dict, family: dict) -> None:
    headers = {**auth_headers, "X-Family-ID": str(family["familyId"] + 100)}
    assert client.get("/api/baby", headers=headers).status_code == 403

    headers["X-Family-ID"] = str(family["familyId"])
    assert client.get("/api/baby", headers=headers).status_code == 200
