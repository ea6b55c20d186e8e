from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.database import get_db, init_db
from main import app


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_family(client: TestClient, family_name: str = "Silva", login_id: str = "01", pin: str = "1234") -> dict:
    response = client.post(
        "/api/auth/register",
        json={"familyName": family_name, "name": "Ana", "loginId": login_id, "pin": pin},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


def login_headers(client: TestClient, family_id: int, login_id: str = "01", pin: str = "1234") -> dict:
    response = client.post("/api/auth/login", json={"familyId": family_id, "loginId": login_id, "pin": pin})
    assert response.status_code == 200, response.text
    token = response.json()["data"]["accessToken"]
    return {"Authorization": f"Bearer {token}", "X-Timezone": "UTC"}


@pytest.fixture()
def family(client) -> dict:
    return register_family(client)


@pytest.fixture()
def auth_headers(client, family) -> dict:
    return login_headers(client, family["familyId"])


@pytest.fixture()
def baby(client, auth_headers) -> dict:
    response = client.post(
        "/api/baby",
        json={"firstName": "Lia", "birthDate": "2024-01-15T00:00:00Z", "gender": "FEMALE"},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]
