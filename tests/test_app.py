import pytest

from app.core.config import settings
from app.core.errors import ValidationError, parse_id
from app.core.jwt import create_session_token, decode_session_token


def test_health_check(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Sales & Inventory API is running"}


def test_not_found_shape(client):
    response = client.get("/api/warehouse/12345")

    assert response.status_code == 404
    assert response.json() == {"detail": "Warehouse not found"}


def test_validation_error_carries_cause(client):
    response = client.post("/api/warehouse", json={"name": "No address"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request body"
    assert "address" in response.json()["cause"]


def test_parse_id():
    assert parse_id("42", "order") == 42

    with pytest.raises(ValidationError) as excinfo:
        parse_id("4x2", "order")

    assert excinfo.value.detail == "Invalid order ID"
    assert excinfo.value.status_code == 400


def test_session_token_round_trip():
    token = create_session_token({"sub": "1001"})

    assert decode_session_token(token)["sub"] == "1001"
    assert decode_session_token(token + "tampered") is None


@pytest.fixture
def auth_required(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_REQUIRED", True)


def test_api_requires_session_when_enabled(client, auth_required):
    anonymous = client.get("/api/warehouse")
    assert anonymous.status_code == 401
    assert anonymous.json()["detail"] == "Invalid or missing session"

    token = create_session_token({"sub": "1001"})
    authorized = client.get("/api/warehouse", headers={"Authorization": f"Bearer {token}"})
    assert authorized.status_code == 200

    # Health check stays public
    assert client.get("/").status_code == 200
