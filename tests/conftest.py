"""
Pytest fixtures: one in-memory SQLite database per test, shared by the
TestClient requests through a single StaticPool connection.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.rate_limiter import limiter
from app.database import Base, build_engine, get_db
from app.main import app


engine = build_engine("sqlite://", poolclass=StaticPool)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def client():
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_db] = override_get_db
    limiter.reset()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


# Factories: each posts through the API and returns the JSON body


@pytest.fixture
def make_manufacturer(client):
    def _make(manufacturer_id="900100", **overrides):
        payload = {
            "id": manufacturer_id,
            "idType": "NIT",
            "name": "Acme Pharma",
            "phone": "3001234567",
            "address": "Calle 10 # 5-20",
            "email": "contact@acme-pharma.example.com",
        }
        payload.update(overrides)
        response = client.post("/api/manufacturer", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_product(client, make_manufacturer):
    default = {}

    def _make(name="Ibuprofen 400mg", price=10, manufacturer_id=None):
        if manufacturer_id is None:
            if "id" not in default:
                default["id"] = make_manufacturer(manufacturer_id="900999")["id"]
            manufacturer_id = default["id"]

        response = client.post(
            "/api/product",
            json={
                "products": [
                    {
                        "name": name,
                        "description": f"{name} tablets",
                        "price": price,
                        "storageCondition": "dry",
                        "manufacturerId": manufacturer_id,
                    }
                ]
            },
        )
        assert response.status_code == 201, response.text
        return response.json()[0]

    return _make


@pytest.fixture
def make_warehouse(client):
    def _make(name="Main warehouse", address="Zona Franca 1"):
        response = client.post("/api/warehouse", json={"name": name, "address": address})
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_lots(client):
    def _make(*items):
        """items: (warehouse_id, product_id, quantity) tuples."""
        response = client.post(
            "/api/inventory",
            json={
                "inventories": [
                    {"warehouseId": w, "productId": p, "quantity": q}
                    for w, p, q in items
                ]
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_salesperson(client):
    def _make(salesperson_id="1001", email=None, name="Laura Gomez"):
        response = client.post(
            "/api/salesperson",
            json={
                "id": salesperson_id,
                "idType": "CC",
                "name": name,
                "phone": "3109876543",
                "email": email or f"rep{salesperson_id}@sales.example.com",
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_customer(client):
    def _make(customer_id="2001", salesperson_id=None, name="Drogueria Central"):
        payload = {
            "id": customer_id,
            "idType": "NIT",
            "name": name,
            "address": "Carrera 7 # 12-34",
            "phone": "6015550000",
        }
        if salesperson_id is not None:
            payload["salespersonId"] = salesperson_id

        response = client.post("/api/customer", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def db_session(client):
    """A session on the same database the client writes to, for service-level calls."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
