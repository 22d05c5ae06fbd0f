def test_manufacturer_crud(client, make_manufacturer):
    created = make_manufacturer(manufacturer_id="800123")
    assert created["idType"] == "NIT"

    duplicate = client.post(
        "/api/manufacturer",
        json={
            "id": "800123",
            "idType": "NIT",
            "name": "Again",
            "phone": "1",
            "address": "x",
            "email": "again@acme-pharma.example.com",
        },
    )
    assert duplicate.status_code == 400
    assert duplicate.json()["detail"] == "Manufacturer already exists"

    updated = client.put("/api/manufacturer/800123", json={"name": "Acme Labs"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Acme Labs"
    assert updated.json()["email"] == "contact@acme-pharma.example.com"

    assert client.delete("/api/manufacturer/800123").json() == {
        "message": "Manufacturer deleted successfully"
    }
    missing = client.get("/api/manufacturer/800123")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Manufacturer not found"


def test_manufacturer_rejects_bad_email(client):
    response = client.post(
        "/api/manufacturer",
        json={
            "id": "800124",
            "idType": "NIT",
            "name": "Broken",
            "phone": "1",
            "address": "x",
            "email": "not-an-email",
        },
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request body"
    assert "email" in response.json()["cause"]


def test_product_batch_create_and_read(client, make_manufacturer):
    manufacturer = make_manufacturer(manufacturer_id="800200")

    response = client.post(
        "/api/product",
        json={
            "products": [
                {
                    "name": "Paracetamol",
                    "description": "500mg",
                    "price": 3.5,
                    "storageCondition": "dry",
                    "manufacturerId": manufacturer["id"],
                },
                {
                    "name": "Insulin",
                    "description": "100 UI/ml",
                    "price": 40,
                    "storageCondition": "refrigerated",
                    "manufacturerId": manufacturer["id"],
                },
            ]
        },
    )

    assert response.status_code == 201
    created = response.json()
    assert [p["name"] for p in created] == ["Paracetamol", "Insulin"]

    detail = client.get(f"/api/product/{created[1]['id']}").json()
    assert detail["storageCondition"] == "refrigerated"
    assert detail["manufacturer"]["id"] == manufacturer["id"]

    by_manufacturer = client.get(f"/api/product/manufacturer/{manufacturer['id']}").json()
    assert [p["id"] for p in by_manufacturer] == [p["id"] for p in created]


def test_product_requires_existing_manufacturer(client):
    response = client.post(
        "/api/product",
        json={
            "products": [
                {
                    "name": "Orphan",
                    "description": "-",
                    "price": 1,
                    "storageCondition": "dry",
                    "manufacturerId": "123",
                }
            ]
        },
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Manufacturer does not exist"
    assert client.get("/api/product").json() == []


def test_product_update_checks_manufacturer(client, make_product):
    product = make_product()

    response = client.put(f"/api/product/{product['id']}", json={"manufacturerId": "111"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Manufacturer does not exist"

    response = client.put(f"/api/product/{product['id']}", json={"price": 12})
    assert response.status_code == 200
    assert response.json()["price"] == 12


def test_product_rejects_negative_price(client, make_manufacturer):
    manufacturer = make_manufacturer(manufacturer_id="800300")

    response = client.post(
        "/api/product",
        json={
            "products": [
                {
                    "name": "Refund",
                    "description": "-",
                    "price": -1,
                    "storageCondition": "dry",
                    "manufacturerId": manufacturer["id"],
                }
            ]
        },
    )

    assert response.status_code == 400


def test_products_of_unknown_manufacturer(client):
    response = client.get("/api/product/manufacturer/555")

    assert response.status_code == 404
    assert response.json()["detail"] == "Manufacturer not found"


def test_deleting_manufacturer_removes_products(client, make_manufacturer, make_product):
    manufacturer = make_manufacturer(manufacturer_id="800400")
    product = make_product(manufacturer_id=manufacturer["id"])

    client.delete(f"/api/manufacturer/{manufacturer['id']}")

    assert client.get(f"/api/product/{product['id']}").status_code == 404


def test_warehouse_crud(client, make_warehouse):
    warehouse = make_warehouse(name="Bodega 1")

    updated = client.put(f"/api/warehouse/{warehouse['id']}", json={"address": "Km 5"})
    assert updated.json()["address"] == "Km 5"
    assert updated.json()["name"] == "Bodega 1"

    assert [w["id"] for w in client.get("/api/warehouse").json()] == [warehouse["id"]]

    client.delete(f"/api/warehouse/{warehouse['id']}")
    missing = client.get(f"/api/warehouse/{warehouse['id']}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Warehouse not found"
