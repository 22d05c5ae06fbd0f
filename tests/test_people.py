def test_salesperson_duplicates(client, make_salesperson):
    make_salesperson(salesperson_id="1001", email="ana@sales.example.com")

    same_id = client.post(
        "/api/salesperson",
        json={"id": "1001", "idType": "CC", "name": "X", "phone": "1", "email": "x@sales.example.com"},
    )
    assert same_id.status_code == 400
    assert same_id.json()["detail"] == "Salesperson already exists"

    same_email = client.post(
        "/api/salesperson",
        json={"id": "1002", "idType": "CC", "name": "Y", "phone": "1", "email": "ana@sales.example.com"},
    )
    assert same_email.status_code == 400
    assert same_email.json()["detail"] == "Email already in use"


def test_salesperson_email_update_conflict(client, make_salesperson):
    make_salesperson(salesperson_id="1001", email="ana@sales.example.com")
    make_salesperson(salesperson_id="1002", email="beto@sales.example.com")

    conflict = client.put("/api/salesperson/1002", json={"email": "ana@sales.example.com"})
    assert conflict.status_code == 400
    assert conflict.json()["detail"] == "Email already in use"

    own = client.put("/api/salesperson/1002", json={"email": "beto@sales.example.com", "phone": "555"})
    assert own.status_code == 200
    assert own.json()["phone"] == "555"


def test_customer_create_checks_salesperson(client):
    response = client.post(
        "/api/customer",
        json={
            "id": "2001",
            "idType": "NIT",
            "name": "Farmacia",
            "address": "x",
            "phone": "1",
            "salespersonId": "9999",
        },
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Salesperson does not exist"


def test_customer_duplicate(client, make_customer):
    make_customer(customer_id="2001")

    response = client.post(
        "/api/customer",
        json={"id": "2001", "idType": "NIT", "name": "Again", "address": "x", "phone": "1"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Customer already exists"


def test_customer_update_forbids_salesperson(client, make_customer, make_salesperson):
    rep = make_salesperson()
    customer = make_customer(salesperson_id=rep["id"])

    response = client.put(
        f"/api/customer/{customer['id']}",
        json={"name": "Renamed", "salespersonId": rep["id"]},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Forbidden salespersonId update"

    response = client.put(f"/api/customer/{customer['id']}", json={"name": "Renamed"})
    assert response.status_code == 200
    assert response.json()["name"] == "Renamed"
    assert response.json()["salespersonId"] == rep["id"]


def test_customer_reassignment(client, make_customer, make_salesperson):
    first = make_salesperson(salesperson_id="1001")
    second = make_salesperson(salesperson_id="1002")
    customer = make_customer(salesperson_id=first["id"])

    response = client.patch(
        f"/api/customer/{customer['id']}/salesperson",
        json={"salespersonId": second["id"]},
    )
    assert response.status_code == 200
    assert response.json()["salespersonId"] == second["id"]

    assert client.get(f"/api/customer/salesperson/{first['id']}").json() == []
    moved = client.get(f"/api/customer/salesperson/{second['id']}").json()
    assert [c["id"] for c in moved] == [customer["id"]]


def test_customer_reassignment_errors(client, make_customer, make_salesperson):
    rep = make_salesperson()
    customer = make_customer()

    empty = client.patch(f"/api/customer/{customer['id']}/salesperson", json={})
    assert empty.status_code == 400
    assert empty.json()["detail"] == "salespersonId is required"

    unknown_rep = client.patch(
        f"/api/customer/{customer['id']}/salesperson",
        json={"salespersonId": "7777"},
    )
    assert unknown_rep.status_code == 400
    assert unknown_rep.json()["detail"] == "Salesperson not found"

    unknown_customer = client.patch(
        "/api/customer/7777/salesperson",
        json={"salespersonId": rep["id"]},
    )
    assert unknown_customer.status_code == 404
    assert unknown_customer.json()["detail"] == "Customer not found"


def test_customers_of_unknown_salesperson(client):
    response = client.get("/api/customer/salesperson/4321")

    assert response.status_code == 404
    assert response.json()["detail"] == "Salesperson not found"


def test_deleting_salesperson_unassigns_customers(client, make_customer, make_salesperson):
    rep = make_salesperson()
    customer = make_customer(salesperson_id=rep["id"])

    assert client.delete(f"/api/salesperson/{rep['id']}").status_code == 200

    assert client.get(f"/api/customer/{customer['id']}").json()["salespersonId"] is None


def test_visits(client, make_customer, make_salesperson):
    rep = make_salesperson()
    customer = make_customer()

    for day, note in (("2026-03-02T09:30:00", "morning"), ("2026-03-03T15:00:00", "afternoon")):
        response = client.post(
            "/api/visit",
            json={
                "date": day,
                "comments": note,
                "customerId": customer["id"],
                "salespersonId": rep["id"],
            },
        )
        assert response.status_code == 201, response.text

    all_visits = client.get(f"/api/visit/salesperson/{rep['id']}").json()
    assert [v["comments"] for v in all_visits] == ["afternoon", "morning"]

    on_day = client.get(f"/api/visit/salesperson/{rep['id']}/date/2026-03-02").json()
    assert [v["comments"] for v in on_day] == ["morning"]

    visit_id = on_day[0]["id"]
    updated = client.put(f"/api/visit/{visit_id}", json={"comments": "rescheduled"})
    assert updated.json()["comments"] == "rescheduled"

    assert client.delete(f"/api/visit/{visit_id}").json() == {"message": "Visit deleted successfully"}
    assert client.get(f"/api/visit/{visit_id}").status_code == 404


def test_visit_lookup_errors(client, make_customer):
    customer = make_customer()

    bad_id = client.get("/api/visit/salesperson/abc")
    assert bad_id.status_code == 400
    assert bad_id.json()["detail"] == "Invalid salesperson ID"

    bad_date = client.get("/api/visit/salesperson/1001/date/03-02-2026")
    assert bad_date.status_code == 400
    assert bad_date.json()["detail"] == "Invalid date format"

    unknown_rep = client.post(
        "/api/visit",
        json={
            "date": "2026-03-02T09:30:00",
            "comments": "-",
            "customerId": customer["id"],
            "salespersonId": "8888",
        },
    )
    assert unknown_rep.status_code == 400
    assert unknown_rep.json()["detail"] == "Salesperson does not exist"


def test_statements_filter(client, make_customer, make_salesperson):
    first = make_salesperson(salesperson_id="1001")
    second = make_salesperson(salesperson_id="1002")
    customer = make_customer()

    for rep in (first, second):
        response = client.post(
            "/api/statement",
            json={
                "description": f"Account review by {rep['id']}",
                "date": "2026-04-01T10:00:00",
                "salespersonId": rep["id"],
                "customerId": customer["id"],
            },
        )
        assert response.status_code == 201

    assert len(client.get("/api/statement").json()) == 2

    filtered = client.get("/api/statement", params={"salespersonId": second["id"]}).json()
    assert len(filtered) == 1
    assert filtered[0]["salesperson"]["id"] == second["id"]
    assert filtered[0]["customer"]["id"] == customer["id"]

    patched = client.patch(
        f"/api/statement/{filtered[0]['id']}",
        json={"description": "Closed"},
    )
    assert patched.json()["description"] == "Closed"


def test_statement_requires_customer(client, make_salesperson):
    rep = make_salesperson()

    response = client.post(
        "/api/statement",
        json={
            "description": "-",
            "date": "2026-04-01T10:00:00",
            "salespersonId": rep["id"],
            "customerId": "0000",
        },
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Customer does not exist"


def test_sales_plans(client, make_salesperson):
    rep = make_salesperson()

    created = client.post(
        "/api/salesPlan",
        json={
            "name": "Q2 push",
            "description": "Open 10 pharmacies",
            "period": "quarterly",
            "salespersonId": rep["id"],
        },
    )
    assert created.status_code == 201
    plan = created.json()
    assert plan["period"] == "quarterly"

    listed = client.get("/api/salesPlan", params={"salespersonId": rep["id"]}).json()
    assert [p["id"] for p in listed] == [plan["id"]]
    assert listed[0]["salesperson"]["id"] == rep["id"]

    patched = client.patch(f"/api/salesPlan/{plan['id']}", json={"period": "annually"})
    assert patched.json()["period"] == "annually"

    invalid = client.patch(f"/api/salesPlan/{plan['id']}", json={"period": "weekly"})
    assert invalid.status_code == 400

    client.delete(f"/api/salesPlan/{plan['id']}")
    missing = client.get(f"/api/salesPlan/{plan['id']}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "SalesPlan not found"
