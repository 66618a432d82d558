from unittest.mock import patch

from records_api.services import CustomerService

ACME = {"name": "Acme", "email": "a@x.com", "phone": "555", "address": "1 Rd"}


def create_customer(client, payload=ACME):
    response = client.post("/api/customers", json=payload)
    assert response.status_code == 200
    return response.json()


# ---- CUSTOMER CRUD ----
def test_customer_crud(client):
    customer = create_customer(client)
    assert customer == {"id": 1, **ACME}

    response = client.get("/api/customers/1")
    assert response.status_code == 200
    assert response.json() == customer

    update_payload = {"name": "Acme2", "email": "b@x.com", "phone": "556", "address": "2 Rd"}
    response = client.put("/api/customers/1", json=update_payload)
    assert response.status_code == 200
    assert response.json() == {"id": 1, **update_payload}

    response = client.delete("/api/customers/1")
    assert response.status_code == 200
    assert response.content == b""

    response = client.get("/api/customers/1")
    assert response.status_code == 404
    assert response.content == b""


def test_create_ignores_client_supplied_id(client):
    create_customer(client)
    customer = create_customer(client, {"id": 1, "name": "Other"})
    assert customer["id"] == 2
    assert client.get("/api/customers/1").json()["name"] == "Acme"


def test_list_returns_every_persisted_customer(client):
    assert client.get("/api/customers").json() == []
    created = [create_customer(client, {**ACME, "name": f"Customer {i}"}) for i in range(3)]
    client.delete(f"/api/customers/{created[1]['id']}")

    response = client.get("/api/customers")
    assert response.status_code == 200
    listed = response.json()
    assert sorted(c["id"] for c in listed) == [created[0]["id"], created[2]["id"]]


def test_update_overwrites_every_field(client):
    create_customer(client)
    response = client.put("/api/customers/1", json={"name": "Only Name"})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Only Name", "email": None, "phone": None, "address": None}
    assert client.get("/api/customers/1").json()["email"] is None


def test_update_keeps_path_id(client):
    create_customer(client)
    response = client.put("/api/customers/1", json={**ACME, "id": 99})
    assert response.json()["id"] == 1
    assert client.get("/api/customers/99").status_code == 404


def test_update_missing_customer_is_404_with_empty_body(client):
    response = client.put("/api/customers/42", json=ACME)
    assert response.status_code == 404
    assert response.content == b""


def test_delete_missing_customer_is_404_with_empty_body(client):
    response = client.delete("/api/customers/42")
    assert response.status_code == 404
    assert response.content == b""


# ---- FAILURE MAPPING ----
def test_list_failure_returns_500_with_message(client):
    with patch.object(CustomerService, "get_all_customers", side_effect=RuntimeError("db down")):
        response = client.get("/api/customers")
    assert response.status_code == 500
    assert response.text == "Error fetching customers: db down"


def test_get_failure_returns_500_with_message(client):
    with patch.object(CustomerService, "get_customer_by_id", side_effect=RuntimeError("db down")):
        response = client.get("/api/customers/1")
    assert response.status_code == 500
    assert response.text == "Error fetching customer: db down"


def test_create_failure_returns_500_with_message(client):
    with patch.object(CustomerService, "create_customer", side_effect=ValueError("constraint violated")):
        response = client.post("/api/customers", json=ACME)
    assert response.status_code == 500
    assert response.text == "Error creating customer: constraint violated"


def test_update_failure_other_than_not_found_returns_500(client):
    create_customer(client)
    with patch.object(CustomerService, "update_customer", side_effect=RuntimeError("db down")):
        response = client.put("/api/customers/1", json=ACME)
    assert response.status_code == 500
    assert response.text == "Error updating customer: db down"


def test_delete_failure_other_than_not_found_returns_500(client):
    create_customer(client)
    with patch.object(CustomerService, "delete_customer", side_effect=RuntimeError("db down")):
        response = client.delete("/api/customers/1")
    assert response.status_code == 500
    assert response.text == "Error deleting customer: db down"


def test_non_numeric_id_is_rejected(client):
    assert client.get("/api/customers/abc").status_code == 422


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()
