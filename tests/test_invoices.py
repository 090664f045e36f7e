"""The deprecated /invoices surface shares storage and rules with /bills."""


def test_invoice_create_is_visible_as_bill(client, bill_payload):
    response = client.post("/invoices", json=bill_payload())

    assert response.status_code == 201
    bill_id = response.json()["bill_id"]
    assert client.get(f"/bills/{bill_id}").json()["bill_number"] == "B-1000"


def test_invoice_list_uses_id_key(client, bill_payload):
    bill_id = client.post("/bills", json=bill_payload()).json()["bill_id"]

    invoices = client.get("/invoices").json()

    assert invoices[0]["id"] == bill_id
    assert "bill_id" not in invoices[0]
    assert invoices[0]["items"][0]["product_name"] == "Rice 1kg"


def test_invoice_update_and_delete_by_id(client, bill_payload, db_session):
    bill_id = client.post("/bills", json=bill_payload()).json()["bill_id"]

    response = client.put("/invoices", json=bill_payload(id=bill_id, customer_name="Renamed"))
    assert response.status_code == 200
    assert client.get(f"/bills/{bill_id}").json()["customer_name"] == "Renamed"

    response = client.delete("/invoices", params={"id": bill_id})
    assert response.status_code == 200
    assert client.get(f"/bills/{bill_id}").status_code == 404


def test_invoice_delete_requires_id(client):
    response = client.delete("/invoices")

    assert response.status_code == 400
    assert response.json()["error"] == "Missing bill id"
