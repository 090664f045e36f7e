def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "MeroMart API is running"}


def test_health_reports_billing_tables(client):
    data = client.get("/health").json()

    assert data["status"] == "ok"
    assert data["database"] == "connected"
    assert data["bills_table"] == "exists"
    assert data["bill_items_table"] == "exists"


def test_users_listing_is_public_and_safe(client, admin_user):
    users = client.get("/users").json()

    assert users[0]["email"] == "admin@meromart.com"
    assert users[0]["role"] == "admin"
    assert "password" not in users[0]
    assert "password_hash" not in users[0]
