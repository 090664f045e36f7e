from meromart.core.hashing import verify_password
from meromart.models.expenses import ExpenseCategory
from meromart.models.users import User


def _post(client, headers, action, **body):
    return client.post("/settings", json={"action": action, **body}, headers=headers)


def test_settings_require_session(client):
    response = client.get("/settings", params={"action": "get_store_settings"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_unknown_action_is_400(client, cashier_headers):
    response = client.get("/settings", params={"action": "reboot"}, headers=cashier_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid action"}

    assert client.post("/settings", json={}, headers=cashier_headers).status_code == 400


def test_store_settings_seeded_with_defaults(client, cashier_headers):
    response = client.get("/settings", params={"action": "get_store_settings"}, headers=cashier_headers)

    data = response.json()
    assert data["store_name"] == "MeroMart"
    assert data["bill_prefix"] == "B-"
    assert data["bill_start_number"] == 1000
    assert data["tax_rate"] == 13


def test_cashier_cannot_update_store_settings(client, cashier_headers):
    response = _post(client, cashier_headers, "update_store_settings", settings={"store_name": "X"})

    assert response.status_code == 403
    assert response.json() == {"error": "Forbidden"}


def test_bill_numbering_follows_store_settings(client, admin_headers, bill_payload):
    response = _post(
        client,
        admin_headers,
        "update_store_settings",
        settings={"bill_prefix": "INV-", "bill_start_number": 1},
    )
    assert response.json() == {"message": "Store settings updated"}

    first = client.post("/bills", json=bill_payload()).json()
    second = client.post("/bills", json=bill_payload()).json()

    assert first["bill_number"] == "INV-1"
    assert second["bill_number"] == "INV-2"


def test_partial_update_keeps_other_fields(client, admin_headers):
    _post(client, admin_headers, "update_store_settings", settings={"store_name": "Mero Pasal"})

    data = client.get("/settings", params={"action": "get_store_settings"}, headers=admin_headers).json()

    assert data["store_name"] == "Mero Pasal"
    assert data["currency"] == "NPR"


def test_admin_adds_and_edits_user(client, admin_headers, db_session):
    new_user = {
        "name": "Hari Cashier",
        "email": "hari@meromart.com",
        "password": "counter-pass",
        "role": "cashier",
        "phone": 9811111111,
    }

    response = _post(client, admin_headers, "add_user", user=new_user)
    assert response.json()["message"] == "User added"
    user_id = response.json()["id"]

    duplicate = _post(client, admin_headers, "add_user", user=new_user)
    assert duplicate.status_code == 409

    response = _post(
        client,
        admin_headers,
        "edit_user",
        user={"id": user_id, "name": "Hari K", "email": "hari@meromart.com", "role": "admin"},
    )
    assert response.json() == {"message": "User updated"}

    user = db_session.query(User).filter(User.id == user_id).one()
    assert user.name == "Hari K"
    assert user.role == "admin"
    assert user.phone is None
    assert user.employee_id is not None


def test_cashier_cannot_manage_users(client, cashier_headers):
    response = _post(
        client,
        cashier_headers,
        "add_user",
        user={"name": "X", "email": "x@meromart.com", "password": "pw", "role": "cashier"},
    )

    assert response.status_code == 403


def test_list_users_hides_passwords(client, cashier_headers, admin_user):
    users = client.get("/settings", params={"action": "get_users"}, headers=cashier_headers).json()

    assert {u["email"] for u in users} == {"cashier@meromart.com", "admin@meromart.com"}
    assert all("password" not in u for u in users)


def test_admin_cannot_delete_self(client, admin_headers, admin_user, cashier_user, db_session):
    response = _post(client, admin_headers, "delete_user", id=admin_user.id)
    assert response.status_code == 400

    response = _post(client, admin_headers, "delete_user", id=cashier_user.id)
    assert response.json() == {"message": "User deleted"}

    db_session.expire_all()
    assert db_session.query(User).filter(User.id == cashier_user.id).first() is None


def test_change_password(client, cashier_headers, cashier_user, db_session):
    missing = _post(client, cashier_headers, "change_password", old_password="secret-pass-1")
    assert missing.status_code == 400
    assert missing.json() == {"error": "Missing password"}

    wrong = _post(
        client, cashier_headers, "change_password", old_password="nope", new_password="fresh-pass"
    )
    assert wrong.status_code == 403
    assert wrong.json() == {"error": "Incorrect old password"}

    response = _post(
        client,
        cashier_headers,
        "change_password",
        old_password="secret-pass-1",
        new_password="fresh-pass",
    )
    assert response.json() == {"message": "Password changed"}

    db_session.refresh(cashier_user)
    assert verify_password("fresh-pass", cashier_user.password_hash)


def test_category_actions(client, admin_headers, db_session):
    response = _post(client, admin_headers, "add_category", category={"name": "Transport"})
    category_id = response.json()["id"]

    duplicate = _post(client, admin_headers, "add_category", category={"name": "transport"})
    assert duplicate.status_code == 409

    _post(
        client,
        admin_headers,
        "edit_category",
        category={"id": category_id, "name": "Transport", "is_active": False},
    )
    categories = client.get("/settings", params={"action": "get_categories"}, headers=admin_headers).json()
    assert categories[0]["isActive"] is False

    # inactive categories drop out of the expense form list
    assert client.get("/expenses", params={"action": "getExpenseCategories"}).json() == []

    response = _post(client, admin_headers, "delete_category", id=category_id)
    assert response.json() == {"message": "Category deleted"}
    assert db_session.query(ExpenseCategory).count() == 0


def test_edited_email_is_lowercased_and_can_log_in(client, admin_headers, cashier_user, db_session):
    response = _post(
        client,
        admin_headers,
        "edit_user",
        user={
            "id": cashier_user.id,
            "name": "Ram Cashier",
            "email": "Ram.New@MeroMart.com",
            "role": "cashier",
        },
    )
    assert response.json() == {"message": "User updated"}

    db_session.refresh(cashier_user)
    assert cashier_user.email == "ram.new@meromart.com"

    login = client.post(
        "/login", json={"email": "Ram.New@MeroMart.com", "password": "secret-pass-1"}
    )
    assert login.status_code == 200
    assert login.json()["user"]["id"] == cashier_user.id


def test_edit_to_existing_email_in_other_case_is_409(client, admin_headers, admin_user, cashier_user):
    response = _post(
        client,
        admin_headers,
        "edit_user",
        user={
            "id": cashier_user.id,
            "name": "Ram Cashier",
            "email": "ADMIN@MeroMart.com",
            "role": "cashier",
        },
    )

    assert response.status_code == 409
    assert response.json() == {"error": "Email already registered"}
