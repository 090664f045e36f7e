from meromart.models.expenses import Expense


def _expense(**overrides):
    payload = {
        "description": "Shop rent",
        "category": "Rent",
        "amount": 25000,
        "date": "2026-01-01",
        "payment_method": "bank_transfer",
        "is_recurring": True,
        "recurring_frequency": "monthly",
    }
    payload.update(overrides)
    return payload


def test_add_expense_requires_session(client):
    response = client.post("/expenses", json=_expense())

    assert response.status_code == 401
    assert response.json()["error"] == "Unauthorized"


def test_add_and_list_expense_in_camel_case(client, cashier_headers):
    response = client.post("/expenses", json=_expense(), headers=cashier_headers)
    assert response.json()["message"] == "Expense added"

    expenses = client.get("/expenses").json()

    assert expenses[0]["description"] == "Shop rent"
    assert expenses[0]["paymentMethod"] == "bank_transfer"
    assert expenses[0]["isRecurring"] is True
    assert expenses[0]["createdBy"] == "Ram Cashier"
    assert expenses[0]["amount"] == 25000


def test_update_expense(client, cashier_headers, db_session):
    expense_id = client.post("/expenses", json=_expense(), headers=cashier_headers).json()["id"]

    response = client.post(
        "/expenses",
        json=_expense(id=expense_id, amount=26000),
        headers=cashier_headers,
    )

    assert response.json()["message"] == "Expense updated"
    expense = db_session.query(Expense).filter(Expense.id == expense_id).one()
    assert expense.amount == 26000
    assert expense.updated_by == "Ram Cashier"


def test_expense_validation(client, cashier_headers):
    payload = _expense()
    payload.pop("payment_method")

    response = client.post("/expenses", json=payload, headers=cashier_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required field: payment_method"

    response = client.post("/expenses", json=_expense(amount=-10), headers=cashier_headers)
    assert response.status_code == 400


def test_delete_expense(client, cashier_headers):
    expense_id = client.post("/expenses", json=_expense(), headers=cashier_headers).json()["id"]

    assert client.delete("/expenses", params={"id": expense_id}).status_code == 401

    response = client.delete("/expenses", params={"id": expense_id}, headers=cashier_headers)
    assert response.json() == {"message": "Expense deleted"}
    assert client.get("/expenses").json() == []


def test_expense_categories(client, cashier_headers):
    response = client.post(
        "/expenses",
        params={"action": "addExpenseCategory"},
        json={"name": "Utilities", "color": "#10B981"},
        headers=cashier_headers,
    )
    assert response.json() == {"message": "Category added"}

    duplicate = client.post(
        "/expenses",
        params={"action": "addExpenseCategory"},
        json={"name": "utilities"},
        headers=cashier_headers,
    )
    assert duplicate.status_code == 409

    managed = client.get("/expenses", params={"action": "getExpenseCategories"}).json()
    assert managed[0]["name"] == "Utilities"
    assert managed[0]["isActive"] is True


def test_distinct_expense_categories(client, cashier_headers):
    client.post("/expenses", json=_expense(), headers=cashier_headers)
    client.post("/expenses", json=_expense(description="Deposit"), headers=cashier_headers)
    client.post("/expenses", json=_expense(category="Salary"), headers=cashier_headers)

    categories = client.get("/expenses", params={"action": "getDistinctExpenseCategories"}).json()

    assert [c["name"] for c in categories] == ["Rent", "Salary"]
