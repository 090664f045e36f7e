import pytest


def test_dashboard_requires_session(client):
    assert client.get("/reports/dashboard").status_code == 401


def test_empty_dashboard(client, cashier_headers):
    data = client.get("/reports/dashboard", headers=cashier_headers).json()

    assert data == {
        "total_sales": 0,
        "total_expenses": 0,
        "net_profit": 0,
        "total_bills": 0,
        "pending_bills": 0,
        "low_stock_items": 0,
    }


def test_dashboard_totals(client, cashier_headers, bill_payload):
    client.post("/bills", json=bill_payload())
    client.post("/bills", json=bill_payload(status="pending", net_amount=500))
    client.post(
        "/expenses",
        json={
            "description": "Electricity",
            "category": "Utilities",
            "amount": 50,
            "date": "2026-01-10",
            "payment_method": "cash",
        },
        headers=cashier_headers,
    )
    client.post(
        "/products",
        json={
            "name": "Sugar 1kg",
            "category": "Grocery",
            "unit": "kg",
            "selling_price": 110,
            "cost_price": 95,
            "stock": 3,
            "min_stock": 5,
        },
    )

    data = client.get("/reports/dashboard", headers=cashier_headers).json()

    assert data["total_sales"] == pytest.approx(101.7)
    assert data["total_expenses"] == pytest.approx(50)
    assert data["net_profit"] == pytest.approx(51.7)
    assert data["total_bills"] == 2
    assert data["pending_bills"] == 1
    assert data["low_stock_items"] == 1
