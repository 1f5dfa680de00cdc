from __future__ import annotations

import io
from decimal import Decimal

import pandas as pd


def test_health_is_public(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ok"
    assert body["version"] == "1.0.0"
    assert body["timestamp"]


def test_api_requires_login(client):
    assert client.get("/api/dashboard").status_code == 401
    assert client.get("/api/expenses").status_code == 401


def test_login_hides_password(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "password123"})
    assert resp.status_code == 200
    user = resp.get_json()
    assert user["username"] == "admin"
    assert "password" not in user
    assert "passwordHash" not in user

    assert client.get("/api/auth/me").get_json()["id"] == user["id"]


def test_login_with_wrong_password(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "nope-nope"})
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid credentials"}


def test_logout_clears_session(admin_client):
    assert admin_client.post("/api/auth/logout").status_code == 204
    assert admin_client.get("/api/auth/me").status_code == 401


def test_users_are_admin_only(client):
    client.post("/api/auth/login", json={"username": "staff", "password": "password123"})
    assert client.get("/api/users").status_code == 403
    assert client.get("/api/dashboard").status_code == 200


def test_user_crud(admin_client):
    resp = admin_client.post(
        "/api/users",
        json={"username": "clerk", "password": "secret12", "name": "Clerk", "email": "clerk@example.com"},
    )
    assert resp.status_code == 201
    created = resp.get_json()
    assert created["role"] == "staff"
    assert "password" not in created

    assert admin_client.delete(f"/api/users/{created['id']}").status_code == 204
    assert admin_client.get(f"/api/users/{created['id']}").status_code == 404


def test_dashboard_balance_invariant(admin_client):
    metrics = admin_client.get("/api/dashboard").get_json()["metrics"]
    assert Decimal(metrics["currentBalance"]) == Decimal(metrics["totalIncome"]) - Decimal(metrics["totalExpenses"])


def test_expense_crud_and_not_found(admin_client):
    category_id = admin_client.get("/api/expense-categories").get_json()[0]["id"]

    resp = admin_client.post(
        "/api/expenses",
        json={"description": "Coffee beans", "amount": 12.5, "date": "2024-05-20T00:00:00.000Z", "categoryId": category_id},
    )
    assert resp.status_code == 201
    expense = resp.get_json()
    assert expense["amount"] == "12.50"
    assert expense["date"] == "2024-05-20"
    assert expense["userId"] == admin_client.get("/api/auth/me").get_json()["id"]

    resp = admin_client.put(
        f"/api/expenses/{expense['id']}",
        json={"description": "Coffee beans", "amount": "13", "date": "2024-05-20", "categoryId": category_id},
    )
    assert resp.get_json()["amount"] == "13.00"

    assert admin_client.delete(f"/api/expenses/{expense['id']}").status_code == 204
    resp = admin_client.get(f"/api/expenses/{expense['id']}")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Expense not found"}


def test_schema_errors_are_listed(admin_client):
    resp = admin_client.post("/api/expenses", json={"description": "x", "amount": -5})
    assert resp.status_code == 400
    errors = resp.get_json()["error"]
    assert isinstance(errors, list)
    locs = {tuple(e["loc"]) for e in errors}
    assert ("amount",) in locs
    assert ("date",) in locs


def test_unknown_category_is_a_validation_error(admin_client):
    resp = admin_client.post(
        "/api/expenses", json={"description": "x", "amount": 1, "date": "2024-01-01", "categoryId": 999}
    )
    assert resp.status_code == 400
    assert "999" in resp.get_json()["error"]


def test_income_pagination(admin_client):
    assert isinstance(admin_client.get("/api/income-records").get_json(), list)

    body = admin_client.get("/api/income-records?page=1&limit=3").get_json()
    assert body["total"] == 4
    assert len(body["data"]) == 3

    assert admin_client.get("/api/income-records?page=abc").status_code == 400


def test_process_payroll_and_payslip(admin_client):
    resp = admin_client.post(
        "/api/payroll-records/process",
        json={"payPeriodStart": "2024-06-01", "payPeriodEnd": "2024-06-30", "processedOn": "2024-06-30"},
    )
    assert resp.status_code == 201
    records = resp.get_json()
    assert len(records) == 3
    assert {r["status"] for r in records} == {"pending"}

    slip = admin_client.get(f"/api/payroll-records/{records[0]['id']}/payslip")
    assert slip.status_code == 200
    assert slip.mimetype == "application/pdf"
    assert slip.data.startswith(b"%PDF")

    employee_id = records[0]["employeeId"]
    history = admin_client.get(f"/api/employees/{employee_id}/payroll-records").get_json()
    assert len(history) == 3
    assert admin_client.delete(f"/api/employees/{employee_id}").status_code == 400


def test_reports(admin_client):
    financial = admin_client.get("/api/reports/financial?startDate=2000-01-01&endDate=2000-12-31").get_json()
    assert financial["totalIncome"] == "0.00"
    assert financial["income"] == []

    expenses = admin_client.get("/api/reports/expenses").get_json()
    assert len(expenses["expensesByCategory"]) == 5

    payroll = admin_client.get("/api/reports/payroll").get_json()
    assert len(payroll["payrollRecords"]) == 6

    assert admin_client.get("/api/reports/payroll?startDate=bad&endDate=2024-01-01").status_code == 400


def test_report_exports(admin_client):
    resp = admin_client.get("/api/reports/expenses/export?format=xlsx")
    assert resp.status_code == 200
    assert "expense-report.xlsx" in resp.headers["Content-Disposition"]
    sheets = pd.read_excel(io.BytesIO(resp.data), sheet_name=None, engine="openpyxl")
    assert set(sheets) == {"Summary", "Expenses"}

    resp = admin_client.get("/api/reports/financial/export?format=pdf")
    assert resp.status_code == 200
    assert resp.data.startswith(b"%PDF")

    assert admin_client.get("/api/reports/payroll/export?format=doc").status_code == 400


def _expense_body(admin_client, amount):
    category_id = admin_client.get("/api/expense-categories").get_json()[0]["id"]
    return {"description": "Big ticket", "amount": amount, "date": "2024-05-20", "categoryId": category_id}


def test_huge_amount_is_a_schema_error(admin_client):
    resp = admin_client.post("/api/expenses", json=_expense_body(admin_client, "1e30"))
    assert resp.status_code == 400
    assert [e["loc"] for e in resp.get_json()["error"]] == [["amount"]]


def test_amount_beyond_column_range_rejected(admin_client):
    resp = admin_client.post("/api/expenses", json=_expense_body(admin_client, "123456789012345.00"))
    assert resp.status_code == 400

    resp = admin_client.post("/api/expenses", json=_expense_body(admin_client, "9999999999.99"))
    assert resp.status_code == 201


def test_guard_errors_use_the_error_envelope(client):
    resp = client.get("/api/expenses")
    assert resp.get_json() == {"error": "Authentication required"}

    client.post("/api/auth/login", json={"username": "staff", "password": "password123"})
    resp = client.get("/api/users")
    assert resp.status_code == 403
    assert resp.get_json() == {"error": "Admin access required"}


def test_income_limit_zero_rejected(admin_client):
    assert admin_client.get("/api/income-records?page=1&limit=0").status_code == 400
    assert admin_client.get("/api/income-records?page=1&limit=101").status_code == 400


def test_password_whitespace_is_kept(admin_client, app):
    client = app.test_client()
    resp = admin_client.post(
        "/api/users",
        json={"username": "  spacey  ", "password": "  pass word  ", "name": "Spacey", "email": "sp@example.com"},
    )
    assert resp.status_code == 201
    assert resp.get_json()["username"] == "spacey"

    ok = client.post("/api/auth/login", json={"username": "spacey", "password": "  pass word  "})
    assert ok.status_code == 200
    trimmed = client.post("/api/auth/login", json={"username": "spacey", "password": "pass word"})
    assert trimmed.status_code == 401


def test_user_with_records_cannot_be_deleted(admin_client, app):
    client = app.test_client()
    client.post("/api/auth/login", json={"username": "staff", "password": "password123"})
    staff_id = client.get("/api/auth/me").get_json()["id"]
    assert client.post("/api/expenses", json=_expense_body(client, "10")).status_code == 201

    resp = admin_client.delete(f"/api/users/{staff_id}")
    assert resp.status_code == 400
    assert admin_client.get(f"/api/users/{staff_id}").status_code == 200
