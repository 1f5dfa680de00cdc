from __future__ import annotations

from datetime import date
from decimal import Decimal

from plexpay.database.bootstrap import seed_demo_data
from plexpay.expenses.service import ExpenseInput
from plexpay.income.service import IncomeInput


def test_empty_dashboard(container):
    dashboard = container.dashboard_service.build_dashboard(today=date(2024, 6, 1)).as_dict()

    assert dashboard["metrics"] == {
        "totalIncome": "0.00",
        "totalExpenses": "0.00",
        "currentBalance": "0.00",
        "pendingPayroll": "0.00",
    }
    assert dashboard["recentTransactions"] == []
    assert dashboard["expensesByCategory"] == {}
    assert len(dashboard["monthlyData"]) == 12


def test_balance_is_income_minus_expenses(container, admin):
    rent = container.category_service.create_category(name="Rent")
    container.income_service.create_record(
        IncomeInput(source="Sales", amount=Decimal("1200.40"), occurred_on=date(2024, 2, 1)), current_user_id=admin.id
    )
    container.expense_service.create_expense(
        ExpenseInput(description="Rent", amount=Decimal("1500.15"), occurred_on=date(2024, 2, 2), category_id=rent.id),
        current_user_id=admin.id,
    )

    dashboard = container.dashboard_service.build_dashboard(today=date(2024, 6, 1))
    metrics = dashboard.metrics
    assert metrics.current_balance == metrics.total_income - metrics.total_expenses
    assert dashboard.as_dict()["metrics"]["currentBalance"] == "-299.75"
    assert dashboard.as_dict()["expensesByCategory"] == {str(rent.id): "1500.15"}
    assert dashboard.monthly_data[1].income == Decimal("1200.40")


def test_seeded_dashboard(container):
    assert seed_demo_data(container, today=date(2024, 6, 1)) is True
    assert seed_demo_data(container, today=date(2024, 6, 1)) is False

    dashboard = container.dashboard_service.build_dashboard(today=date(2024, 6, 1)).as_dict()
    metrics = dashboard["metrics"]

    assert metrics["totalIncome"] == "22950.00"
    assert metrics["totalExpenses"] == "6245.75"
    assert metrics["currentBalance"] == "16704.25"
    # May is pending: (6000 + 7000 + 4500) * 0.8
    assert metrics["pendingPayroll"] == "14000.00"
    assert len(dashboard["recentTransactions"]) == 9
    assert dashboard["monthlyData"][3]["income"] == "12700.00"
