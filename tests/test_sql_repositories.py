from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from plexpay.core.enums import PayrollStatus
from plexpay.core.exceptions import NotFoundError, ValidationError
from plexpay.database.bootstrap import seed_demo_data
from plexpay.income.service import IncomeInput
from plexpay.main import create_app
from plexpay.payroll.model import PayrollData


@pytest.fixture
def sql_app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(
        {
            "STORAGE_BACKEND": "sql",
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
            "AUTO_INIT_DB": True,
            "AUTO_SEED_DB": False,
        }
    )
    with app.app_context():
        yield app


@pytest.fixture
def sql_container(sql_app):
    container = sql_app.extensions["plexpay.container"]
    seed_demo_data(container, today=date(2024, 6, 1))
    return container


def test_seeded_rows_round_trip_through_sql(sql_container):
    admin = sql_container.users_repo.get_by_username("admin")
    assert admin.role.value == "admin"
    assert sql_container.auth_service.authenticate("admin", "password123").id == admin.id

    employees = sql_container.employee_service.list_employees()
    assert [e.name for e in employees] == sorted(e.name for e in employees)
    assert employees[0].salary == Decimal("54000.00")

    records = sql_container.payroll_service.list_records()
    assert len(records) == 6
    assert records[0].processed_on == date(2024, 5, 31)
    assert records[-1].status == PayrollStatus.COMPLETED


def test_dashboard_on_sql_matches_memory_numbers(sql_container):
    metrics = sql_container.dashboard_service.build_dashboard(today=date(2024, 6, 1)).metrics
    assert metrics.total_income == Decimal("22950.00")
    assert metrics.current_balance == metrics.total_income - metrics.total_expenses
    assert metrics.pending_payroll == Decimal("14000.00")


def test_income_pagination_on_sql(sql_container):
    page = sql_container.income_service.list_page(page=1, limit=3)
    assert page.total == 4
    assert [r.occurred_on for r in page.data] == sorted((r.occurred_on for r in page.data), reverse=True)
    assert len(sql_container.income_service.list_page(page=2, limit=3).data) == 1


def test_update_and_delete_on_sql(sql_container):
    admin = sql_container.users_repo.get_by_username("admin")
    record = sql_container.income_service.create_record(
        IncomeInput(source="Refund", amount=Decimal("12.34"), occurred_on=date(2024, 6, 2)), current_user_id=admin.id
    )
    updated = sql_container.income_service.update_record(
        record.id,
        IncomeInput(source="Refund", amount=Decimal("43.21"), occurred_on=date(2024, 6, 2), description="fixed"),
        current_user_id=admin.id,
    )
    assert updated.amount == Decimal("43.21")
    assert sql_container.income_service.get_record(record.id).description == "fixed"

    sql_container.income_service.delete_record(record.id)
    with pytest.raises(NotFoundError):
        sql_container.income_service.get_record(record.id)


def test_category_in_use_guard_on_sql(sql_container):
    rent = next(c for c in sql_container.category_service.list_categories() if c.name == "Rent")
    with pytest.raises(ValidationError):
        sql_container.category_service.delete_category(rent.id)


def test_payroll_batch_rolls_back_on_failure(sql_container):
    repo = sql_container.payroll_repo
    before = len(repo.list_all())
    good = PayrollData(
        employee_id=1,
        user_id=1,
        pay_period_start=date(2024, 6, 1),
        pay_period_end=date(2024, 6, 30),
        gross_amount=Decimal("100.00"),
        deductions=Decimal("20.00"),
        net_amount=Decimal("80.00"),
        processed_on=date(2024, 6, 30),
    )
    # a status without ``.value`` breaks the second row mid-batch
    broken = replace(good, employee_id=2, status=None)

    with pytest.raises(AttributeError):
        repo.create_many([good, broken])

    assert len(repo.list_all()) == before
    assert len(repo.create_many([good, replace(good, employee_id=2)])) == 2
    assert len(repo.list_all()) == before + 2
