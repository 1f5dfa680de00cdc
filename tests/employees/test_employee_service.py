from __future__ import annotations

from datetime import date

import pytest

from plexpay.core.exceptions import NotFoundError, ValidationError


def test_employees_listed_by_name(container, make_employee):
    make_employee(name="Wade Warren")
    make_employee(name="Esther Howard")
    assert [e.name for e in container.employee_service.list_employees()] == ["Esther Howard", "Wade Warren"]


def test_active_only_filter(container, make_employee):
    make_employee(name="Active Person")
    make_employee(name="Former Person", active=False)
    names = [e.name for e in container.employee_service.list_employees(active_only=True)]
    assert names == ["Active Person"]


def test_serialised_employee(make_employee):
    data = make_employee(salary="72000").as_dict()
    assert data["salary"] == "72000.00"
    assert data["dateHired"] == "2022-01-10"
    assert data["isActive"] is True


def test_employee_with_payroll_cannot_be_deleted(container, admin, make_employee):
    employee = make_employee()
    container.payroll_service.process_payroll(
        pay_period_start=date(2024, 5, 1), pay_period_end=date(2024, 5, 31), current_user_id=admin.id
    )
    with pytest.raises(ValidationError):
        container.employee_service.delete_employee(employee.id)


def test_delete_then_get_is_not_found(container, make_employee):
    employee = make_employee()
    container.employee_service.delete_employee(employee.id)
    with pytest.raises(NotFoundError, match="Employee not found"):
        container.employee_service.get_employee(employee.id)
