from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from plexpay.core.enums import PayrollStatus
from plexpay.core.exceptions import NotFoundError, ValidationError
from plexpay.payroll.calculator.standard_calculator import StandardPayrollCalculator
from plexpay.payroll.service import PayrollInput, PayrollService

MAY_START = date(2024, 5, 1)
MAY_END = date(2024, 5, 31)


def _record(employee_id, processed_on=MAY_END, **kw):
    return PayrollInput(
        employee_id=employee_id,
        pay_period_start=MAY_START,
        pay_period_end=MAY_END,
        gross_amount=Decimal("5000.00"),
        deductions=Decimal("1000.00"),
        net_amount=Decimal("4000.00"),
        processed_on=processed_on,
        **kw,
    )


def test_process_payroll_creates_pending_records_for_active_employees(container, admin, make_employee):
    make_employee(name="Jane Cooper", salary="60000")
    make_employee(name="Wade Warren", salary="84000")
    make_employee(name="Gone Person", active=False)

    records = container.payroll_service.process_payroll(
        pay_period_start=MAY_START, pay_period_end=MAY_END, processed_on=MAY_END, current_user_id=admin.id
    )

    assert len(records) == 2
    assert {r.status for r in records} == {PayrollStatus.PENDING}
    assert {r.net_amount for r in records} == {Decimal("4000.00"), Decimal("5600.00")}
    assert all(r.user_id == admin.id for r in records)


def test_process_payroll_for_selected_employees(container, admin, make_employee):
    first = make_employee(name="Jane Cooper")
    make_employee(name="Wade Warren")

    records = container.payroll_service.process_payroll(
        pay_period_start=MAY_START,
        pay_period_end=MAY_END,
        employee_ids=[first.id, first.id],
        current_user_id=admin.id,
    )
    assert [r.employee_id for r in records] == [first.id]


def test_process_payroll_without_active_employees_fails(container, admin, make_employee):
    make_employee(active=False)
    with pytest.raises(ValidationError, match="No active employees"):
        container.payroll_service.process_payroll(
            pay_period_start=MAY_START, pay_period_end=MAY_END, current_user_id=admin.id
        )


def test_period_end_before_start_rejected(container, admin, make_employee):
    employee = make_employee()
    bad = PayrollInput(
        employee_id=employee.id,
        pay_period_start=MAY_END,
        pay_period_end=MAY_START,
        gross_amount=Decimal("1"),
        deductions=Decimal("0"),
        net_amount=Decimal("1"),
        processed_on=MAY_END,
    )
    with pytest.raises(ValidationError, match="payPeriodEnd"):
        container.payroll_service.create_record(bad, current_user_id=admin.id)


def test_record_requires_existing_employee(container, admin):
    with pytest.raises(ValidationError, match="Employee 7"):
        container.payroll_service.create_record(_record(7), current_user_id=admin.id)


def test_records_listed_by_processed_date_desc(container, admin, make_employee):
    employee = make_employee()
    for day in (date(2024, 4, 30), date(2024, 6, 30), date(2024, 5, 31)):
        container.payroll_service.create_record(_record(employee.id, processed_on=day), current_user_id=admin.id)

    days = [r.processed_on for r in container.payroll_service.list_records()]
    assert days == [date(2024, 6, 30), date(2024, 5, 31), date(2024, 4, 30)]
    assert len(container.payroll_service.list_for_employee(employee.id)) == 3


def test_list_for_missing_employee_is_not_found(container):
    with pytest.raises(NotFoundError):
        container.payroll_service.list_for_employee(123)


def test_update_status(container, admin, make_employee):
    employee = make_employee()
    record = container.payroll_service.create_record(_record(employee.id), current_user_id=admin.id)
    updated = container.payroll_service.update_record(
        record.id, _record(employee.id, status=PayrollStatus.COMPLETED), current_user_id=admin.id
    )
    assert updated.as_dict()["status"] == "completed"


def test_payslip_includes_employee(container, admin, make_employee):
    employee = make_employee(name="Esther Howard")
    record = container.payroll_service.create_record(_record(employee.id), current_user_id=admin.id)
    slip = container.payroll_service.get_payslip(record.id)
    assert slip.employee.name == "Esther Howard"
    assert slip.record.id == record.id


def test_delete_then_get_is_not_found(container, admin, make_employee):
    employee = make_employee()
    record = container.payroll_service.create_record(_record(employee.id), current_user_id=admin.id)
    container.payroll_service.delete_record(record.id)
    with pytest.raises(NotFoundError, match="Payroll record not found"):
        container.payroll_service.get_record(record.id)


class FailsOnSecondEmployee(StandardPayrollCalculator):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def monthly_pay(self, employee):
        self.calls += 1
        if self.calls == 2:
            raise RuntimeError("salary data unavailable")
        return super().monthly_pay(employee)


def test_process_payroll_is_all_or_nothing(container, admin, make_employee):
    make_employee(name="Jane Cooper")
    make_employee(name="Wade Warren")
    service = PayrollService(
        container.payroll_repo, container.employees_repo, container.users_repo, calculator=FailsOnSecondEmployee()
    )

    with pytest.raises(RuntimeError):
        service.process_payroll(pay_period_start=MAY_START, pay_period_end=MAY_END, current_user_id=admin.id)

    assert container.payroll_service.list_records() == []
