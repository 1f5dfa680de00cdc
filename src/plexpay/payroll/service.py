from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import optional_text
from ..core.enums import PayrollStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..logging_utils import get_logger
from ..users.repository import UserRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollData, PayrollRecord
from .repository import PayrollRepository

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class PayrollInput:
    employee_id: int
    pay_period_start: date
    pay_period_end: date
    gross_amount: Decimal
    deductions: Decimal
    net_amount: Decimal
    processed_on: date
    user_id: Optional[int] = None
    notes: Optional[str] = None
    status: PayrollStatus = PayrollStatus.PENDING


@dataclass(frozen=True)
class Payslip:
    record: PayrollRecord
    employee: Optional[Employee]


def _check_period(start: date, end: date) -> None:
    if end < start:
        raise ValidationError("payPeriodEnd must not be before payPeriodStart")


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        employees: EmployeeRepository,
        users: UserRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._employees = employees
        self._users = users
        self._calculator = calculator or StandardPayrollCalculator()

    def list_records(self) -> Sequence[PayrollRecord]:
        return self._payroll.list_all()

    def get_record(self, record_id: int) -> PayrollRecord:
        record = self._payroll.get_by_id(record_id)
        if not record:
            raise NotFoundError("Payroll record", record_id)
        return record

    def list_for_employee(self, employee_id: int) -> Sequence[PayrollRecord]:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee", employee_id)
        return self._payroll.list_for_employee(employee_id)

    def _resolve_user(self, user_id: Optional[int], current_user_id: Optional[int]) -> int:
        resolved = user_id or current_user_id
        if not resolved:
            raise ValidationError("userId is required")
        if not self._users.get_by_id(resolved):
            raise ValidationError(f"User {resolved} does not exist")
        return int(resolved)

    def _to_data(self, payload: PayrollInput, *, current_user_id: Optional[int]) -> PayrollData:
        if not self._employees.get_by_id(payload.employee_id):
            raise ValidationError(f"Employee {payload.employee_id} does not exist")
        _check_period(payload.pay_period_start, payload.pay_period_end)

        return PayrollData(
            employee_id=int(payload.employee_id),
            user_id=self._resolve_user(payload.user_id, current_user_id),
            pay_period_start=payload.pay_period_start,
            pay_period_end=payload.pay_period_end,
            gross_amount=payload.gross_amount,
            deductions=payload.deductions,
            net_amount=payload.net_amount,
            processed_on=payload.processed_on,
            notes=optional_text(payload.notes),
            status=PayrollStatus(payload.status),
        )

    def create_record(self, payload: PayrollInput, *, current_user_id: Optional[int] = None) -> PayrollRecord:
        record = self._payroll.create(self._to_data(payload, current_user_id=current_user_id))
        LOGGER.info("Created payroll record %s for employee %s", record.id, record.employee_id)
        return record

    def update_record(
        self, record_id: int, payload: PayrollInput, *, current_user_id: Optional[int] = None
    ) -> PayrollRecord:
        self.get_record(record_id)
        updated = self._payroll.update(record_id, self._to_data(payload, current_user_id=current_user_id))
        if not updated:
            raise NotFoundError("Payroll record", record_id)
        return updated

    def delete_record(self, record_id: int) -> None:
        if not self._payroll.delete_by_id(record_id):
            raise NotFoundError("Payroll record", record_id)

    def process_payroll(
        self,
        *,
        pay_period_start: date,
        pay_period_end: date,
        processed_on: Optional[date] = None,
        employee_ids: Optional[Sequence[int]] = None,
        notes: Optional[str] = None,
        current_user_id: Optional[int] = None,
    ) -> list[PayrollRecord]:
        """Create one pending record per employee from the calculator's monthly figures.

        Without ``employee_ids`` every active employee is paid; inactive
        employees are always skipped.
        """
        _check_period(pay_period_start, pay_period_end)
        user_id = self._resolve_user(None, current_user_id)
        processed_on = processed_on or today_local()

        if employee_ids is None:
            targets = [e for e in self._employees.list_all() if e.is_active]
        else:
            targets = []
            for employee_id in dict.fromkeys(employee_ids):
                employee = self._employees.get_by_id(employee_id)
                if not employee:
                    raise ValidationError(f"Employee {employee_id} does not exist")
                if employee.is_active:
                    targets.append(employee)

        if not targets:
            raise ValidationError("No active employees to process")

        rows: list[PayrollData] = []
        for employee in targets:
            pay = self._calculator.monthly_pay(employee)
            rows.append(
                PayrollData(
                    employee_id=employee.id,
                    user_id=user_id,
                    pay_period_start=pay_period_start,
                    pay_period_end=pay_period_end,
                    gross_amount=pay.gross_amount,
                    deductions=pay.deductions,
                    net_amount=pay.net_amount,
                    processed_on=processed_on,
                    notes=optional_text(notes),
                    status=PayrollStatus.PENDING,
                )
            )

        # all-or-nothing so a retry never pays anyone twice
        created = self._payroll.create_many(rows)

        LOGGER.info(
            "Processed payroll for %s employee(s), period %s..%s",
            len(created),
            pay_period_start,
            pay_period_end,
        )
        return created

    def get_payslip(self, record_id: int) -> Payslip:
        record = self.get_record(record_id)
        return Payslip(record=record, employee=self._employees.get_by_id(record.employee_id))
