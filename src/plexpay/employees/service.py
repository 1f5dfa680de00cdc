from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..logging_utils import get_logger
from ..payroll.repository import PayrollRepository
from .model import Employee, EmployeeData
from .repository import EmployeeRepository

LOGGER = get_logger(__name__)


def _clean(data: EmployeeData) -> EmployeeData:
    return replace(
        data,
        name=require_non_empty(data.name, "Name"),
        position=require_non_empty(data.position, "Position"),
        department=require_non_empty(data.department, "Department"),
        email=require_non_empty(data.email, "Email"),
        phone_number=optional_text(data.phone_number),
        address=optional_text(data.address),
    )


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, payroll: PayrollRepository):
        self._employees = employees
        self._payroll = payroll

    def list_employees(self, *, active_only: bool = False) -> Sequence[Employee]:
        employees = self._employees.list_all()
        if active_only:
            return [e for e in employees if e.is_active]
        return employees

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee", employee_id)
        return employee

    def create_employee(self, data: EmployeeData) -> Employee:
        employee = self._employees.create(_clean(data))
        LOGGER.info("Hired employee %s (%s)", employee.id, employee.department)
        return employee

    def update_employee(self, employee_id: int, data: EmployeeData) -> Employee:
        updated = self._employees.update(employee_id, _clean(data))
        if not updated:
            raise NotFoundError("Employee", employee_id)
        return updated

    def delete_employee(self, employee_id: int) -> None:
        self.get_employee(employee_id)
        if self._payroll.list_for_employee(employee_id):
            raise ValidationError("Employee has payroll records; deactivate instead")
        self._employees.delete_by_id(employee_id)
