from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeData


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """Employees ordered by name."""
        raise NotImplementedError

    def create(self, data: EmployeeData) -> Employee:
        raise NotImplementedError

    def update(self, employee_id: int, data: EmployeeData) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError
