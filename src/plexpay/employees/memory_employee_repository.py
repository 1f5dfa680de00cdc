from __future__ import annotations

from dataclasses import asdict
from typing import Optional, Sequence

from ..database.memory_base import MemoryTable
from .model import Employee, EmployeeData
from .repository import EmployeeRepository


class MemoryEmployeeRepository(EmployeeRepository):
    def __init__(self) -> None:
        self._table: MemoryTable[Employee] = MemoryTable()

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._table.get(employee_id)

    def list_all(self) -> Sequence[Employee]:
        return sorted(self._table.all(), key=lambda e: (e.name, e.id))

    def create(self, data: EmployeeData) -> Employee:
        return self._table.insert(lambda new_id: Employee(id=new_id, **asdict(data)))

    def update(self, employee_id: int, data: EmployeeData) -> Optional[Employee]:
        updated = Employee(id=int(employee_id), **asdict(data))
        return updated if self._table.replace(employee_id, updated) else None

    def delete_by_id(self, employee_id: int) -> bool:
        return self._table.delete(employee_id)
