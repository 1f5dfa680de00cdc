from __future__ import annotations

from dataclasses import asdict
from typing import Optional, Sequence

from ..database.memory_base import MemoryTable
from .model import PayrollData, PayrollRecord
from .repository import PayrollRepository


class MemoryPayrollRepository(PayrollRepository):
    def __init__(self) -> None:
        self._table: MemoryTable[PayrollRecord] = MemoryTable()

    def get_by_id(self, record_id: int) -> Optional[PayrollRecord]:
        return self._table.get(record_id)

    def list_all(self) -> Sequence[PayrollRecord]:
        return sorted(self._table.all(), key=lambda r: (r.processed_on, r.id), reverse=True)

    def list_for_employee(self, employee_id: int) -> Sequence[PayrollRecord]:
        return [r for r in self.list_all() if r.employee_id == int(employee_id)]

    def create(self, data: PayrollData) -> PayrollRecord:
        return self._table.insert(lambda new_id: PayrollRecord(id=new_id, **asdict(data)))

    def count_for_user(self, user_id: int) -> int:
        return sum(1 for r in self._table.all() if r.user_id == int(user_id))

    def create_many(self, rows: Sequence[PayrollData]) -> list[PayrollRecord]:
        fields = [asdict(data) for data in rows]
        return [self._table.insert(lambda new_id, f=f: PayrollRecord(id=new_id, **f)) for f in fields]

    def update(self, record_id: int, data: PayrollData) -> Optional[PayrollRecord]:
        updated = PayrollRecord(id=int(record_id), **asdict(data))
        return updated if self._table.replace(record_id, updated) else None

    def delete_by_id(self, record_id: int) -> bool:
        return self._table.delete(record_id)
