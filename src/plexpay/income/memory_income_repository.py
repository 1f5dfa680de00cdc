from __future__ import annotations

from dataclasses import asdict
from typing import Optional, Sequence, Tuple

from ..database.memory_base import MemoryTable
from .model import IncomeData, IncomeRecord
from .repository import IncomeRepository


class MemoryIncomeRepository(IncomeRepository):
    def __init__(self) -> None:
        self._table: MemoryTable[IncomeRecord] = MemoryTable()

    def get_by_id(self, record_id: int) -> Optional[IncomeRecord]:
        return self._table.get(record_id)

    def list_all(self) -> Sequence[IncomeRecord]:
        return sorted(self._table.all(), key=lambda r: (r.occurred_on, r.id), reverse=True)

    def list_page(self, *, offset: int, limit: int) -> Tuple[Sequence[IncomeRecord], int]:
        rows = self.list_all()
        return rows[offset : offset + limit], len(rows)

    def count_for_user(self, user_id: int) -> int:
        return sum(1 for r in self._table.all() if r.user_id == int(user_id))

    def create(self, data: IncomeData) -> IncomeRecord:
        return self._table.insert(lambda new_id: IncomeRecord(id=new_id, **asdict(data)))

    def update(self, record_id: int, data: IncomeData) -> Optional[IncomeRecord]:
        updated = IncomeRecord(id=int(record_id), **asdict(data))
        return updated if self._table.replace(record_id, updated) else None

    def delete_by_id(self, record_id: int) -> bool:
        return self._table.delete(record_id)
