from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollData, PayrollRecord


class PayrollRepository(Protocol):
    def get_by_id(self, record_id: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[PayrollRecord]:
        """Records ordered by processing date, most recent first."""
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def count_for_user(self, user_id: int) -> int:
        raise NotImplementedError

    def create_many(self, rows: Sequence[PayrollData]) -> list[PayrollRecord]:
        """Insert all rows or none of them."""
        raise NotImplementedError

    def create(self, data: PayrollData) -> PayrollRecord:
        raise NotImplementedError

    def update(self, record_id: int, data: PayrollData) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError
