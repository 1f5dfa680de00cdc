from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

from .model import IncomeData, IncomeRecord


class IncomeRepository(Protocol):
    def get_by_id(self, record_id: int) -> Optional[IncomeRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[IncomeRecord]:
        """Records ordered by date, most recent first."""
        raise NotImplementedError

    def count_for_user(self, user_id: int) -> int:
        raise NotImplementedError

    def list_page(self, *, offset: int, limit: int) -> Tuple[Sequence[IncomeRecord], int]:
        """One page in ``list_all`` order, plus the total row count."""
        raise NotImplementedError

    def create(self, data: IncomeData) -> IncomeRecord:
        raise NotImplementedError

    def update(self, record_id: int, data: IncomeData) -> Optional[IncomeRecord]:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError
