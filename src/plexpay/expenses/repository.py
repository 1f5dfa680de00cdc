from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Expense, ExpenseData


class ExpenseRepository(Protocol):
    def get_by_id(self, expense_id: int) -> Optional[Expense]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Expense]:
        """Expenses ordered by date, most recent first."""
        raise NotImplementedError

    def count_for_category(self, category_id: int) -> int:
        raise NotImplementedError

    def count_for_user(self, user_id: int) -> int:
        raise NotImplementedError

    def create(self, data: ExpenseData) -> Expense:
        raise NotImplementedError

    def update(self, expense_id: int, data: ExpenseData) -> Optional[Expense]:
        raise NotImplementedError

    def delete_by_id(self, expense_id: int) -> bool:
        raise NotImplementedError
