from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import CategoryData, ExpenseCategory


class CategoryRepository(Protocol):
    def get_by_id(self, category_id: int) -> Optional[ExpenseCategory]:
        raise NotImplementedError

    def list_all(self) -> Sequence[ExpenseCategory]:
        """Categories ordered by name."""
        raise NotImplementedError

    def create(self, data: CategoryData) -> ExpenseCategory:
        raise NotImplementedError

    def update(self, category_id: int, data: CategoryData) -> Optional[ExpenseCategory]:
        raise NotImplementedError

    def delete_by_id(self, category_id: int) -> bool:
        raise NotImplementedError
