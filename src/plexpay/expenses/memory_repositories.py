from __future__ import annotations

from dataclasses import asdict
from typing import Optional, Sequence

from ..database.memory_base import MemoryTable
from .category_repository import CategoryRepository
from .model import CategoryData, Expense, ExpenseCategory, ExpenseData
from .repository import ExpenseRepository


class MemoryCategoryRepository(CategoryRepository):
    def __init__(self) -> None:
        self._table: MemoryTable[ExpenseCategory] = MemoryTable()

    def get_by_id(self, category_id: int) -> Optional[ExpenseCategory]:
        return self._table.get(category_id)

    def list_all(self) -> Sequence[ExpenseCategory]:
        return sorted(self._table.all(), key=lambda c: (c.name, c.id))

    def create(self, data: CategoryData) -> ExpenseCategory:
        return self._table.insert(lambda new_id: ExpenseCategory(id=new_id, **asdict(data)))

    def update(self, category_id: int, data: CategoryData) -> Optional[ExpenseCategory]:
        updated = ExpenseCategory(id=int(category_id), **asdict(data))
        return updated if self._table.replace(category_id, updated) else None

    def delete_by_id(self, category_id: int) -> bool:
        return self._table.delete(category_id)


class MemoryExpenseRepository(ExpenseRepository):
    def __init__(self) -> None:
        self._table: MemoryTable[Expense] = MemoryTable()

    def get_by_id(self, expense_id: int) -> Optional[Expense]:
        return self._table.get(expense_id)

    def list_all(self) -> Sequence[Expense]:
        return sorted(self._table.all(), key=lambda e: (e.occurred_on, e.id), reverse=True)

    def count_for_category(self, category_id: int) -> int:
        return sum(1 for e in self._table.all() if e.category_id == int(category_id))

    def count_for_user(self, user_id: int) -> int:
        return sum(1 for e in self._table.all() if e.user_id == int(user_id))

    def create(self, data: ExpenseData) -> Expense:
        return self._table.insert(lambda new_id: Expense(id=new_id, **asdict(data)))

    def update(self, expense_id: int, data: ExpenseData) -> Optional[Expense]:
        updated = Expense(id=int(expense_id), **asdict(data))
        return updated if self._table.replace(expense_id, updated) else None

    def delete_by_id(self, expense_id: int) -> bool:
        return self._table.delete(expense_id)
