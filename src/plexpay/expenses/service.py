from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..logging_utils import get_logger
from ..users.repository import UserRepository
from .category_repository import CategoryRepository
from .model import CategoryData, Expense, ExpenseCategory, ExpenseData
from .repository import ExpenseRepository

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ExpenseInput:
    """Expense fields as submitted; ``user_id`` may be left to the caller's session."""

    description: str
    amount: Decimal
    occurred_on: date
    category_id: int
    user_id: Optional[int] = None
    notes: Optional[str] = None
    receipt: Optional[str] = None


class CategoryService:
    def __init__(self, categories: CategoryRepository, expenses: ExpenseRepository):
        self._categories = categories
        self._expenses = expenses

    def list_categories(self) -> Sequence[ExpenseCategory]:
        return self._categories.list_all()

    def get_category(self, category_id: int) -> ExpenseCategory:
        category = self._categories.get_by_id(category_id)
        if not category:
            raise NotFoundError("Expense category", category_id)
        return category

    def create_category(self, *, name: str, description: Optional[str] = None) -> ExpenseCategory:
        data = CategoryData(name=require_non_empty(name, "Name"), description=optional_text(description))
        return self._categories.create(data)

    def update_category(self, category_id: int, *, name: str, description: Optional[str] = None) -> ExpenseCategory:
        data = CategoryData(name=require_non_empty(name, "Name"), description=optional_text(description))
        updated = self._categories.update(category_id, data)
        if not updated:
            raise NotFoundError("Expense category", category_id)
        return updated

    def delete_category(self, category_id: int) -> None:
        self.get_category(category_id)
        in_use = self._expenses.count_for_category(category_id)
        if in_use:
            raise ValidationError(f"Category is used by {in_use} expense(s)")
        self._categories.delete_by_id(category_id)


class ExpenseService:
    def __init__(self, expenses: ExpenseRepository, categories: CategoryRepository, users: UserRepository):
        self._expenses = expenses
        self._categories = categories
        self._users = users

    def list_expenses(self) -> Sequence[Expense]:
        return self._expenses.list_all()

    def get_expense(self, expense_id: int) -> Expense:
        expense = self._expenses.get_by_id(expense_id)
        if not expense:
            raise NotFoundError("Expense", expense_id)
        return expense

    def _to_data(self, payload: ExpenseInput, *, current_user_id: Optional[int]) -> ExpenseData:
        if not self._categories.get_by_id(payload.category_id):
            raise ValidationError(f"Expense category {payload.category_id} does not exist")

        user_id = payload.user_id or current_user_id
        if not user_id:
            raise ValidationError("userId is required")
        if not self._users.get_by_id(user_id):
            raise ValidationError(f"User {user_id} does not exist")

        return ExpenseData(
            description=require_non_empty(payload.description, "Description"),
            amount=payload.amount,
            occurred_on=payload.occurred_on,
            category_id=int(payload.category_id),
            user_id=int(user_id),
            notes=optional_text(payload.notes),
            receipt=optional_text(payload.receipt),
        )

    def create_expense(self, payload: ExpenseInput, *, current_user_id: Optional[int] = None) -> Expense:
        expense = self._expenses.create(self._to_data(payload, current_user_id=current_user_id))
        LOGGER.info("Recorded expense %s (%s)", expense.id, expense.amount)
        return expense

    def update_expense(
        self, expense_id: int, payload: ExpenseInput, *, current_user_id: Optional[int] = None
    ) -> Expense:
        self.get_expense(expense_id)
        updated = self._expenses.update(expense_id, self._to_data(payload, current_user_id=current_user_id))
        if not updated:
            raise NotFoundError("Expense", expense_id)
        return updated

    def delete_expense(self, expense_id: int) -> None:
        if not self._expenses.delete_by_id(expense_id):
            raise NotFoundError("Expense", expense_id)
