from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from plexpay.core.exceptions import NotFoundError, ValidationError
from plexpay.expenses.service import ExpenseInput


@pytest.fixture
def rent(container):
    return container.category_service.create_category(name="Rent", description="Office space")


def _expense(category_id, amount="100.00", day=date(2024, 3, 1), **kw):
    return ExpenseInput(description="Office rent", amount=Decimal(amount), occurred_on=day, category_id=category_id, **kw)


def test_user_id_defaults_to_current_user(container, admin, rent):
    expense = container.expense_service.create_expense(_expense(rent.id), current_user_id=admin.id)
    assert expense.user_id == admin.id
    assert expense.as_dict()["amount"] == "100.00"
    assert expense.as_dict()["date"] == "2024-03-01"


def test_expense_requires_existing_category(container, admin):
    with pytest.raises(ValidationError, match="category 99"):
        container.expense_service.create_expense(_expense(99), current_user_id=admin.id)


def test_expense_requires_existing_user(container, rent):
    with pytest.raises(ValidationError, match="User 42"):
        container.expense_service.create_expense(_expense(rent.id, user_id=42))


def test_expenses_listed_most_recent_first(container, admin, rent):
    for day in (date(2024, 1, 5), date(2024, 3, 5), date(2024, 2, 5)):
        container.expense_service.create_expense(_expense(rent.id, day=day), current_user_id=admin.id)

    days = [e.occurred_on for e in container.expense_service.list_expenses()]
    assert days == sorted(days, reverse=True)


def test_categories_listed_by_name(container):
    for name in ("Travel", "Marketing", "Rent"):
        container.category_service.create_category(name=name)
    assert [c.name for c in container.category_service.list_categories()] == ["Marketing", "Rent", "Travel"]


def test_category_in_use_cannot_be_deleted(container, admin, rent):
    container.expense_service.create_expense(_expense(rent.id), current_user_id=admin.id)
    with pytest.raises(ValidationError, match="used by 1"):
        container.category_service.delete_category(rent.id)


def test_update_replaces_fields(container, admin, rent):
    expense = container.expense_service.create_expense(_expense(rent.id), current_user_id=admin.id)
    updated = container.expense_service.update_expense(
        expense.id, _expense(rent.id, amount="250.5", notes="  "), current_user_id=admin.id
    )
    assert updated.amount == Decimal("250.5")
    assert updated.notes is None


def test_delete_then_get_is_not_found(container, admin, rent):
    expense = container.expense_service.create_expense(_expense(rent.id), current_user_id=admin.id)
    container.expense_service.delete_expense(expense.id)
    with pytest.raises(NotFoundError, match="Expense not found"):
        container.expense_service.get_expense(expense.id)
    with pytest.raises(NotFoundError):
        container.expense_service.delete_expense(expense.id)
