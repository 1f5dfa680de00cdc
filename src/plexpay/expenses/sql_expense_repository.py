from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import func

from ..common.money import quantize
from ..database.models import ExpenseModel
from ..database.sql_base import session_scope
from .model import Expense, ExpenseData
from .repository import ExpenseRepository


def _to_expense(row: ExpenseModel) -> Expense:
    return Expense(
        id=int(row.id),
        description=row.description,
        amount=quantize(Decimal(row.amount)),
        occurred_on=row.occurred_on,
        category_id=int(row.category_id),
        user_id=int(row.user_id),
        notes=row.notes,
        receipt=row.receipt,
    )


def _apply(row: ExpenseModel, data: ExpenseData) -> None:
    row.description = data.description
    row.amount = data.amount
    row.occurred_on = data.occurred_on
    row.category_id = data.category_id
    row.user_id = data.user_id
    row.notes = data.notes
    row.receipt = data.receipt


class SqlExpenseRepository(ExpenseRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def get_by_id(self, expense_id: int) -> Optional[Expense]:
        with session_scope(self._db) as session:
            row = session.get(ExpenseModel, expense_id)
            return _to_expense(row) if row else None

    def list_all(self) -> Sequence[Expense]:
        with session_scope(self._db) as session:
            rows = session.execute(
                self._db.select(ExpenseModel).order_by(ExpenseModel.occurred_on.desc(), ExpenseModel.id.desc())
            ).scalars()
            return [_to_expense(r) for r in rows]

    def count_for_category(self, category_id: int) -> int:
        with session_scope(self._db) as session:
            return int(
                session.execute(
                    self._db.select(func.count(ExpenseModel.id)).where(ExpenseModel.category_id == category_id)
                ).scalar_one()
            )

    def count_for_user(self, user_id: int) -> int:
        with session_scope(self._db) as session:
            return int(
                session.execute(
                    self._db.select(func.count(ExpenseModel.id)).where(ExpenseModel.user_id == user_id)
                ).scalar_one()
            )

    def create(self, data: ExpenseData) -> Expense:
        with session_scope(self._db) as session:
            row = ExpenseModel()
            _apply(row, data)
            session.add(row)
            session.flush()
            return _to_expense(row)

    def update(self, expense_id: int, data: ExpenseData) -> Optional[Expense]:
        with session_scope(self._db) as session:
            row = session.get(ExpenseModel, expense_id)
            if not row:
                return None
            _apply(row, data)
            session.flush()
            return _to_expense(row)

    def delete_by_id(self, expense_id: int) -> bool:
        with session_scope(self._db) as session:
            row = session.get(ExpenseModel, expense_id)
            if not row:
                return False
            session.delete(row)
            return True
