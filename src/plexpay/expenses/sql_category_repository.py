from __future__ import annotations

from typing import Optional, Sequence

from flask_sqlalchemy import SQLAlchemy

from ..database.models import ExpenseCategoryModel
from ..database.sql_base import session_scope
from .category_repository import CategoryRepository
from .model import CategoryData, ExpenseCategory


def _to_category(row: ExpenseCategoryModel) -> ExpenseCategory:
    return ExpenseCategory(id=int(row.id), name=row.name, description=row.description)


class SqlCategoryRepository(CategoryRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def get_by_id(self, category_id: int) -> Optional[ExpenseCategory]:
        with session_scope(self._db) as session:
            row = session.get(ExpenseCategoryModel, category_id)
            return _to_category(row) if row else None

    def list_all(self) -> Sequence[ExpenseCategory]:
        with session_scope(self._db) as session:
            rows = session.execute(
                self._db.select(ExpenseCategoryModel).order_by(ExpenseCategoryModel.name, ExpenseCategoryModel.id)
            ).scalars()
            return [_to_category(r) for r in rows]

    def create(self, data: CategoryData) -> ExpenseCategory:
        with session_scope(self._db) as session:
            row = ExpenseCategoryModel(name=data.name, description=data.description)
            session.add(row)
            session.flush()
            return _to_category(row)

    def update(self, category_id: int, data: CategoryData) -> Optional[ExpenseCategory]:
        with session_scope(self._db) as session:
            row = session.get(ExpenseCategoryModel, category_id)
            if not row:
                return None
            row.name = data.name
            row.description = data.description
            session.flush()
            return _to_category(row)

    def delete_by_id(self, category_id: int) -> bool:
        with session_scope(self._db) as session:
            row = session.get(ExpenseCategoryModel, category_id)
            if not row:
                return False
            session.delete(row)
            return True
