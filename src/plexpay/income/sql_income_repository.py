from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence, Tuple

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import func

from ..common.money import quantize
from ..database.models import IncomeRecordModel
from ..database.sql_base import session_scope
from .model import IncomeData, IncomeRecord
from .repository import IncomeRepository


def _to_record(row: IncomeRecordModel) -> IncomeRecord:
    return IncomeRecord(
        id=int(row.id),
        source=row.source,
        amount=quantize(Decimal(row.amount)),
        occurred_on=row.occurred_on,
        description=row.description,
        user_id=int(row.user_id),
    )


def _apply(row: IncomeRecordModel, data: IncomeData) -> None:
    row.source = data.source
    row.amount = data.amount
    row.occurred_on = data.occurred_on
    row.description = data.description
    row.user_id = data.user_id


class SqlIncomeRepository(IncomeRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def _ordered(self):
        return self._db.select(IncomeRecordModel).order_by(
            IncomeRecordModel.occurred_on.desc(), IncomeRecordModel.id.desc()
        )

    def get_by_id(self, record_id: int) -> Optional[IncomeRecord]:
        with session_scope(self._db) as session:
            row = session.get(IncomeRecordModel, record_id)
            return _to_record(row) if row else None

    def list_all(self) -> Sequence[IncomeRecord]:
        with session_scope(self._db) as session:
            return [_to_record(r) for r in session.execute(self._ordered()).scalars()]

    def list_page(self, *, offset: int, limit: int) -> Tuple[Sequence[IncomeRecord], int]:
        with session_scope(self._db) as session:
            total = session.execute(self._db.select(func.count(IncomeRecordModel.id))).scalar_one()
            rows = session.execute(self._ordered().offset(offset).limit(limit)).scalars()
            return [_to_record(r) for r in rows], int(total)

    def count_for_user(self, user_id: int) -> int:
        with session_scope(self._db) as session:
            return int(
                session.execute(
                    self._db.select(func.count(IncomeRecordModel.id)).where(IncomeRecordModel.user_id == user_id)
                ).scalar_one()
            )

    def create(self, data: IncomeData) -> IncomeRecord:
        with session_scope(self._db) as session:
            row = IncomeRecordModel()
            _apply(row, data)
            session.add(row)
            session.flush()
            return _to_record(row)

    def update(self, record_id: int, data: IncomeData) -> Optional[IncomeRecord]:
        with session_scope(self._db) as session:
            row = session.get(IncomeRecordModel, record_id)
            if not row:
                return None
            _apply(row, data)
            session.flush()
            return _to_record(row)

    def delete_by_id(self, record_id: int) -> bool:
        with session_scope(self._db) as session:
            row = session.get(IncomeRecordModel, record_id)
            if not row:
                return False
            session.delete(row)
            return True
