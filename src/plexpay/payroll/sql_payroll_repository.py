from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import func

from ..common.money import quantize
from ..core.enums import PayrollStatus
from ..database.models import PayrollRecordModel
from ..database.sql_base import session_scope
from .model import PayrollData, PayrollRecord
from .repository import PayrollRepository


def _to_record(row: PayrollRecordModel) -> PayrollRecord:
    return PayrollRecord(
        id=int(row.id),
        employee_id=int(row.employee_id),
        user_id=int(row.user_id),
        pay_period_start=row.pay_period_start,
        pay_period_end=row.pay_period_end,
        gross_amount=quantize(Decimal(row.gross_amount)),
        deductions=quantize(Decimal(row.deductions)),
        net_amount=quantize(Decimal(row.net_amount)),
        processed_on=row.processed_on,
        notes=row.notes,
        status=PayrollStatus(row.status),
    )


def _apply(row: PayrollRecordModel, data: PayrollData) -> None:
    row.employee_id = data.employee_id
    row.user_id = data.user_id
    row.pay_period_start = data.pay_period_start
    row.pay_period_end = data.pay_period_end
    row.gross_amount = data.gross_amount
    row.deductions = data.deductions
    row.net_amount = data.net_amount
    row.processed_on = data.processed_on
    row.notes = data.notes
    row.status = data.status.value


class SqlPayrollRepository(PayrollRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def _ordered(self):
        return self._db.select(PayrollRecordModel).order_by(
            PayrollRecordModel.processed_on.desc(), PayrollRecordModel.id.desc()
        )

    def get_by_id(self, record_id: int) -> Optional[PayrollRecord]:
        with session_scope(self._db) as session:
            row = session.get(PayrollRecordModel, record_id)
            return _to_record(row) if row else None

    def list_all(self) -> Sequence[PayrollRecord]:
        with session_scope(self._db) as session:
            return [_to_record(r) for r in session.execute(self._ordered()).scalars()]

    def list_for_employee(self, employee_id: int) -> Sequence[PayrollRecord]:
        with session_scope(self._db) as session:
            stmt = self._ordered().where(PayrollRecordModel.employee_id == employee_id)
            return [_to_record(r) for r in session.execute(stmt).scalars()]

    def count_for_user(self, user_id: int) -> int:
        with session_scope(self._db) as session:
            return int(
                session.execute(
                    self._db.select(func.count(PayrollRecordModel.id)).where(PayrollRecordModel.user_id == user_id)
                ).scalar_one()
            )

    def create(self, data: PayrollData) -> PayrollRecord:
        with session_scope(self._db) as session:
            row = PayrollRecordModel()
            _apply(row, data)
            session.add(row)
            session.flush()
            return _to_record(row)

    def create_many(self, rows: Sequence[PayrollData]) -> list[PayrollRecord]:
        # one commit for the whole batch
        with session_scope(self._db) as session:
            models = []
            for data in rows:
                row = PayrollRecordModel()
                _apply(row, data)
                session.add(row)
                models.append(row)
            session.flush()
            return [_to_record(row) for row in models]

    def update(self, record_id: int, data: PayrollData) -> Optional[PayrollRecord]:
        with session_scope(self._db) as session:
            row = session.get(PayrollRecordModel, record_id)
            if not row:
                return None
            _apply(row, data)
            session.flush()
            return _to_record(row)

    def delete_by_id(self, record_id: int) -> bool:
        with session_scope(self._db) as session:
            row = session.get(PayrollRecordModel, record_id)
            if not row:
                return False
            session.delete(row)
            return True
