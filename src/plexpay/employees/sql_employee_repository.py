from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from flask_sqlalchemy import SQLAlchemy

from ..common.money import quantize
from ..database.models import EmployeeModel
from ..database.sql_base import session_scope
from .model import Employee, EmployeeData
from .repository import EmployeeRepository


def _to_employee(row: EmployeeModel) -> Employee:
    return Employee(
        id=int(row.id),
        name=row.name,
        position=row.position,
        department=row.department,
        email=row.email,
        phone_number=row.phone_number,
        address=row.address,
        salary=quantize(Decimal(row.salary)),
        date_hired=row.date_hired,
        is_active=bool(row.is_active),
    )


def _apply(row: EmployeeModel, data: EmployeeData) -> None:
    row.name = data.name
    row.position = data.position
    row.department = data.department
    row.email = data.email
    row.phone_number = data.phone_number
    row.address = data.address
    row.salary = data.salary
    row.date_hired = data.date_hired
    row.is_active = data.is_active


class SqlEmployeeRepository(EmployeeRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with session_scope(self._db) as session:
            row = session.get(EmployeeModel, employee_id)
            return _to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with session_scope(self._db) as session:
            rows = session.execute(
                self._db.select(EmployeeModel).order_by(EmployeeModel.name, EmployeeModel.id)
            ).scalars()
            return [_to_employee(r) for r in rows]

    def create(self, data: EmployeeData) -> Employee:
        with session_scope(self._db) as session:
            row = EmployeeModel()
            _apply(row, data)
            session.add(row)
            session.flush()
            return _to_employee(row)

    def update(self, employee_id: int, data: EmployeeData) -> Optional[Employee]:
        with session_scope(self._db) as session:
            row = session.get(EmployeeModel, employee_id)
            if not row:
                return None
            _apply(row, data)
            session.flush()
            return _to_employee(row)

    def delete_by_id(self, employee_id: int) -> bool:
        with session_scope(self._db) as session:
            row = session.get(EmployeeModel, employee_id)
            if not row:
                return False
            session.delete(row)
            return True
