from __future__ import annotations

from typing import Optional, Sequence

from flask_sqlalchemy import SQLAlchemy

from ..core.enums import Role
from ..database.models import UserModel
from ..database.sql_base import session_scope
from .model import User, UserData
from .repository import UserRepository


def _to_user(row: UserModel) -> User:
    return User(
        id=int(row.id),
        username=row.username,
        password_hash=row.password_hash,
        name=row.name,
        email=row.email,
        role=Role(row.role),
    )


class SqlUserRepository(UserRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        with session_scope(self._db) as session:
            row = session.get(UserModel, user_id)
            return _to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with session_scope(self._db) as session:
            row = session.execute(
                self._db.select(UserModel).filter_by(username=username)
            ).scalar_one_or_none()
            return _to_user(row) if row else None

    def list_all(self) -> Sequence[User]:
        with session_scope(self._db) as session:
            rows = session.execute(self._db.select(UserModel).order_by(UserModel.id)).scalars()
            return [_to_user(r) for r in rows]

    def create(self, data: UserData) -> User:
        with session_scope(self._db) as session:
            row = UserModel(
                username=data.username,
                password_hash=data.password_hash,
                name=data.name,
                email=data.email,
                role=data.role.value,
            )
            session.add(row)
            session.flush()
            return _to_user(row)

    def update(self, user_id: int, data: UserData) -> Optional[User]:
        with session_scope(self._db) as session:
            row = session.get(UserModel, user_id)
            if not row:
                return None
            row.username = data.username
            row.name = data.name
            row.email = data.email
            row.role = data.role.value
            if data.password_hash:
                row.password_hash = data.password_hash
            session.flush()
            return _to_user(row)

    def delete_by_id(self, user_id: int) -> bool:
        with session_scope(self._db) as session:
            row = session.get(UserModel, user_id)
            if not row:
                return False
            session.delete(row)
            return True
