from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..database.memory_base import MemoryTable
from .model import User, UserData
from .repository import UserRepository


class MemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._table: MemoryTable[User] = MemoryTable()

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._table.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._table.all() if u.username == username), None)

    def list_all(self) -> Sequence[User]:
        return sorted(self._table.all(), key=lambda u: u.id)

    def create(self, data: UserData) -> User:
        return self._table.insert(
            lambda new_id: User(
                id=new_id,
                username=data.username,
                password_hash=data.password_hash or "",
                name=data.name,
                email=data.email,
                role=data.role,
            )
        )

    def update(self, user_id: int, data: UserData) -> Optional[User]:
        existing = self._table.get(user_id)
        if not existing:
            return None
        updated = replace(
            existing,
            username=data.username,
            name=data.name,
            email=data.email,
            role=data.role,
            password_hash=data.password_hash or existing.password_hash,
        )
        self._table.replace(user_id, updated)
        return updated

    def delete_by_id(self, user_id: int) -> bool:
        return self._table.delete(user_id)
