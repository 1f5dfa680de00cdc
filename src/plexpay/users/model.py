from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account that can log in to the back office.

    Note: Plain data object; no database access here.
    """

    id: int
    username: str
    password_hash: str
    name: str
    email: str
    role: Role = Role.STAFF

    def as_dict(self) -> dict:
        # The password hash never leaves the service layer
        return {
            "id": self.id,
            "username": self.username,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
        }


@dataclass(frozen=True)
class UserData:
    """Writable user fields. ``password_hash`` None on update keeps the old one."""

    username: str
    name: str
    email: str
    role: Role
    password_hash: Optional[str] = None
