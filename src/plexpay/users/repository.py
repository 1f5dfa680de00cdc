from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User, UserData


class UserRepository(Protocol):
    """Repository interface for users.

    Note: services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def create(self, data: UserData) -> User:
        raise NotImplementedError

    def update(self, user_id: int, data: UserData) -> Optional[User]:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError
