from __future__ import annotations

from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..expenses.repository import ExpenseRepository
from ..income.repository import IncomeRepository
from ..logging_utils import get_logger
from ..payroll.repository import PayrollRepository
from .model import User, UserData
from .repository import UserRepository

LOGGER = get_logger(__name__)


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> User:
        user = self._users.get_by_username((username or "").strip())
        if not user:
            LOGGER.info("Login rejected for unknown user %r", username)
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except Exception:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            LOGGER.info("Login rejected for %r: wrong password", username)
            raise AuthenticationError("Invalid credentials")

        return user


class UserService:
    """Use case: manage users (admin)."""

    def __init__(
        self,
        users: UserRepository,
        *,
        expenses: ExpenseRepository,
        income: IncomeRepository,
        payroll: PayrollRepository,
    ):
        self._users = users
        self._expenses = expenses
        self._income = income
        self._payroll = payroll

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user

    def create_user(
        self,
        *,
        username: str,
        password: str,
        name: str,
        email: str,
        role: Role = Role.STAFF,
    ) -> User:
        username = require_non_empty(username, "Username")
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        user = self._users.create(
            UserData(
                username=username,
                name=name,
                email=email,
                role=role,
                password_hash=generate_password_hash(password),
            )
        )
        LOGGER.info("Created user %s (%s)", user.username, user.role.value)
        return user

    def update_user(
        self,
        user_id: int,
        *,
        username: str,
        name: str,
        email: str,
        role: Role,
        password: Optional[str] = None,
    ) -> User:
        existing = self.get_user(user_id)
        username = require_non_empty(username, "Username")

        if username != existing.username and self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        password_hash = None
        if password and password.strip():
            require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
            password_hash = generate_password_hash(password)

        updated = self._users.update(
            user_id,
            UserData(
                username=username,
                name=require_non_empty(name, "Name"),
                email=require_non_empty(email, "Email"),
                role=role,
                password_hash=password_hash,
            ),
        )
        if not updated:
            raise NotFoundError("User", user_id)
        return updated

    def delete_user(self, *, current_user_id: Optional[int], user_id: int) -> None:
        self.get_user(user_id)
        if current_user_id is not None and int(current_user_id) == int(user_id):
            raise ValidationError("You cannot delete your own account")

        owned = (
            self._expenses.count_for_user(user_id)
            + self._income.count_for_user(user_id)
            + self._payroll.count_for_user(user_id)
        )
        if owned:
            raise ValidationError(f"User still owns {owned} record(s)")

        if not self._users.delete_by_id(user_id):
            raise NotFoundError("User", user_id)
        LOGGER.info("Deleted user %s", user_id)
