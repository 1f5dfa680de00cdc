from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from plexpay.core.enums import Role
from plexpay.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from plexpay.income.service import IncomeInput


def test_authenticate_returns_user_for_valid_credentials(container, admin):
    user = container.auth_service.authenticate("admin", "password123")
    assert user.id == admin.id
    assert "password" not in user.as_dict()
    assert "passwordHash" not in user.as_dict()


@pytest.mark.parametrize("username,password", [("admin", "wrong-pass"), ("nobody", "password123"), ("", "")])
def test_authenticate_rejects_bad_credentials(container, admin, username, password):
    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        container.auth_service.authenticate(username, password)


def test_password_is_stored_hashed(container, admin):
    stored = container.users_repo.get_by_id(admin.id)
    assert stored.password_hash != "password123"


def test_usernames_are_unique(container, admin):
    with pytest.raises(ValidationError, match="already exists"):
        container.user_service.create_user(
            username="admin", password="secret99", name="Other", email="o@example.com"
        )


def test_short_password_rejected(container):
    with pytest.raises(ValidationError, match="at least 6"):
        container.user_service.create_user(username="bob", password="123", name="Bob", email="b@example.com")


def test_update_without_password_keeps_old_hash(container, admin):
    container.user_service.update_user(
        admin.id, username="admin", name="Renamed", email="admin@example.com", role=Role.ADMIN
    )
    assert container.auth_service.authenticate("admin", "password123").name == "Renamed"


def test_user_cannot_delete_themselves(container, admin):
    with pytest.raises(ValidationError):
        container.user_service.delete_user(current_user_id=admin.id, user_id=admin.id)


def test_delete_then_get_is_not_found(container, admin):
    staff = container.user_service.create_user(
        username="staff", password="password123", name="Staff", email="s@example.com"
    )
    assert staff.role == Role.STAFF

    container.user_service.delete_user(current_user_id=admin.id, user_id=staff.id)
    with pytest.raises(NotFoundError):
        container.user_service.get_user(staff.id)


def test_user_owning_records_cannot_be_deleted(container, admin):
    staff = container.user_service.create_user(
        username="staff", password="password123", name="Staff", email="s@example.com"
    )
    container.income_service.create_record(
        IncomeInput(source="Sales", amount=Decimal("10"), occurred_on=date(2024, 1, 1)), current_user_id=staff.id
    )

    with pytest.raises(ValidationError, match="owns 1 record"):
        container.user_service.delete_user(current_user_id=admin.id, user_id=staff.id)
    assert container.user_service.get_user(staff.id).id == staff.id
