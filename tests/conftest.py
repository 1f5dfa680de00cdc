from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from plexpay.container import build_container
from plexpay.core.enums import Role
from plexpay.employees.model import EmployeeData
from plexpay.main import create_app


@pytest.fixture
def container():
    return build_container(backend="memory")


@pytest.fixture
def admin(container):
    return container.user_service.create_user(
        username="admin", password="password123", name="Admin", email="admin@example.com", role=Role.ADMIN
    )


@pytest.fixture
def make_employee(container):
    def _make(name="Jane Cooper", department="Operations", salary="60000.00", active=True):
        return container.employee_service.create_employee(
            EmployeeData(
                name=name,
                position="Manager",
                department=department,
                email=f"{name.split()[0].lower()}@example.com",
                salary=Decimal(salary),
                date_hired=date(2022, 1, 10),
                is_active=active,
            )
        )

    return _make


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"STORAGE_BACKEND": "memory", "AUTO_SEED_DB": True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "password123"})
    assert resp.status_code == 200
    return client
