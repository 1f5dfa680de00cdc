"""Schema creation and demo data.

``seed_demo_data`` goes through the services so demo rows obey the same rules
as API input. It is idempotent: an existing ``admin`` user means the store has
already been seeded.
"""
from __future__ import annotations

from calendar import monthrange
from datetime import date
from decimal import Decimal
from typing import Optional

from flask import Flask

from ..common.datetime_utils import today_local
from ..container import Container
from ..core.enums import PayrollStatus, Role
from ..employees.model import EmployeeData
from ..expenses.service import ExpenseInput
from ..extensions import db
from ..income.service import IncomeInput
from ..logging_utils import get_logger
from ..payroll.service import PayrollInput
from . import models  # noqa: F401  (registers the tables on db.metadata)

LOGGER = get_logger(__name__)

DEMO_PASSWORD = "password123"

DEMO_USERS = [
    ("admin", "Admin User", "admin@plexpay.local", Role.ADMIN),
    ("staff", "Staff User", "staff@plexpay.local", Role.STAFF),
]

DEMO_CATEGORIES = [
    ("Payroll", "Salaries and wages"),
    ("Operations", "Day-to-day running costs"),
    ("Technology", "Software, hardware and hosting"),
    ("Marketing", "Advertising and promotion"),
    ("Rent", "Office space"),
]

DEMO_EMPLOYEES = [
    ("Jane Cooper", "Operations Manager", "Operations", "jane.cooper@plexpay.local", "72000.00", (2021, 3, 1)),
    ("Wade Warren", "Software Engineer", "Technology", "wade.warren@plexpay.local", "84000.00", (2022, 6, 15)),
    ("Esther Howard", "Marketing Specialist", "Marketing", "esther.howard@plexpay.local", "54000.00", (2023, 1, 9)),
]

# (description, amount, month, day, category name, notes)
DEMO_EXPENSES = [
    ("Office rent", "2500.00", 4, 1, "Rent", None),
    ("Cloud hosting", "320.50", 4, 12, "Technology", "Monthly invoice"),
    ("Social media campaign", "780.00", 5, 3, "Marketing", None),
    ("Office supplies", "145.25", 5, 8, "Operations", None),
    ("Office rent", "2500.00", 5, 1, "Rent", None),
]

# (source, amount, month, day, description)
DEMO_INCOME = [
    ("Client retainer - Acme Corp", "8500.00", 4, 5, "April retainer"),
    ("Consulting project", "4200.00", 4, 20, None),
    ("Client retainer - Acme Corp", "8500.00", 5, 5, "May retainer"),
    ("Workshop fees", "1750.00", 5, 14, None),
]


def init_schema(app: Flask) -> None:
    with app.app_context():
        db.create_all()
    LOGGER.info("Database schema ready")


def _month_bounds(year: int, month: int) -> tuple[date, date]:
    return date(year, month, 1), date(year, month, monthrange(year, month)[1])


def seed_demo_data(container: Container, *, today: Optional[date] = None) -> bool:
    """Insert the demo dataset. Returns False when it is already present."""
    if container.users_repo.get_by_username("admin"):
        LOGGER.info("Demo data already present, skipping seed")
        return False

    year = (today or today_local()).year

    users = {}
    for username, name, email, role in DEMO_USERS:
        users[username] = container.user_service.create_user(
            username=username, password=DEMO_PASSWORD, name=name, email=email, role=role
        )
    admin_id = users["admin"].id

    categories = {
        name: container.category_service.create_category(name=name, description=description)
        for name, description in DEMO_CATEGORIES
    }

    employees = []
    for name, position, department, email, salary, hired in DEMO_EMPLOYEES:
        employees.append(
            container.employee_service.create_employee(
                EmployeeData(
                    name=name,
                    position=position,
                    department=department,
                    email=email,
                    salary=Decimal(salary),
                    date_hired=date(*hired),
                )
            )
        )

    for description, amount, month, day, category, notes in DEMO_EXPENSES:
        container.expense_service.create_expense(
            ExpenseInput(
                description=description,
                amount=Decimal(amount),
                occurred_on=date(year, month, day),
                category_id=categories[category].id,
                notes=notes,
            ),
            current_user_id=admin_id,
        )

    for source, amount, month, day, description in DEMO_INCOME:
        container.income_service.create_record(
            IncomeInput(
                source=source,
                amount=Decimal(amount),
                occurred_on=date(year, month, day),
                description=description,
            ),
            current_user_id=admin_id,
        )

    # April is paid out, May still waits for approval
    for month, status in ((4, PayrollStatus.COMPLETED), (5, PayrollStatus.PENDING)):
        start, end = _month_bounds(year, month)
        for employee in employees:
            pay = container.calculator.monthly_pay(employee)
            container.payroll_service.create_record(
                PayrollInput(
                    employee_id=employee.id,
                    pay_period_start=start,
                    pay_period_end=end,
                    gross_amount=pay.gross_amount,
                    deductions=pay.deductions,
                    net_amount=pay.net_amount,
                    processed_on=end,
                    status=status,
                ),
                current_user_id=admin_id,
            )

    LOGGER.info(
        "Seeded demo data: %s users, %s categories, %s employees",
        len(users),
        len(categories),
        len(employees),
    )
    return True
