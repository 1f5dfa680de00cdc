from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from flask_sqlalchemy import SQLAlchemy

from .employees.memory_employee_repository import MemoryEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .employees.sql_employee_repository import SqlEmployeeRepository
from .expenses.category_repository import CategoryRepository
from .expenses.memory_repositories import MemoryCategoryRepository, MemoryExpenseRepository
from .expenses.repository import ExpenseRepository
from .expenses.service import CategoryService, ExpenseService
from .expenses.sql_category_repository import SqlCategoryRepository
from .expenses.sql_expense_repository import SqlExpenseRepository
from .income.memory_income_repository import MemoryIncomeRepository
from .income.repository import IncomeRepository
from .income.service import IncomeService
from .income.sql_income_repository import SqlIncomeRepository
from .payroll.calculator.base import PayrollCalculator
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.memory_payroll_repository import MemoryPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService
from .payroll.sql_payroll_repository import SqlPayrollRepository
from .reports.service import DashboardService, ReportService
from .users.memory_user_repository import MemoryUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService
from .users.sql_user_repository import SqlUserRepository

SQL_BACKEND = "sql"
MEMORY_BACKEND = "memory"


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    categories_repo: CategoryRepository
    expenses_repo: ExpenseRepository
    employees_repo: EmployeeRepository
    payroll_repo: PayrollRepository
    income_repo: IncomeRepository

    calculator: PayrollCalculator

    auth_service: AuthService
    user_service: UserService
    category_service: CategoryService
    expense_service: ExpenseService
    employee_service: EmployeeService
    payroll_service: PayrollService
    income_service: IncomeService
    dashboard_service: DashboardService
    report_service: ReportService


def build_container(*, backend: str = SQL_BACKEND, db: Optional[SQLAlchemy] = None) -> Container:
    if backend == SQL_BACKEND:
        if db is None:
            raise ValueError("The sql storage backend needs a SQLAlchemy instance")
        users_repo = SqlUserRepository(db)
        categories_repo = SqlCategoryRepository(db)
        expenses_repo = SqlExpenseRepository(db)
        employees_repo = SqlEmployeeRepository(db)
        payroll_repo = SqlPayrollRepository(db)
        income_repo = SqlIncomeRepository(db)
    elif backend == MEMORY_BACKEND:
        users_repo = MemoryUserRepository()
        categories_repo = MemoryCategoryRepository()
        expenses_repo = MemoryExpenseRepository()
        employees_repo = MemoryEmployeeRepository()
        payroll_repo = MemoryPayrollRepository()
        income_repo = MemoryIncomeRepository()
    else:
        raise ValueError(f"Unknown storage backend: {backend!r}")

    calculator = StandardPayrollCalculator()

    return Container(
        users_repo=users_repo,
        categories_repo=categories_repo,
        expenses_repo=expenses_repo,
        employees_repo=employees_repo,
        payroll_repo=payroll_repo,
        income_repo=income_repo,
        calculator=calculator,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo, expenses=expenses_repo, income=income_repo, payroll=payroll_repo),
        category_service=CategoryService(categories_repo, expenses_repo),
        expense_service=ExpenseService(expenses_repo, categories_repo, users_repo),
        employee_service=EmployeeService(employees_repo, payroll_repo),
        payroll_service=PayrollService(payroll_repo, employees_repo, users_repo, calculator=calculator),
        income_service=IncomeService(income_repo, users_repo),
        dashboard_service=DashboardService(income_repo, expenses_repo, categories_repo, payroll_repo),
        report_service=ReportService(income_repo, expenses_repo, categories_repo, payroll_repo, employees_repo),
    )
