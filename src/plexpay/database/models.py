"""SQLAlchemy table mappings.

Pure persistence classes; services never see them. Each SQL repository
converts rows into the frozen domain dataclasses of its feature package.
"""
from __future__ import annotations

from ..core.enums import PayrollStatus, Role
from ..extensions import db

MONEY = db.Numeric(12, 2)


class UserModel(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default=Role.STAFF.value)


class ExpenseCategoryModel(db.Model):
    __tablename__ = "expense_categories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)


class ExpenseModel(db.Model):
    __tablename__ = "expenses"

    id = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.String(255), nullable=False)
    amount = db.Column(MONEY, nullable=False)
    occurred_on = db.Column("date", db.Date, nullable=False, index=True)
    category_id = db.Column(db.Integer, db.ForeignKey("expense_categories.id"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    notes = db.Column(db.Text)
    receipt = db.Column(db.Text)


class EmployeeModel(db.Model):
    __tablename__ = "employees"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    position = db.Column(db.String(100), nullable=False)
    department = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone_number = db.Column(db.String(50))
    address = db.Column(db.String(255))
    salary = db.Column(MONEY, nullable=False)
    date_hired = db.Column(db.Date, nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)


class PayrollRecordModel(db.Model):
    __tablename__ = "payroll_records"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    pay_period_start = db.Column(db.Date, nullable=False)
    pay_period_end = db.Column(db.Date, nullable=False)
    gross_amount = db.Column(MONEY, nullable=False)
    deductions = db.Column(MONEY, nullable=False)
    net_amount = db.Column(MONEY, nullable=False)
    processed_on = db.Column(db.Date, nullable=False, index=True)
    notes = db.Column(db.Text)
    status = db.Column(db.String(20), nullable=False, default=PayrollStatus.PENDING.value)


class IncomeRecordModel(db.Model):
    __tablename__ = "income_records"

    id = db.Column(db.Integer, primary_key=True)
    source = db.Column(db.String(255), nullable=False)
    amount = db.Column(MONEY, nullable=False)
    occurred_on = db.Column("date", db.Date, nullable=False, index=True)
    description = db.Column(db.Text)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
