from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorisation checks."""

    ADMIN = "admin"
    STAFF = "staff"


class PayrollStatus(str, Enum):
    """Lifecycle of a payroll record."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class ExportFormat(str, Enum):
    XLSX = "xlsx"
    PDF = "pdf"
