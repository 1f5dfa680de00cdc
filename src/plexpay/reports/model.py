from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.money import format_amount
from ..expenses.model import Expense
from ..income.model import IncomeRecord
from ..payroll.model import PayrollRecord
from .aggregation import DepartmentTotals, MonthTotals, Transaction


@dataclass(frozen=True)
class DashboardMetrics:
    total_income: Decimal
    total_expenses: Decimal
    current_balance: Decimal
    pending_payroll: Decimal

    def as_dict(self) -> dict:
        return {
            "totalIncome": format_amount(self.total_income),
            "totalExpenses": format_amount(self.total_expenses),
            "currentBalance": format_amount(self.current_balance),
            "pendingPayroll": format_amount(self.pending_payroll),
        }


@dataclass(frozen=True)
class Dashboard:
    metrics: DashboardMetrics
    recent_transactions: Sequence[Transaction]
    expenses_by_category: dict[int, Decimal]
    monthly_data: Sequence[MonthTotals]

    def as_dict(self) -> dict:
        return {
            "metrics": self.metrics.as_dict(),
            "recentTransactions": [t.as_dict() for t in self.recent_transactions],
            "expensesByCategory": {str(k): format_amount(v) for k, v in self.expenses_by_category.items()},
            "monthlyData": [m.as_dict() for m in self.monthly_data],
        }


@dataclass(frozen=True)
class Period:
    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def bounded(self) -> bool:
        return self.start is not None and self.end is not None

    def label(self) -> str:
        if not self.bounded:
            return "All dates"
        return f"{self.start.isoformat()} to {self.end.isoformat()}"


@dataclass(frozen=True)
class FinancialReport:
    period: Period
    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    income: Sequence[IncomeRecord]
    expenses: Sequence[Expense]

    def as_dict(self) -> dict:
        return {
            "totalIncome": format_amount(self.total_income),
            "totalExpenses": format_amount(self.total_expenses),
            "netProfit": format_amount(self.net_profit),
            "income": [r.as_dict() for r in self.income],
            "expenses": [e.as_dict() for e in self.expenses],
        }


@dataclass(frozen=True)
class ExpenseLine:
    expense: Expense
    category_name: str

    def as_dict(self) -> dict:
        return {**self.expense.as_dict(), "categoryName": self.category_name}


@dataclass(frozen=True)
class CategoryTotals:
    category_id: int
    category_name: str
    total: Decimal
    count: int

    def as_dict(self) -> dict:
        return {
            "categoryId": self.category_id,
            "categoryName": self.category_name,
            "total": format_amount(self.total),
            "count": self.count,
        }


@dataclass(frozen=True)
class ExpenseReport:
    period: Period
    expenses: Sequence[ExpenseLine]
    expenses_by_category: Sequence[CategoryTotals]
    total_amount: Decimal

    def as_dict(self) -> dict:
        return {
            "expenses": [line.as_dict() for line in self.expenses],
            "expensesByCategory": [c.as_dict() for c in self.expenses_by_category],
            "totalAmount": format_amount(self.total_amount),
        }


@dataclass(frozen=True)
class PayrollLine:
    record: PayrollRecord
    employee_name: str
    position: str
    department: str

    def as_dict(self) -> dict:
        return {
            **self.record.as_dict(),
            "employeeName": self.employee_name,
            "position": self.position,
            "department": self.department,
        }


@dataclass(frozen=True)
class PayrollReport:
    period: Period
    payroll_records: Sequence[PayrollLine]
    total_gross_amount: Decimal
    total_deductions: Decimal
    total_net_amount: Decimal
    payroll_by_department: Sequence[DepartmentTotals]

    def as_dict(self) -> dict:
        return {
            "payrollRecords": [line.as_dict() for line in self.payroll_records],
            "totalGrossAmount": format_amount(self.total_gross_amount),
            "totalDeductions": format_amount(self.total_deductions),
            "totalNetAmount": format_amount(self.total_net_amount),
            "payrollByDepartment": [d.as_dict() for d in self.payroll_by_department],
        }
