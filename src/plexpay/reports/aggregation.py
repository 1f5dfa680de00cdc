"""Pure aggregation helpers behind the dashboard and the reports.

Everything here works on already-loaded records; no repository access.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import in_range
from ..common.money import ZERO, format_amount, quantize, sum_amounts
from ..core.constants import MONTHS_PER_YEAR, RECENT_TRANSACTIONS_LIMIT, UNKNOWN_LABEL
from ..core.enums import PayrollStatus, TransactionType
from ..employees.model import Employee
from ..expenses.model import Expense, ExpenseCategory
from ..income.model import IncomeRecord
from ..payroll.model import PayrollRecord


@dataclass(frozen=True)
class Transaction:
    id: str
    type: TransactionType
    description: str
    category: str
    occurred_on: date
    amount: Decimal

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "description": self.description,
            "category": self.category,
            "date": self.occurred_on.isoformat(),
            "amount": format_amount(self.amount),
        }


@dataclass(frozen=True)
class MonthTotals:
    month: int
    income: Decimal
    expenses: Decimal

    def as_dict(self) -> dict:
        return {
            "month": self.month,
            "income": format_amount(self.income),
            "expenses": format_amount(self.expenses),
        }


@dataclass(frozen=True)
class DepartmentTotals:
    department: str
    total_gross: Decimal
    total_net: Decimal
    count: int

    def as_dict(self) -> dict:
        return {
            "department": self.department,
            "totalGross": format_amount(self.total_gross),
            "totalNet": format_amount(self.total_net),
            "count": self.count,
        }


def total_income(records: Iterable[IncomeRecord]) -> Decimal:
    return sum_amounts(r.amount for r in records)


def total_expenses(expenses: Iterable[Expense]) -> Decimal:
    return sum_amounts(e.amount for e in expenses)


def pending_payroll(records: Iterable[PayrollRecord]) -> Decimal:
    return sum_amounts(r.net_amount for r in records if r.status == PayrollStatus.PENDING)


def filter_by_date(rows: Iterable, start: Optional[date], end: Optional[date], *, attr: str = "occurred_on") -> list:
    return [r for r in rows if in_range(getattr(r, attr), start, end)]


def monthly_series(
    income: Iterable[IncomeRecord], expenses: Iterable[Expense], *, year: int
) -> list[MonthTotals]:
    """Per-month income/expense sums for ``year``; other years are ignored."""
    income_by_month = [ZERO] * MONTHS_PER_YEAR
    expenses_by_month = [ZERO] * MONTHS_PER_YEAR

    for r in income:
        if r.occurred_on.year == year:
            income_by_month[r.occurred_on.month - 1] += r.amount
    for e in expenses:
        if e.occurred_on.year == year:
            expenses_by_month[e.occurred_on.month - 1] += e.amount

    return [
        MonthTotals(month=i + 1, income=quantize(income_by_month[i]), expenses=quantize(expenses_by_month[i]))
        for i in range(MONTHS_PER_YEAR)
    ]


def expenses_by_category(expenses: Iterable[Expense]) -> dict[int, Decimal]:
    totals: dict[int, Decimal] = {}
    for e in expenses:
        totals[e.category_id] = totals.get(e.category_id, ZERO) + e.amount
    return {k: quantize(v) for k, v in totals.items()}


def recent_transactions(
    income: Iterable[IncomeRecord],
    expenses: Iterable[Expense],
    categories: Mapping[int, ExpenseCategory],
    *,
    limit: int = RECENT_TRANSACTIONS_LIMIT,
) -> list[Transaction]:
    """Income and expenses merged, newest first. Expense amounts are negative."""
    merged: list[Transaction] = [
        Transaction(
            id=f"income-{r.id}",
            type=TransactionType.INCOME,
            description=r.source,
            category="Income",
            occurred_on=r.occurred_on,
            amount=r.amount,
        )
        for r in income
    ]
    for e in expenses:
        category = categories.get(e.category_id)
        merged.append(
            Transaction(
                id=f"expense-{e.id}",
                type=TransactionType.EXPENSE,
                description=e.description,
                category=category.name if category else str(e.category_id),
                occurred_on=e.occurred_on,
                amount=-e.amount,
            )
        )

    # stable sort keeps insertion order for same-day rows
    merged.sort(key=lambda t: t.occurred_on, reverse=True)
    return merged[:limit]


def payroll_by_department(
    records: Iterable[PayrollRecord], employees: Mapping[int, Employee]
) -> list[DepartmentTotals]:
    """Group payroll by the employee's department in first-seen order."""
    groups: dict[str, list[Decimal]] = {}
    counts: dict[str, int] = {}

    for r in records:
        employee = employees.get(r.employee_id)
        department = employee.department if employee else UNKNOWN_LABEL
        gross_net = groups.setdefault(department, [ZERO, ZERO])
        gross_net[0] += r.gross_amount
        gross_net[1] += r.net_amount
        counts[department] = counts.get(department, 0) + 1

    return [
        DepartmentTotals(department=d, total_gross=quantize(g), total_net=quantize(n), count=counts[d])
        for d, (g, n) in groups.items()
    ]


def index_by_id(rows: Sequence) -> dict:
    return {r.id: r for r in rows}
