from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..common.money import quantize, sum_amounts
from ..core.constants import UNKNOWN_LABEL
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..expenses.category_repository import CategoryRepository
from ..expenses.repository import ExpenseRepository
from ..income.repository import IncomeRepository
from ..payroll.repository import PayrollRepository
from . import aggregation as agg
from .model import (
    CategoryTotals,
    Dashboard,
    DashboardMetrics,
    ExpenseLine,
    ExpenseReport,
    FinancialReport,
    PayrollLine,
    PayrollReport,
    Period,
)


def _period(start: Optional[date], end: Optional[date]) -> Period:
    if start and end and end < start:
        raise ValidationError("endDate must not be before startDate")
    return Period(start=start, end=end)


class DashboardService:
    def __init__(
        self,
        income: IncomeRepository,
        expenses: ExpenseRepository,
        categories: CategoryRepository,
        payroll: PayrollRepository,
    ):
        self._income = income
        self._expenses = expenses
        self._categories = categories
        self._payroll = payroll

    def build_dashboard(self, *, today: Optional[date] = None) -> Dashboard:
        today = today or today_local()
        income = self._income.list_all()
        expenses = self._expenses.list_all()

        total_income = agg.total_income(income)
        total_expenses = agg.total_expenses(expenses)
        metrics = DashboardMetrics(
            total_income=total_income,
            total_expenses=total_expenses,
            current_balance=quantize(total_income - total_expenses),
            pending_payroll=agg.pending_payroll(self._payroll.list_all()),
        )

        return Dashboard(
            metrics=metrics,
            recent_transactions=agg.recent_transactions(
                income, expenses, agg.index_by_id(self._categories.list_all())
            ),
            expenses_by_category=agg.expenses_by_category(expenses),
            monthly_data=agg.monthly_series(income, expenses, year=today.year),
        )


class ReportService:
    """Financial, expense and payroll reports.

    Date filters are inclusive and only applied when both bounds are given.
    """

    def __init__(
        self,
        income: IncomeRepository,
        expenses: ExpenseRepository,
        categories: CategoryRepository,
        payroll: PayrollRepository,
        employees: EmployeeRepository,
    ):
        self._income = income
        self._expenses = expenses
        self._categories = categories
        self._payroll = payroll
        self._employees = employees

    def financial_report(self, *, start: Optional[date] = None, end: Optional[date] = None) -> FinancialReport:
        period = _period(start, end)
        income = agg.filter_by_date(self._income.list_all(), period.start, period.end)
        expenses = agg.filter_by_date(self._expenses.list_all(), period.start, period.end)

        total_income = agg.total_income(income)
        total_expenses = agg.total_expenses(expenses)
        return FinancialReport(
            period=period,
            total_income=total_income,
            total_expenses=total_expenses,
            net_profit=quantize(total_income - total_expenses),
            income=income,
            expenses=expenses,
        )

    def expense_report(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        category_id: Optional[int] = None,
    ) -> ExpenseReport:
        period = _period(start, end)
        expenses = agg.filter_by_date(self._expenses.list_all(), period.start, period.end)
        if category_id is not None:
            expenses = [e for e in expenses if e.category_id == category_id]

        categories = self._categories.list_all()
        names = {c.id: c.name for c in categories}
        lines = [ExpenseLine(expense=e, category_name=names.get(e.category_id, UNKNOWN_LABEL)) for e in expenses]

        # every category is listed, zero totals included
        breakdown = []
        for c in categories:
            matching = [e for e in expenses if e.category_id == c.id]
            breakdown.append(
                CategoryTotals(
                    category_id=c.id,
                    category_name=c.name,
                    total=sum_amounts(e.amount for e in matching),
                    count=len(matching),
                )
            )

        return ExpenseReport(
            period=period,
            expenses=lines,
            expenses_by_category=breakdown,
            total_amount=agg.total_expenses(expenses),
        )

    def payroll_report(self, *, start: Optional[date] = None, end: Optional[date] = None) -> PayrollReport:
        period = _period(start, end)
        records = agg.filter_by_date(self._payroll.list_all(), period.start, period.end, attr="processed_on")
        employees = agg.index_by_id(self._employees.list_all())

        lines = []
        for r in records:
            employee = employees.get(r.employee_id)
            lines.append(
                PayrollLine(
                    record=r,
                    employee_name=employee.name if employee else UNKNOWN_LABEL,
                    position=employee.position if employee else UNKNOWN_LABEL,
                    department=employee.department if employee else UNKNOWN_LABEL,
                )
            )

        return PayrollReport(
            period=period,
            payroll_records=lines,
            total_gross_amount=sum_amounts(r.gross_amount for r in records),
            total_deductions=sum_amounts(r.deductions for r in records),
            total_net_amount=sum_amounts(r.net_amount for r in records),
            payroll_by_department=agg.payroll_by_department(records, employees),
        )
