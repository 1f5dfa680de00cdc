from __future__ import annotations

from decimal import Decimal

from ...common.money import quantize, to_decimal
from ...core.constants import MONTHS_PER_YEAR, STANDARD_DEDUCTION_RATE
from ...employees.model import Employee
from ..model import PayBreakdown
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: gross = salary / 12, flat-rate deductions, net = gross - deductions."""

    def __init__(self, deduction_rate: Decimal = STANDARD_DEDUCTION_RATE):
        rate = to_decimal(deduction_rate)
        if rate < 0 or rate > 1:
            raise ValueError("deduction_rate must be between 0 and 1")
        self._rate = rate

    def monthly_pay(self, employee: Employee) -> PayBreakdown:
        gross = quantize(to_decimal(employee.salary) / MONTHS_PER_YEAR)
        deductions = quantize(gross * self._rate)
        return PayBreakdown(gross_amount=gross, deductions=deductions, net_amount=gross - deductions)
