from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import format_amount
from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class PayrollData:
    employee_id: int
    user_id: int
    pay_period_start: date
    pay_period_end: date
    gross_amount: Decimal
    deductions: Decimal
    net_amount: Decimal
    processed_on: date
    notes: Optional[str] = None
    status: PayrollStatus = PayrollStatus.PENDING


@dataclass(frozen=True)
class PayrollRecord:
    """Gross/net payment snapshot for one employee for one pay period."""

    id: int
    employee_id: int
    user_id: int
    pay_period_start: date
    pay_period_end: date
    gross_amount: Decimal
    deductions: Decimal
    net_amount: Decimal
    processed_on: date
    notes: Optional[str] = None
    status: PayrollStatus = PayrollStatus.PENDING

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "userId": self.user_id,
            "payPeriodStart": self.pay_period_start.isoformat(),
            "payPeriodEnd": self.pay_period_end.isoformat(),
            "grossAmount": format_amount(self.gross_amount),
            "deductions": format_amount(self.deductions),
            "netAmount": format_amount(self.net_amount),
            "processedOn": self.processed_on.isoformat(),
            "notes": self.notes,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class PayBreakdown:
    """Calculator output for one pay period."""

    gross_amount: Decimal
    deductions: Decimal
    net_amount: Decimal
