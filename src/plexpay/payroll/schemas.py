from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import Amount, Day, RequestSchema
from ..core.enums import PayrollStatus


class PayrollIn(RequestSchema):
    employee_id: int = Field(gt=0)
    user_id: Optional[int] = Field(default=None, gt=0)
    pay_period_start: Day
    pay_period_end: Day
    gross_amount: Amount
    deductions: Amount
    net_amount: Amount
    processed_on: Day
    notes: Optional[str] = None
    status: PayrollStatus = PayrollStatus.PENDING


class ProcessPayrollIn(RequestSchema):
    pay_period_start: Day
    pay_period_end: Day
    processed_on: Optional[Day] = None
    employee_ids: Optional[list[int]] = None
    notes: Optional[str] = None
