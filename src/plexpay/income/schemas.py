from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import Amount, Day, RequestSchema


class IncomeIn(RequestSchema):
    source: str = Field(min_length=1, max_length=255)
    amount: Amount
    date: Day
    description: Optional[str] = None
    user_id: Optional[int] = Field(default=None, gt=0)
