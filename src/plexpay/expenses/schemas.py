from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import Amount, Day, RequestSchema


class CategoryIn(RequestSchema):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None


class ExpenseIn(RequestSchema):
    description: str = Field(min_length=1, max_length=255)
    amount: Amount
    date: Day
    category_id: int = Field(gt=0)
    # Defaults to the logged-in user
    user_id: Optional[int] = Field(default=None, gt=0)
    notes: Optional[str] = None
    receipt: Optional[str] = None
