from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import format_amount


@dataclass(frozen=True)
class ExpenseCategory:
    """Label used to group expenses for reporting."""

    id: int
    name: str
    description: Optional[str] = None

    def as_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class CategoryData:
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class ExpenseData:
    description: str
    amount: Decimal
    occurred_on: date
    category_id: int
    user_id: int
    notes: Optional[str] = None
    receipt: Optional[str] = None


@dataclass(frozen=True)
class Expense:
    id: int
    description: str
    amount: Decimal
    occurred_on: date
    category_id: int
    user_id: int
    notes: Optional[str] = None
    receipt: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "amount": format_amount(self.amount),
            "date": self.occurred_on.isoformat(),
            "categoryId": self.category_id,
            "userId": self.user_id,
            "notes": self.notes,
            "receipt": self.receipt,
        }
