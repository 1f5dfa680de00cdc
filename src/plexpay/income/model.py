from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.money import format_amount


@dataclass(frozen=True)
class IncomeData:
    source: str
    amount: Decimal
    occurred_on: date
    user_id: int
    description: Optional[str] = None


@dataclass(frozen=True)
class IncomeRecord:
    id: int
    source: str
    amount: Decimal
    occurred_on: date
    user_id: int
    description: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "source": self.source,
            "amount": format_amount(self.amount),
            "date": self.occurred_on.isoformat(),
            "description": self.description,
            "userId": self.user_id,
        }


@dataclass(frozen=True)
class IncomePage:
    data: Sequence[IncomeRecord]
    total: int
    page: int
    limit: int

    def as_dict(self) -> dict:
        return {
            "data": [r.as_dict() for r in self.data],
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
        }
