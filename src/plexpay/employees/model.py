from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import format_amount


@dataclass(frozen=True)
class EmployeeData:
    name: str
    position: str
    department: str
    email: str
    salary: Decimal
    date_hired: date
    phone_number: Optional[str] = None
    address: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class Employee:
    """Domain entity: a person on the payroll. ``salary`` is annual."""

    id: int
    name: str
    position: str
    department: str
    email: str
    salary: Decimal
    date_hired: date
    phone_number: Optional[str] = None
    address: Optional[str] = None
    is_active: bool = True

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "department": self.department,
            "email": self.email,
            "phoneNumber": self.phone_number,
            "address": self.address,
            "salary": format_amount(self.salary),
            "dateHired": self.date_hired.isoformat(),
            "isActive": self.is_active,
        }
