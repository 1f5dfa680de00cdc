from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import Amount, Day, RequestSchema


class EmployeeIn(RequestSchema):
    name: str = Field(min_length=1, max_length=100)
    position: str = Field(min_length=1, max_length=100)
    department: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone_number: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None, max_length=255)
    salary: Amount
    date_hired: Day
    is_active: bool = True
