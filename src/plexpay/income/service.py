from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.constants import MAX_PAGE_SIZE
from ..core.exceptions import NotFoundError, ValidationError
from ..logging_utils import get_logger
from ..users.repository import UserRepository
from .model import IncomeData, IncomePage, IncomeRecord
from .repository import IncomeRepository

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class IncomeInput:
    source: str
    amount: Decimal
    occurred_on: date
    description: Optional[str] = None
    user_id: Optional[int] = None


class IncomeService:
    def __init__(self, income: IncomeRepository, users: UserRepository):
        self._income = income
        self._users = users

    def list_records(self) -> Sequence[IncomeRecord]:
        return self._income.list_all()

    def list_page(self, *, page: int, limit: int) -> IncomePage:
        if page < 1:
            raise ValidationError("page must be >= 1")
        if limit < 1 or limit > MAX_PAGE_SIZE:
            raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}")
        rows, total = self._income.list_page(offset=(page - 1) * limit, limit=limit)
        return IncomePage(data=rows, total=total, page=page, limit=limit)

    def get_record(self, record_id: int) -> IncomeRecord:
        record = self._income.get_by_id(record_id)
        if not record:
            raise NotFoundError("Income record", record_id)
        return record

    def _to_data(self, payload: IncomeInput, *, current_user_id: Optional[int]) -> IncomeData:
        user_id = payload.user_id or current_user_id
        if not user_id:
            raise ValidationError("userId is required")
        if not self._users.get_by_id(user_id):
            raise ValidationError(f"User {user_id} does not exist")

        return IncomeData(
            source=require_non_empty(payload.source, "Source"),
            amount=payload.amount,
            occurred_on=payload.occurred_on,
            description=optional_text(payload.description),
            user_id=int(user_id),
        )

    def create_record(self, payload: IncomeInput, *, current_user_id: Optional[int] = None) -> IncomeRecord:
        record = self._income.create(self._to_data(payload, current_user_id=current_user_id))
        LOGGER.info("Recorded income %s from %s (%s)", record.id, record.source, record.amount)
        return record

    def update_record(
        self, record_id: int, payload: IncomeInput, *, current_user_id: Optional[int] = None
    ) -> IncomeRecord:
        self.get_record(record_id)
        updated = self._income.update(record_id, self._to_data(payload, current_user_id=current_user_id))
        if not updated:
            raise NotFoundError("Income record", record_id)
        return updated

    def delete_record(self, record_id: int) -> None:
        if not self._income.delete_by_id(record_id):
            raise NotFoundError("Income record", record_id)
