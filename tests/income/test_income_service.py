from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from plexpay.core.exceptions import NotFoundError, ValidationError
from plexpay.income.service import IncomeInput


def _income(day, amount="1000.00", source="Client retainer"):
    return IncomeInput(source=source, amount=Decimal(amount), occurred_on=day)


@pytest.fixture
def five_records(container, admin):
    return [
        container.income_service.create_record(_income(date(2024, m, 1)), current_user_id=admin.id)
        for m in (1, 5, 3, 2, 4)
    ]


def test_user_id_defaults_to_current_user(container, admin):
    record = container.income_service.create_record(_income(date(2024, 1, 1)), current_user_id=admin.id)
    assert record.user_id == admin.id
    assert record.as_dict()["userId"] == admin.id


def test_user_id_required_without_session(container):
    with pytest.raises(ValidationError, match="userId"):
        container.income_service.create_record(_income(date(2024, 1, 1)))


def test_records_listed_by_date_desc(container, five_records):
    months = [r.occurred_on.month for r in container.income_service.list_records()]
    assert months == [5, 4, 3, 2, 1]


def test_pagination(container, five_records):
    page = container.income_service.list_page(page=2, limit=2)
    assert page.total == 5
    assert [r.occurred_on.month for r in page.data] == [3, 2]

    last = container.income_service.list_page(page=3, limit=2).as_dict()
    assert len(last["data"]) == 1
    assert last["total"] == 5


@pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (1, 1000)])
def test_pagination_bounds(container, page, limit):
    with pytest.raises(ValidationError):
        container.income_service.list_page(page=page, limit=limit)


def test_delete_then_get_is_not_found(container, five_records):
    target = five_records[0]
    container.income_service.delete_record(target.id)
    with pytest.raises(NotFoundError, match="Income record not found"):
        container.income_service.get_record(target.id)
