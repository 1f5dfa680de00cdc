from decimal import Decimal

import pytest
from pydantic import ValidationError as SchemaError

from plexpay.common.money import format_amount, quantize
from plexpay.expenses.schemas import ExpenseIn


def test_quantize_rounds_half_up():
    assert quantize("2.005") == Decimal("2.01")
    assert format_amount(0.1) == "0.10"


@pytest.mark.parametrize("value", ["abc", "1e30"])
def test_quantize_reports_bad_values_as_value_errors(value):
    with pytest.raises(ValueError):
        quantize(value)


@pytest.mark.parametrize("amount", ["1e30", "10000000000.00", -1, "NaN"])
def test_amount_outside_column_range_rejected(amount):
    with pytest.raises(SchemaError):
        ExpenseIn.model_validate({"description": "x", "amount": amount, "date": "2024-01-01", "categoryId": 1})


def test_largest_storable_amount_accepted():
    body = ExpenseIn.model_validate(
        {"description": "x", "amount": "9999999999.99", "date": "2024-01-01", "categoryId": 1}
    )
    assert body.amount == Decimal("9999999999.99")
