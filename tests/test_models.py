"""
Unit tests for the Transaction record
"""
import math

import pytest

from ledger_ocr.common.exceptions import InvalidTransactionError
from ledger_ocr.common.models import Transaction, update_transaction_in_list


def make_transaction(**overrides):
    fields = dict(
        id="parsed-1-1",
        date="2025-08-01",
        amount=-29.99,
        description="Duży Ben",
        category="Entertainment",
        merchant="Duży Ben",
    )
    fields.update(overrides)
    return Transaction(**fields)


class TestInvariants:

    @pytest.mark.parametrize("overrides,field", [
        ({"amount": 0}, "amount"),
        ({"amount": math.nan}, "amount"),
        ({"amount": "12,00"}, "amount"),
        ({"category": "Groceries"}, "category"),
        ({"merchant": ""}, "merchant"),
        ({"date": "01.08.2025"}, "date"),
        ({"date": "2025-02-30"}, "date"),
        ({"description": "x" * 101}, "description"),
    ])
    def test_invalid_field(self, overrides, field):
        with pytest.raises(InvalidTransactionError) as exc_info:
            make_transaction(**overrides)
        assert exc_info.value.field == field

    def test_valid_record(self):
        t = make_transaction(description="x" * 100)
        assert len(t.description) == 100

    def test_records_are_immutable(self):
        t = make_transaction()
        with pytest.raises(AttributeError):
            t.amount = -1.0


class TestUpdates:

    def test_with_updates_returns_new_record(self):
        original = make_transaction()
        updated = original.with_updates(category="Food", amount=-30.0)

        assert updated.category == "Food"
        assert updated.amount == -30.0
        assert original.category == "Entertainment"

    def test_id_cannot_change(self):
        assert make_transaction().with_updates(id="other").id == "parsed-1-1"

    def test_updates_are_validated(self):
        with pytest.raises(InvalidTransactionError):
            make_transaction().with_updates(category="Groceries")

    def test_unknown_field(self):
        with pytest.raises(TypeError):
            make_transaction().with_updates(colour="red")

    def test_update_in_list(self):
        first = make_transaction(id="a")
        second = make_transaction(id="b")

        result = update_transaction_in_list([first, second], "b", {"merchant": "Kino"})

        assert result[0] is first
        assert result[1].merchant == "Kino"
        assert second.merchant == "Duży Ben"

    def test_update_unknown_id(self):
        records = [make_transaction(id="a")]
        assert update_transaction_in_list(records, "zzz", {"merchant": "Kino"}) == records

    def test_to_dict(self):
        assert make_transaction().to_dict() == {
            'id': "parsed-1-1",
            'date': "2025-08-01",
            'amount': -29.99,
            'description': "Duży Ben",
            'category': "Entertainment",
            'merchant': "Duży Ben",
        }
