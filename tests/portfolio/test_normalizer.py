"""Tests for the record normalizer."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.common.models import AssociationRole, ContactType, Watch
from src.portfolio.normalizer import (
    RecordNormalizer,
    amount_or_zero,
    coerce_amount,
    coerce_date,
)


class TestCoerceAmount:
    """Numeric coercion: malformed means absent."""

    @pytest.mark.parametrize("value,expected", [
        (100, 100.0),
        (99.5, 99.5),
        (Decimal("1200.50"), 1200.5),
        ("9000.00", 9000.0),
        ("  42 ", 42.0),
        (0, 0.0),
    ])
    def test_numeric_values(self, value, expected):
        assert coerce_amount(value) == expected

    @pytest.mark.parametrize("value", [
        None, "", "   ", "abc", "12,000", True, float("nan"), float("inf"), [1], {},
    ])
    def test_absent_or_malformed(self, value):
        assert coerce_amount(value) is None

    def test_amount_or_zero(self):
        assert amount_or_zero(None) == 0.0
        assert amount_or_zero(12.5) == 12.5


class TestCoerceDate:
    def test_iso_string(self):
        assert coerce_date("2024-01-31") == date(2024, 1, 31)

    def test_timestamp_string_uses_date_part(self):
        assert coerce_date("2024-03-15T00:00:00.000Z") == date(2024, 3, 15)

    def test_datetime_and_date(self):
        assert coerce_date(datetime(2024, 5, 1, 13, 30)) == date(2024, 5, 1)
        assert coerce_date(date(2024, 5, 1)) == date(2024, 5, 1)

    @pytest.mark.parametrize("value", [None, "", "not a date", "2024-13-01", 20240101])
    def test_absent_or_malformed(self, value):
        assert coerce_date(value) is None


class TestRecordNormalizer:
    def test_normalize_api_row(self, sample_watch_rows):
        watch = RecordNormalizer().normalize_watch(sample_watch_rows[0])
        assert watch.id == "1"
        assert watch.purchase_price == 9000.0
        assert watch.accessories_cost == 200.0
        assert watch.taxes is None
        assert watch.in_date == date(2024, 1, 1)
        assert watch.buyer_contact_id == "10"

    def test_malformed_fields_become_absent(self):
        watch = RecordNormalizer().normalize_watch({
            "id": "x",
            "purchasePrice": "n/a",
            "priceSold": "",
            "dateSold": "someday",
            "inDate": "2024-01-01",
            "watchSet": "Box Only",
        })
        assert watch.purchase_price is None
        assert watch.price_sold is None
        assert watch.date_sold is None
        assert watch.in_date == date(2024, 1, 1)
        assert watch.watch_set is None
        assert not watch.is_sold

    def test_missing_fields_do_not_raise(self):
        watch = RecordNormalizer().normalize_watch({"id": "bare"})
        assert watch.purchase_price is None
        assert watch.brand == ""

    def test_watch_instances_pass_through(self):
        original = Watch(id="w", purchase_price=10)
        assert RecordNormalizer().normalize_watch(original) is original

    def test_input_mapping_not_mutated(self, sample_watch_rows):
        row = dict(sample_watch_rows[0])
        snapshot = dict(row)
        RecordNormalizer().normalize_watch(row)
        assert row == snapshot

    def test_normalize_watches_keeps_order(self, sample_watch_rows):
        watches = RecordNormalizer().normalize_watches(sample_watch_rows)
        assert [w.id for w in watches] == ["1", "2", "3", "4"]

    def test_unknown_association_role_is_dropped(self):
        associations = RecordNormalizer().normalize_associations([
            {"watchId": 1, "role": "Buyer"},
            {"watchId": 2, "role": "Broker"},
            {"watch_id": 3, "role": "Seller", "contact_id": 9},
        ])
        assert [a.watch_id for a in associations] == ["1", "3"]
        assert associations[1].role == AssociationRole.SELLER
        assert associations[1].contact_id == "9"

    def test_normalize_contact(self):
        contact = RecordNormalizer().normalize_contact({
            "id": 7,
            "first_name": "Sam",
            "contact_type": "Broker",
            "watch_associations": [
                {"watch_id": 1, "role": "Seller"},
                {"watch_id": 2, "role": "?"},
            ],
        })
        assert contact.id == "7"
        assert contact.contact_type is None
        assert len(contact.watch_associations) == 1

    def test_valid_contact_type_kept(self):
        contact = RecordNormalizer().normalize_contact({"id": 1, "contactType": "Jeweler"})
        assert contact.contact_type == ContactType.JEWELER
