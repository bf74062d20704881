"""Tests for monthly profit aggregation."""

from __future__ import annotations

import random
from datetime import date

from src.portfolio.metrics import MetricsCalculator
from src.portfolio.monthly import (
    MonthlyBucket,
    aggregate_by_month,
    available_years,
    filter_buckets,
)


def _annotate(watches):
    return MetricsCalculator().annotate_all(watches)


class TestAggregateByMonth:
    def test_groups_and_sorts(self, sample_watches):
        buckets = aggregate_by_month(_annotate(sample_watches))
        assert [b.to_dict() for b in buckets] == [
            {"period": "2023-12", "profit": 600, "count": 1},
            {"period": "2024-01", "profit": 1450, "count": 1},
            {"period": "2024-03", "profit": 1050, "count": 1},
        ]

    def test_sums_within_month(self, make_watch):
        watches = [
            make_watch("a", purchase_price=100, price_sold=300, date_sold=date(2024, 5, 1)),
            make_watch("b", purchase_price=100, price_sold=150, date_sold=date(2024, 5, 30)),
            make_watch("c", purchase_price=500, price_sold=400, date_sold=date(2024, 5, 15)),
        ]
        (bucket,) = aggregate_by_month(_annotate(watches))
        assert bucket.period == "2024-05"
        assert bucket.profit == 150
        assert bucket.count == 3

    def test_requires_purchase_price(self, make_watch):
        watches = [make_watch("a", price_sold=1000, date_sold=date(2024, 5, 1))]
        assert aggregate_by_month(_annotate(watches)) == []

    def test_requires_sale_date_and_price(self, make_watch):
        watches = [
            make_watch("a", purchase_price=100, price_sold=300),
            make_watch("b", purchase_price=100, date_sold=date(2024, 5, 1)),
        ]
        assert aggregate_by_month(_annotate(watches)) == []

    def test_months_without_sales_are_absent(self, make_watch):
        watches = [
            make_watch("a", purchase_price=1, price_sold=2, date_sold=date(2024, 1, 1)),
            make_watch("b", purchase_price=1, price_sold=2, date_sold=date(2024, 4, 1)),
        ]
        periods = [b.period for b in aggregate_by_month(_annotate(watches))]
        assert periods == ["2024-01", "2024-04"]

    def test_order_independent_and_idempotent(self, make_watch):
        watches = [
            make_watch(str(i), purchase_price=100.1 * i, price_sold=133.7 * i,
                       fees=0.3, date_sold=date(2023 + i % 2, 1 + i % 12, 1 + i % 28))
            for i in range(1, 60)
        ]
        expected = aggregate_by_month(_annotate(watches))
        shuffled = list(watches)
        random.Random(7).shuffle(shuffled)
        assert aggregate_by_month(_annotate(shuffled)) == expected
        assert aggregate_by_month(_annotate(watches)) == expected

    def test_empty(self):
        assert aggregate_by_month([]) == []


class TestFilterBuckets:
    BUCKETS = [
        MonthlyBucket("2023-12", 600, 1),
        MonthlyBucket("2024-01", 1450, 1),
        MonthlyBucket("2024-03", 1050, 1),
    ]

    def test_all_time(self):
        assert filter_buckets(self.BUCKETS) == self.BUCKETS

    def test_by_year(self):
        assert [b.period for b in filter_buckets(self.BUCKETS, year=2024)] == ["2024-01", "2024-03"]

    def test_by_year_and_month(self):
        assert [b.period for b in filter_buckets(self.BUCKETS, year=2024, month=3)] == ["2024-03"]
        assert filter_buckets(self.BUCKETS, year=2024, month=2) == []

    def test_month_without_year_ignored(self):
        assert filter_buckets(self.BUCKETS, month=3) == self.BUCKETS

    def test_available_years(self):
        assert available_years(self.BUCKETS) == [2023, 2024]
