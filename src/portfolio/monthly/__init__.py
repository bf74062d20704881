"""Monthly Aggregator Module - Realized profit per calendar month."""

from .aggregator import aggregate_by_month, available_years, filter_buckets
from .models import MonthlyBucket

__all__ = [
    "aggregate_by_month",
    "available_years",
    "filter_buckets",
    "MonthlyBucket",
]
