"""Contact Metrics Module - Buy/sell relationship summary per contact."""

from .calculator import ContactMetricsCalculator, associations_from_records, summarize
from .models import ContactMetrics, DealStats, FavoriteBrand, RelationshipStats

__all__ = [
    "ContactMetricsCalculator",
    "associations_from_records",
    "summarize",
    "ContactMetrics",
    "DealStats",
    "FavoriteBrand",
    "RelationshipStats",
]
