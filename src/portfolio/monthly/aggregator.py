"""Monthly profit aggregation.

Groups realized profit by the calendar month of the sale date. Buckets are
built fresh on every call; months without sales are simply absent, so
callers must not assume contiguous coverage.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from ..metrics.models import AnnotatedWatch
from .models import MonthlyBucket

logger = logging.getLogger(__name__)


def aggregate_by_month(records: Iterable[AnnotatedWatch]) -> list[MonthlyBucket]:
    """Sum net profit and count sales per ``YYYY-MM`` period.

    Only watches with a sale date, sale price and purchase price contribute.

    Returns:
        Buckets sorted ascending by period (chronological for YYYY-MM keys).
    """
    groups: dict[str, list[float]] = {}
    for record in records:
        if not record.is_sellable_and_sold:
            continue
        period = record.watch.date_sold.isoformat()[:7]
        groups.setdefault(period, []).append(record.net_profit)

    # fsum keeps the totals independent of input order
    buckets = [
        MonthlyBucket(period=period, profit=math.fsum(profits), count=len(profits))
        for period, profits in sorted(groups.items())
    ]
    logger.debug("Monthly aggregation: %d periods", len(buckets))
    return buckets


def filter_buckets(
    buckets: Iterable[MonthlyBucket],
    year: int | None = None,
    month: int | None = None,
) -> list[MonthlyBucket]:
    """Narrow buckets to a year and optionally a month (1-12).

    A month without a year is ignored, matching the dashboard where the
    month picker is disabled under "All Time".
    """
    result = list(buckets)
    if year is None:
        return result
    result = [b for b in result if b.year == year]
    if month is not None:
        result = [b for b in result if b.month == month]
    return result


def available_years(buckets: Iterable[MonthlyBucket]) -> list[int]:
    return sorted({b.year for b in buckets})
