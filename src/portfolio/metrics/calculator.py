"""Per-record profit and hold-time calculator.

Formula: Net Profit = Price Sold − (Purchase Price + Accessories) − Fees − Shipping − Taxes

Every term defaults to 0 when absent, so a watch that has not been sold
yields a negative figure (pure cost). Callers aggregating realized profit
must filter on sold status themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from ...common.models import Watch
from ..normalizer import amount_or_zero
from .models import AnnotatedWatch, PortfolioSummary

logger = logging.getLogger(__name__)


def compute_net_profit(watch: Watch) -> float:
    """Net profit of a single watch; never fails."""
    total_in = amount_or_zero(watch.purchase_price) + amount_or_zero(watch.accessories_cost)
    return (
        amount_or_zero(watch.price_sold)
        - total_in
        - amount_or_zero(watch.fees)
        - amount_or_zero(watch.shipping)
        - amount_or_zero(watch.taxes)
    )


def compute_hold_time_days(in_date: date | None, sold_date: date | None) -> int | None:
    """Whole days between acquisition and sale.

    Returns None when either date is missing or when the sale is not strictly
    after the acquisition; a zero or negative hold is bad data, not a flip.
    """
    if in_date is None or sold_date is None:
        return None
    if sold_date <= in_date:
        return None
    return round((sold_date - in_date).total_seconds() / 86400)


class MetricsCalculator:
    """Annotate watches with derived metrics and summarize the portfolio.

    Usage:
        calc = MetricsCalculator()
        annotated = calc.annotate_all(watches)
        summary = calc.summarize(annotated)
        print(f"Total profit: ${summary.total_profit:,.0f}")
    """

    def annotate(self, watch: Watch) -> AnnotatedWatch:
        return AnnotatedWatch(
            watch=watch,
            net_profit=compute_net_profit(watch),
            hold_time_days=compute_hold_time_days(watch.in_date, watch.date_sold),
        )

    def annotate_all(self, watches: Iterable[Watch]) -> list[AnnotatedWatch]:
        annotated = [self.annotate(w) for w in watches]
        logger.debug("Annotated %d watches", len(annotated))
        return annotated

    def summarize(self, annotated: Iterable[AnnotatedWatch]) -> PortfolioSummary:
        """Total/average profit and average hold time across sold watches.

        Only watches with a sale date, sale price and purchase price count.
        The average hold time covers the subset whose hold time is computable.
        """
        sold = [a for a in annotated if a.is_sellable_and_sold]
        if not sold:
            return PortfolioSummary()

        total_profit = sum(a.net_profit for a in sold)
        hold_times = [a.hold_time_days for a in sold if a.hold_time_days is not None]

        summary = PortfolioSummary(
            total_profit=total_profit,
            total_sold=len(sold),
            avg_profit=total_profit / len(sold),
            avg_hold_time_days=round(sum(hold_times) / len(hold_times)) if hold_times else 0,
        )
        logger.info(
            "Portfolio: %d sold, profit=%s, avg hold=%d days",
            summary.total_sold,
            f"{summary.total_profit:,.2f}",
            summary.avg_hold_time_days,
        )
        return summary
