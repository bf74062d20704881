"""Data models for per-record metrics and the portfolio summary."""

from __future__ import annotations

from dataclasses import dataclass

from ...common.models import Watch


@dataclass(frozen=True)
class AnnotatedWatch:
    """A watch together with the metrics derived from it in one pass."""

    watch: Watch
    net_profit: float
    hold_time_days: int | None = None  # None when not computable

    @property
    def is_sold(self) -> bool:
        return self.watch.is_sold

    @property
    def is_sellable_and_sold(self) -> bool:
        """Sold with a known purchase price; the filter used by profit reports."""
        return self.watch.is_sold and self.watch.purchase_price is not None

    def to_dict(self) -> dict:
        watch = self.watch
        return {
            "id": watch.id,
            "brand": watch.brand,
            "model": watch.model,
            "reference_number": watch.reference_number,
            "in_date": watch.in_date.isoformat() if watch.in_date else None,
            "date_sold": watch.date_sold.isoformat() if watch.date_sold else None,
            "purchase_price": watch.purchase_price,
            "price_sold": watch.price_sold,
            "net_profit": self.net_profit,
            "hold_time_days": self.hold_time_days,
            "is_sold": self.is_sold,
        }


@dataclass
class PortfolioSummary:
    """Headline stats across all sold watches."""

    total_profit: float = 0.0
    total_sold: int = 0
    avg_profit: float = 0.0
    avg_hold_time_days: int = 0

    def to_dict(self) -> dict:
        return {
            "total_profit": self.total_profit,
            "total_sold": self.total_sold,
            "avg_profit": self.avg_profit,
            "avg_hold_time_days": self.avg_hold_time_days,
        }
