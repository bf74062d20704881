"""Data models for monthly profit aggregation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MonthlyBucket:
    """Realized profit for one calendar month."""

    period: str  # YYYY-MM
    profit: float = 0.0
    count: int = 0

    @property
    def year(self) -> int:
        return int(self.period[:4])

    @property
    def month(self) -> int:
        return int(self.period[5:7])

    def to_dict(self) -> dict:
        return {
            "period": self.period,
            "profit": self.profit,
            "count": self.count,
        }
