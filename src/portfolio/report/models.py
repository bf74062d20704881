"""Data model for the full portfolio report."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..contact_metrics.models import ContactMetrics
from ..goal.models import GoalProjection
from ..leaderboard.models import Leaderboard
from ..metrics.models import AnnotatedWatch, PortfolioSummary
from ..monthly.models import MonthlyBucket


@dataclass
class PortfolioReport:
    """Everything the dashboard shows, computed from one record snapshot."""

    reference_date: date
    annotated: list[AnnotatedWatch]
    summary: PortfolioSummary
    monthly: list[MonthlyBucket]
    goal: GoalProjection
    leaderboard: Leaderboard
    contacts: dict[str, ContactMetrics] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """JSON-safe representation (dates as ISO strings)."""
        return {
            "reference_date": self.reference_date.isoformat(),
            "watches": [a.to_dict() for a in self.annotated],
            "summary": self.summary.to_dict(),
            "monthly": [b.to_dict() for b in self.monthly],
            "goal": self.goal.to_dict(),
            "leaderboard": self.leaderboard.to_dict(),
            "contacts": {cid: m.to_dict() for cid, m in self.contacts.items()},
        }
