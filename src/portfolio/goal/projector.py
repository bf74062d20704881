"""Annual profit goal projector.

Measures realized profit in the calendar year of a reference date against
a fixed annual target, and works out the pace still required.

Day counting for a reference date R in year Y:
    days_elapsed = R - Jan 1      (days fully behind us)
    days_left    = days_in_year - days_elapsed   (includes R itself)
"""

from __future__ import annotations

import calendar
import logging
import math
from collections.abc import Iterable
from datetime import date

from ...common.config import Settings, settings as default_settings
from ..metrics.models import AnnotatedWatch
from ..normalizer import coerce_date
from .models import GoalProjection, MonthlyGoal

logger = logging.getLogger(__name__)


class GoalProjector:
    """Project progress toward the annual profit goal.

    Usage:
        projector = GoalProjector()
        goal = projector.project(annotated, reference_date=date(2024, 7, 2))
        print(f"{goal.progress_percentage:.1f}%, need ${goal.daily_target_needed:,.2f}/day")
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    def project(
        self,
        records: Iterable[AnnotatedWatch],
        target: float | None = None,
        reference_date: date | None = None,
    ) -> GoalProjection:
        """Compute the goal projection.

        Args:
            records: Annotated watches; only sold ones in the reference year count.
            target: Annual profit target (defaults to settings.goal.annual_target).
            reference_date: "Today" for the projection (defaults to date.today()).

        Returns:
            GoalProjection with progress, pace and a month-by-month breakdown.
        """
        target = self.settings.goal.annual_target if target is None else target
        reference_date = coerce_date(reference_date) or date.today()
        year = reference_date.year

        # Any sale with a date and price counts here, purchase price or not.
        # The monthly chart and summary additionally need a purchase price.
        year_sales = [
            r for r in records
            if r.is_sold and r.watch.date_sold.year == year
        ]
        profit = math.fsum(r.net_profit for r in year_sales)

        if target > 0:
            progress = min(100.0, profit / target * 100)
        else:
            progress = 100.0
        remaining = max(0.0, target - profit)

        start_of_year = date(year, 1, 1)
        days_in_year = 366 if calendar.isleap(year) else 365
        days_elapsed = (reference_date - start_of_year).days
        days_left = max(0, days_in_year - days_elapsed)

        daily_target = remaining / max(1, days_left)

        achieved_rate = profit / max(1, days_elapsed)
        required_rate = target / days_in_year
        is_on_track = achieved_rate >= required_rate

        if days_elapsed > 0:
            projected_end = profit / days_elapsed * days_in_year
        else:
            projected_end = profit

        projection = GoalProjection(
            goal_amount=target,
            current_year_profit=profit,
            progress_percentage=progress,
            remaining_amount=remaining,
            days_left_in_year=days_left,
            daily_target_needed=daily_target,
            is_on_track=is_on_track,
            projected_end_amount=projected_end,
            monthly_breakdown=self._monthly_breakdown(year_sales, target, reference_date),
        )

        logger.info(
            "Goal %d: profit=%s of %s (%.1f%%), %d days left, need %s/day, on track=%s",
            year,
            f"{profit:,.2f}",
            f"{target:,.2f}",
            progress,
            days_left,
            f"{daily_target:,.2f}",
            is_on_track,
        )
        return projection

    @staticmethod
    def _monthly_breakdown(
        year_sales: list[AnnotatedWatch],
        target: float,
        reference_date: date,
    ) -> list[MonthlyGoal]:
        """Twelve months of target (goal / 12) vs. actual profit."""
        year = reference_date.year
        actual: dict[int, list[float]] = {m: [] for m in range(1, 13)}
        for record in year_sales:
            actual[record.watch.date_sold.month].append(record.net_profit)

        breakdown = []
        for month in range(1, 13):
            month_end = date(year, month, calendar.monthrange(year, month)[1])
            breakdown.append(MonthlyGoal(
                month=calendar.month_abbr[month],
                target=target / 12,
                actual=math.fsum(actual[month]),
                is_complete=month_end < reference_date,
            ))
        return breakdown


def project_goal(
    records: Iterable[AnnotatedWatch],
    target: float | None = None,
    reference_date: date | None = None,
) -> GoalProjection:
    """Shortcut for ``GoalProjector().project(...)`` with default settings."""
    return GoalProjector().project(records, target=target, reference_date=reference_date)
