"""Data models for the annual profit goal projection."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MonthlyGoal:
    """Target vs. actual profit for one month of the goal year."""

    month: str  # "Jan" .. "Dec"
    target: float
    actual: float = 0.0
    is_complete: bool = False

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "target": self.target,
            "actual": self.actual,
            "is_complete": self.is_complete,
        }


@dataclass
class GoalProjection:
    """Progress toward the annual profit target as of a reference date."""

    goal_amount: float
    current_year_profit: float
    progress_percentage: float  # 0-100, capped at 100
    remaining_amount: float
    days_left_in_year: int
    daily_target_needed: float
    is_on_track: bool
    projected_end_amount: float
    monthly_breakdown: list[MonthlyGoal] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "goal_amount": self.goal_amount,
            "current_year_profit": self.current_year_profit,
            "progress_percentage": self.progress_percentage,
            "remaining_amount": self.remaining_amount,
            "days_left_in_year": self.days_left_in_year,
            "daily_target_needed": self.daily_target_needed,
            "is_on_track": self.is_on_track,
            "projected_end_amount": self.projected_end_amount,
            "monthly_breakdown": [m.to_dict() for m in self.monthly_breakdown],
        }
