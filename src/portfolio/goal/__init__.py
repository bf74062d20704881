"""Goal Projector Module - Progress toward the annual profit target."""

from .models import GoalProjection, MonthlyGoal
from .projector import GoalProjector, project_goal

__all__ = [
    "GoalProjector",
    "project_goal",
    "GoalProjection",
    "MonthlyGoal",
]
