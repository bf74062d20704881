"""Data models for the peer leaderboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ...common.models import Watch
from ..metrics.models import AnnotatedWatch


class Badge(str, Enum):
    """Podium badge shown next to the top three ranks."""
    TROPHY = "trophy"
    MEDAL = "medal"
    AWARD = "award"


@dataclass
class Participant:
    """A trader competing on the leaderboard, with their watches.

    Watches may already be annotated; plain ones are annotated on ranking.
    """

    participant_id: str
    display_name: str = ""
    watches: list[Watch | AnnotatedWatch] = field(default_factory=list)


@dataclass
class LeaderboardEntry:
    """One participant's aggregate standing."""

    participant_id: str
    total_profit: float
    watches_sold: int
    avg_profit: float
    rank: int = 0
    display_name: str = ""
    badge: Badge | None = None
    is_current_user: bool = False

    def to_dict(self) -> dict:
        return {
            "participant_id": self.participant_id,
            "display_name": self.display_name,
            "total_profit": self.total_profit,
            "watches_sold": self.watches_sold,
            "avg_profit": self.avg_profit,
            "rank": self.rank,
            "badge": self.badge.value if self.badge else None,
            "is_current_user": self.is_current_user,
        }


@dataclass
class Leaderboard:
    """Ranked view of a season."""

    entries: list[LeaderboardEntry] = field(default_factory=list)
    user_rank: int | None = None
    total_participants: int = 0
    season: str = ""

    def to_dict(self) -> dict:
        return {
            "entries": [e.to_dict() for e in self.entries],
            "user_rank": self.user_rank,
            "total_participants": self.total_participants,
            "season": self.season,
        }
