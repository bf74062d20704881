"""Leaderboard Ranker Module - Peer ranking by realized profit."""

from .models import Badge, Leaderboard, LeaderboardEntry, Participant
from .ranker import LeaderboardRanker, badge_for_rank

__all__ = [
    "LeaderboardRanker",
    "badge_for_rank",
    "Badge",
    "Leaderboard",
    "LeaderboardEntry",
    "Participant",
]
