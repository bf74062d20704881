"""Leaderboard ranking by aggregate realized profit.

Ties: entries with equal total profit keep their input order. Python's
sort is stable (also with ``reverse=True``), so callers that need a
different tie rule should order the participants before ranking.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from datetime import date

from ...common.config import Settings, settings as default_settings
from ..metrics.calculator import MetricsCalculator
from ..metrics.models import AnnotatedWatch
from .models import Badge, Leaderboard, LeaderboardEntry, Participant

logger = logging.getLogger(__name__)

_PODIUM_BADGES = {
    1: Badge.TROPHY,
    2: Badge.MEDAL,
    3: Badge.AWARD,
}


def badge_for_rank(rank: int) -> Badge | None:
    """Podium badge for a rank; every other rank gets none."""
    return _PODIUM_BADGES.get(rank)


class LeaderboardRanker:
    """Rank participants by total realized profit.

    Usage:
        ranker = LeaderboardRanker()
        board = ranker.rank(participants, current_user_id="me", season_year=2024)
        print(f"Your rank: #{board.user_rank} of {board.total_participants}")
    """

    def __init__(
        self,
        settings: Settings | None = None,
        calculator: MetricsCalculator | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.calculator = calculator or MetricsCalculator()

    def rank(
        self,
        participants: Iterable[Participant],
        current_user_id: str | None = None,
        season_year: int | None = None,
        top_n: int | None = None,
    ) -> Leaderboard:
        """Build the ranked leaderboard.

        Args:
            participants: Traders and their watches, in tie-break order.
            current_user_id: Participant to flag as the session's user.
            season_year: Only count sales in this year; None counts all sales.
            top_n: Size of the visible board (defaults to settings.leaderboard.top_n).
                The current user's entry is appended when ranked below it.

        Returns:
            Leaderboard; ``user_rank`` is None when the user has no entry.
        """
        top_n = self.settings.leaderboard.top_n if top_n is None else top_n

        entries = [self._entry_for(p, season_year) for p in participants]
        ranked = sorted(entries, key=lambda e: e.total_profit, reverse=True)

        user_entry: LeaderboardEntry | None = None
        for position, entry in enumerate(ranked, start=1):
            entry.rank = position
            entry.badge = badge_for_rank(position)
            if current_user_id is not None and entry.participant_id == current_user_id:
                entry.is_current_user = True
                user_entry = entry

        visible = ranked[:top_n]
        if user_entry is not None and user_entry.rank > top_n:
            visible.append(user_entry)

        season_label_year = season_year if season_year is not None else date.today().year
        board = Leaderboard(
            entries=visible,
            user_rank=user_entry.rank if user_entry else None,
            total_participants=len(ranked),
            season=self.settings.leaderboard.season_format.format(year=season_label_year),
        )
        logger.info(
            "Leaderboard %s: %d participants, user rank=%s",
            board.season,
            board.total_participants,
            board.user_rank,
        )
        return board

    def _entry_for(self, participant: Participant, season_year: int | None) -> LeaderboardEntry:
        # Same sold rule as the goal: date and price, purchase price optional.
        sold = [
            a for a in map(self._annotated, participant.watches)
            if a.is_sold and (season_year is None or a.watch.date_sold.year == season_year)
        ]
        total = math.fsum(a.net_profit for a in sold)
        return LeaderboardEntry(
            participant_id=participant.participant_id,
            display_name=participant.display_name or participant.participant_id,
            total_profit=total,
            watches_sold=len(sold),
            avg_profit=total / len(sold) if sold else 0.0,
        )

    def _annotated(self, item) -> AnnotatedWatch:
        if isinstance(item, AnnotatedWatch):
            return item
        return self.calculator.annotate(item)
