"""Portfolio report builder.

Runs the whole engine over one snapshot of records. The caller invokes
``recompute`` whenever its snapshot changes (for example after a fetch
completes); the result depends only on the arguments, so repeated calls
on the same input produce equal reports.

Pipeline:
    raw records -> RecordNormalizer -> MetricsCalculator.annotate (once per record)
        -> summary / monthly buckets / goal / leaderboard / contact metrics
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from ...common.config import Settings, settings as default_settings
from ...common.models import Contact, Watch, WatchAssociation
from ..contact_metrics.calculator import ContactMetricsCalculator
from ..goal.projector import GoalProjector
from ..leaderboard.models import Participant
from ..leaderboard.ranker import LeaderboardRanker
from ..metrics.calculator import MetricsCalculator
from ..monthly.aggregator import aggregate_by_month
from ..normalizer import RecordNormalizer, coerce_date
from .models import PortfolioReport

logger = logging.getLogger(__name__)

CURRENT_USER_DISPLAY_NAME = "You"


def recompute(
    watches: Iterable[Watch | Mapping[str, Any]],
    contacts: Iterable[Contact | Mapping[str, Any]] = (),
    associations: Iterable[WatchAssociation | Mapping[str, Any]] | None = None,
    peers: Iterable[Participant] = (),
    current_user_id: str | None = None,
    reference_date: date | None = None,
    settings: Settings | None = None,
) -> PortfolioReport:
    """Compute every report from a snapshot of records.

    Args:
        watches: The owner's watches, raw mappings or Watch contracts.
        contacts: Contacts to summarize.
        associations: Flat association list. Each contact only receives the
            entries carrying its id; entries without a contact id are ignored.
            None uses each contact's own list.
        peers: Other leaderboard participants. The owner is ranked after
            them, so on equal profit peers keep the higher rank.
        current_user_id: Owner's participant id (default settings.current_user_id).
        reference_date: "Today" for the goal, season and recency windows.
        settings: Engine settings (defaults to the loaded singleton).

    Returns:
        PortfolioReport with freshly allocated results.
    """
    settings = settings or default_settings
    reference_date = coerce_date(reference_date) or date.today()
    current_user_id = current_user_id or settings.current_user_id

    normalizer = RecordNormalizer()
    calculator = MetricsCalculator()

    records = normalizer.normalize_watches(watches)
    annotated = calculator.annotate_all(records)

    participants = list(peers)
    participants.append(Participant(
        participant_id=current_user_id,
        display_name=CURRENT_USER_DISPLAY_NAME,
        watches=list(annotated),
    ))
    leaderboard = LeaderboardRanker(settings, calculator).rank(
        participants,
        current_user_id=current_user_id,
        season_year=reference_date.year,
    )

    normalized_associations = (
        normalizer.normalize_associations(associations) if associations is not None else None
    )
    if normalized_associations is not None:
        unowned = sum(1 for a in normalized_associations if a.contact_id is None)
        if unowned:
            logger.warning("%d associations without a contact id ignored", unowned)

    contact_calc = ContactMetricsCalculator(settings)
    contact_metrics = {}
    for contact in normalizer.normalize_contacts(contacts):
        contact_associations = None
        if normalized_associations is not None:
            contact_associations = [
                a for a in normalized_associations if a.contact_id == contact.id
            ]
        contact_metrics[contact.id] = contact_calc.summarize(
            contact, records, contact_associations, reference_date=reference_date
        )

    report = PortfolioReport(
        reference_date=reference_date,
        annotated=annotated,
        summary=calculator.summarize(annotated),
        monthly=aggregate_by_month(annotated),
        goal=GoalProjector(settings).project(annotated, reference_date=reference_date),
        leaderboard=leaderboard,
        contacts=contact_metrics,
    )
    logger.info(
        "Recomputed portfolio report: %d watches, %d months, %d contacts",
        len(annotated),
        len(report.monthly),
        len(contact_metrics),
    )
    return report
