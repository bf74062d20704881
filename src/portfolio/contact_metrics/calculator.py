"""Contact relationship metrics.

Splits a contact's watch associations by role and reports both sides of
the relationship from the owning trader's point of view:

    Buyer role  -> the contact bought from the owner -> owner's SALES (price sold)
    Seller role -> the contact sold to the owner     -> owner's PURCHASES (purchase price)

Net profit of the relationship = sales total - purchase total.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from datetime import date, timedelta

from ...common.config import Settings, settings as default_settings
from ...common.models import AssociationRole, Contact, Watch, WatchAssociation
from ..normalizer import amount_or_zero, coerce_date
from .models import ContactMetrics, DealStats, FavoriteBrand, RelationshipStats

logger = logging.getLogger(__name__)


def associations_from_records(contact_id: str, records: Iterable[Watch]) -> list[WatchAssociation]:
    """Derive a contact's associations from the watches' buyer/seller references."""
    associations = []
    for watch in records:
        for role, holder in (
            (AssociationRole.BUYER, watch.buyer_contact_id),
            (AssociationRole.SELLER, watch.seller_contact_id),
        ):
            if holder is not None and holder == contact_id:
                associations.append(WatchAssociation(
                    watch_id=watch.id,
                    role=role,
                    watch_identifier=watch.display_name,
                    contact_id=contact_id,
                ))
    return associations


def _deal_stats(amounts: list[float], dates: list[date | None], cutoff: date) -> DealStats:
    total = math.fsum(amounts)
    return DealStats(
        count=len(amounts),
        total=total,
        average=total / len(amounts) if amounts else 0.0,
        recent=sum(1 for d in dates if d is not None and d >= cutoff),
    )


def _favorite_brand(watches: Iterable[Watch]) -> FavoriteBrand:
    """Most frequent brand; on a tie the brand seen first wins."""
    counts: dict[str, int] = {}
    for watch in watches:
        counts[watch.brand] = counts.get(watch.brand, 0) + 1
    favorite = FavoriteBrand()
    for brand, count in counts.items():
        if count > favorite.count:
            favorite = FavoriteBrand(brand=brand, count=count)
    return favorite


class ContactMetricsCalculator:
    """Summarize the trading relationship with one contact.

    Usage:
        calc = ContactMetricsCalculator()
        metrics = calc.summarize(contact, watches, associations, reference_date=date.today())
        print(f"Net with {contact.display_name}: ${metrics.relationship.net_profit:,.0f}")
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    def summarize(
        self,
        contact: Contact,
        all_records: Iterable[Watch],
        all_associations: Iterable[WatchAssociation] | None = None,
        reference_date: date | None = None,
    ) -> ContactMetrics:
        """Compute purchase, sales and relationship stats for a contact.

        Args:
            contact: The counterparty.
            all_records: Every known watch; associations are resolved against it.
            all_associations: Flat association list. Entries belonging to other
                contacts are ignored; entries without a contact id are taken as
                this contact's. None falls back to ``contact.watch_associations``.
            reference_date: Anchor of the trailing recency window (default today).

        Returns:
            ContactMetrics. Associations pointing at unknown watches are skipped.
        """
        reference_date = coerce_date(reference_date) or date.today()
        cutoff = reference_date - timedelta(days=self.settings.contacts.recent_window_days)

        if all_associations is None:
            associations = list(contact.watch_associations)
        else:
            associations = [
                a for a in all_associations
                if a.contact_id is None or a.contact_id == contact.id
            ]

        by_id = {w.id: w for w in all_records}
        sold_to_contact = self._resolve(associations, AssociationRole.BUYER, by_id)
        bought_from_contact = self._resolve(associations, AssociationRole.SELLER, by_id)

        sales = _deal_stats(
            [amount_or_zero(w.price_sold) for w in sold_to_contact],
            [w.date_sold for w in sold_to_contact],
            cutoff,
        )
        purchase = _deal_stats(
            [amount_or_zero(w.purchase_price) for w in bought_from_contact],
            [w.in_date for w in bought_from_contact],
            cutoff,
        )

        metrics = ContactMetrics(
            contact_id=contact.id,
            purchase=purchase,
            sales=sales,
            relationship=RelationshipStats(
                total_volume=sales.total + purchase.total,
                net_profit=sales.total - purchase.total,
                deal_count=sales.count + purchase.count,
                favorite_brand=_favorite_brand(sold_to_contact + bought_from_contact),
            ),
        )
        logger.debug(
            "Contact %s: %d sales (%s), %d purchases (%s)",
            contact.id,
            sales.count,
            f"{sales.total:,.2f}",
            purchase.count,
            f"{purchase.total:,.2f}",
        )
        return metrics

    @staticmethod
    def _resolve(
        associations: list[WatchAssociation],
        role: AssociationRole,
        by_id: dict[str, Watch],
    ) -> list[Watch]:
        watches = []
        for association in associations:
            if association.role != role:
                continue
            watch = by_id.get(association.watch_id)
            if watch is None:
                logger.debug("Association to unknown watch %s skipped", association.watch_id)
                continue
            watches.append(watch)
        return watches


def summarize(
    contact: Contact,
    all_records: Iterable[Watch],
    all_associations: Iterable[WatchAssociation] | None = None,
    reference_date: date | None = None,
) -> ContactMetrics:
    """Shortcut for ``ContactMetricsCalculator().summarize(...)`` with default settings."""
    return ContactMetricsCalculator().summarize(
        contact, all_records, all_associations, reference_date=reference_date
    )
