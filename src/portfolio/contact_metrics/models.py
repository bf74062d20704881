"""Data models for per-contact relationship metrics."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DealStats:
    """Count, total and recency of one side of the relationship."""

    count: int = 0
    total: float = 0.0
    average: float = 0.0
    recent: int = 0  # deals inside the trailing window

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "total": self.total,
            "average": self.average,
            "recent": self.recent,
        }


@dataclass
class FavoriteBrand:
    brand: str | None = None
    count: int = 0

    def to_dict(self) -> dict:
        return {"brand": self.brand, "count": self.count}


@dataclass
class RelationshipStats:
    """Both sides combined, from the owner's perspective."""

    total_volume: float = 0.0
    net_profit: float = 0.0
    deal_count: int = 0
    favorite_brand: FavoriteBrand = field(default_factory=FavoriteBrand)

    def to_dict(self) -> dict:
        return {
            "total_volume": self.total_volume,
            "net_profit": self.net_profit,
            "deal_count": self.deal_count,
            "favorite_brand": self.favorite_brand.to_dict(),
        }


@dataclass
class ContactMetrics:
    """Relationship summary for one contact.

    ``purchase`` covers watches the owner bought from the contact (contact
    held the Seller role); ``sales`` covers watches the owner sold to the
    contact (Buyer role).
    """

    contact_id: str
    purchase: DealStats = field(default_factory=DealStats)
    sales: DealStats = field(default_factory=DealStats)
    relationship: RelationshipStats = field(default_factory=RelationshipStats)

    def to_dict(self) -> dict:
        return {
            "contact_id": self.contact_id,
            "purchase": self.purchase.to_dict(),
            "sales": self.sales.to_dict(),
            "relationship": self.relationship.to_dict(),
        }
