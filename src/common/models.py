"""Shared Pydantic data models for the portfolio analytics engine.

These models define the input contract delivered by the data-access layer:
watches (transaction records), contacts and their watch associations.
Both the API's snake_case keys and the dashboard's camelCase keys are
accepted.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

_CONTRACT_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


# === Enums ===

class AssociationRole(str, Enum):
    """Capacity in which a contact relates to a watch."""
    BUYER = "Buyer"
    SELLER = "Seller"


class ContactType(str, Enum):
    """Kind of counterparty."""
    LEAD = "Lead"
    CUSTOMER = "Customer"
    WATCH_TRADER = "Watch Trader"
    JEWELER = "Jeweler"


class WatchSet(str, Enum):
    """What was included with the watch."""
    WATCH_ONLY = "Watch Only"
    WATCH_AND_BOX = "Watch & Box"
    WATCH_AND_PAPERS = "Watch & Papers"
    FULL_SET = "Full Set"


def _stringify_id(value):
    """Backend ids arrive as integers; the engine keys everything by string."""
    if value is None or isinstance(value, str):
        return value
    return str(value)


# === Records ===

class Watch(BaseModel):
    """One inventory item with its acquisition and disposition lifecycle."""
    id: str
    brand: str = ""
    model: str = ""
    reference_number: str = ""

    # Acquisition
    in_date: date | None = None
    serial_number: str | None = None
    watch_set: WatchSet | None = None
    platform_purchased: str | None = None
    purchase_price: float | None = None
    liquidation_price: float | None = None
    accessories: str | None = None
    accessories_cost: float | None = None

    # Disposition
    date_sold: date | None = None
    platform_sold: str | None = None
    price_sold: float | None = None
    fees: float | None = None
    shipping: float | None = None
    taxes: float | None = None
    notes: str | None = None

    # Associations
    buyer_contact_id: str | None = None
    seller_contact_id: str | None = None

    model_config = _CONTRACT_CONFIG

    @field_validator("id", "buyer_contact_id", "seller_contact_id", mode="before")
    @classmethod
    def stringify_ids(cls, value):
        return _stringify_id(value)

    @property
    def is_sold(self) -> bool:
        """Sold means both the disposition date and price are known."""
        return self.date_sold is not None and self.price_sold is not None

    @property
    def display_name(self) -> str:
        return " ".join(p for p in (self.brand, self.model, self.reference_number) if p)


class WatchAssociation(BaseModel):
    """Link between a contact and a watch under a role."""
    watch_id: str
    role: AssociationRole
    watch_identifier: str = ""  # e.g. "Rolex Submariner 126610LN"
    contact_id: str | None = None

    model_config = _CONTRACT_CONFIG

    @field_validator("watch_id", "contact_id", mode="before")
    @classmethod
    def stringify_ids(cls, value):
        return _stringify_id(value)


class Contact(BaseModel):
    """A counterparty: lead, customer, trader or jeweler."""
    id: str
    first_name: str = ""
    last_name: str | None = None
    email: str | None = None
    business_name: str | None = None
    contact_type: ContactType | None = None
    watch_associations: list[WatchAssociation] = Field(default_factory=list)

    model_config = _CONTRACT_CONFIG

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value):
        return _stringify_id(value)

    @property
    def display_name(self) -> str:
        name = " ".join(p for p in (self.first_name, self.last_name) if p)
        return name or self.business_name or self.id
