"""Record normalization.

Raw records come from the data-access layer with optional, missing or
malformed numeric and date fields (Postgres NUMERIC columns arrive as
strings, dates may be full ISO timestamps). This module is the single
place where those fields are cleaned before the pydantic contracts are
built, so the calculators never have to null-coalesce on their own.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic.alias_generators import to_camel

from ..common.models import (
    AssociationRole,
    Contact,
    ContactType,
    Watch,
    WatchAssociation,
    WatchSet,
)

logger = logging.getLogger(__name__)

AMOUNT_FIELDS = (
    "purchase_price",
    "liquidation_price",
    "accessories_cost",
    "price_sold",
    "fees",
    "shipping",
    "taxes",
)
DATE_FIELDS = ("in_date", "date_sold")


def coerce_amount(value: Any) -> float | None:
    """Return a float for numeric input, None for absent or malformed input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def coerce_date(value: Any) -> date | None:
    """Return a calendar date for date-like input, None otherwise.

    Strings are read as ``YYYY-MM-DD``; anything after the first ten
    characters (a time component) is ignored.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def amount_or_zero(value: float | None) -> float:
    return value if value is not None else 0.0


def _enum_or_none(enum_cls, value):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _keys_for(name: str) -> tuple[str, ...]:
    camel = to_camel(name)
    return (name,) if camel == name else (name, camel)


class RecordNormalizer:
    """Turn raw mappings into validated, arithmetic-safe contracts.

    Missing numeric fields stay ``None`` on the contract and are read through
    ``amount_or_zero``; missing or unparseable dates stay ``None`` so that
    date-dependent metrics report "not computable" instead of an epoch date.

    Usage:
        normalizer = RecordNormalizer()
        watches = normalizer.normalize_watches(api_rows)
    """

    def normalize_watch(self, raw: Watch | Mapping[str, Any]) -> Watch:
        """Build a Watch from a raw mapping, treating malformed values as absent."""
        if isinstance(raw, Watch):
            return raw

        data = dict(raw)
        dropped = 0
        for name in AMOUNT_FIELDS:
            dropped += self._clean(data, name, coerce_amount)
        for name in DATE_FIELDS:
            dropped += self._clean(data, name, coerce_date)
        dropped += self._clean(data, "watch_set", lambda v: _enum_or_none(WatchSet, v))

        if dropped:
            logger.debug("Watch %s: %d malformed field(s) treated as absent", data.get("id"), dropped)
        return Watch.model_validate(data)

    def normalize_watches(self, raws: Iterable[Watch | Mapping[str, Any]]) -> list[Watch]:
        return [self.normalize_watch(raw) for raw in raws]

    def normalize_association(
        self, raw: WatchAssociation | Mapping[str, Any]
    ) -> WatchAssociation | None:
        """Build a WatchAssociation; unknown roles cannot be attributed and yield None."""
        if isinstance(raw, WatchAssociation):
            return raw
        data = dict(raw)
        role_key = next((k for k in _keys_for("role") if k in data), "role")
        role = _enum_or_none(AssociationRole, data.get(role_key))
        if role is None:
            logger.debug("Skipping association with unknown role: %r", data.get(role_key))
            return None
        data[role_key] = role
        return WatchAssociation.model_validate(data)

    def normalize_associations(
        self, raws: Iterable[WatchAssociation | Mapping[str, Any]]
    ) -> list[WatchAssociation]:
        associations = []
        for raw in raws:
            association = self.normalize_association(raw)
            if association is not None:
                associations.append(association)
        return associations

    def normalize_contact(self, raw: Contact | Mapping[str, Any]) -> Contact:
        if isinstance(raw, Contact):
            return raw
        data = dict(raw)
        self._clean(data, "contact_type", lambda v: _enum_or_none(ContactType, v))
        for key in _keys_for("watch_associations"):
            if key in data:
                data[key] = self.normalize_associations(data[key] or [])
        return Contact.model_validate(data)

    def normalize_contacts(self, raws: Iterable[Contact | Mapping[str, Any]]) -> list[Contact]:
        return [self.normalize_contact(raw) for raw in raws]

    @staticmethod
    def _clean(data: dict, name: str, coerce) -> int:
        """Coerce a field in place under either key style; return 1 if a value was dropped."""
        dropped = 0
        for key in _keys_for(name):
            if key not in data:
                continue
            original = data[key]
            cleaned = coerce(original)
            if cleaned is None and original not in (None, ""):
                dropped = 1
            data[key] = cleaned
        return dropped
