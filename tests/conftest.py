"""Shared test fixtures for the portfolio analytics engine."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import Settings
from src.common.models import Watch


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def test_settings() -> Settings:
    """Default settings, independent of any local config/settings.yaml or env."""
    return Settings()


@pytest.fixture
def reference_date() -> date:
    """A fixed "today" in a leap year: 183 days elapsed, 183 left."""
    return date(2024, 7, 2)


@pytest.fixture
def sample_watch_rows() -> list[dict]:
    """Raw rows as the watches API returns them (snake_case, NUMERIC as strings)."""
    return [
        {
            "id": 1,
            "brand": "Rolex",
            "model": "Submariner",
            "reference_number": "126610LN",
            "in_date": "2024-01-01",
            "purchase_price": "9000.00",
            "accessories_cost": "200.00",
            "date_sold": "2024-01-31",
            "price_sold": "11000.00",
            "fees": "300.00",
            "shipping": "50.00",
            "taxes": None,
            "buyer_contact_id": 10,
            "seller_contact_id": 20,
        },
        {
            "id": 2,
            "brand": "Omega",
            "model": "Speedmaster",
            "reference_number": "310.30.42.50.01.001",
            "in_date": "2024-02-10",
            "purchase_price": 5000,
            "date_sold": "2024-03-15T00:00:00.000Z",
            "price_sold": 6200,
            "fees": 150,
            "seller_contact_id": 20,
        },
        {
            "id": 3,
            "brand": "Rolex",
            "model": "Datejust",
            "reference_number": "126300",
            "in_date": "2024-05-01",
            "purchase_price": 8000,
        },
        {
            "id": 4,
            "brand": "Tudor",
            "model": "Black Bay",
            "reference_number": "M79030N",
            "in_date": "2023-11-20",
            "purchase_price": 3000,
            "date_sold": "2023-12-05",
            "price_sold": 3600,
        },
    ]


@pytest.fixture
def sample_watches(sample_watch_rows) -> list[Watch]:
    from src.portfolio.normalizer import RecordNormalizer

    return RecordNormalizer().normalize_watches(sample_watch_rows)


@pytest.fixture
def make_watch():
    """Factory for Watch contracts built directly (values must already be clean)."""
    def _make(watch_id: str = "w", **fields) -> Watch:
        return Watch(id=watch_id, **fields)
    return _make
