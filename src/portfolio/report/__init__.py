"""Report Module - One-call recomputation of every portfolio report."""

from .builder import recompute
from .models import PortfolioReport

__all__ = ["recompute", "PortfolioReport"]
