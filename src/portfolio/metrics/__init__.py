"""Metrics Calculator Module - Per-watch profit and hold time."""

from .calculator import MetricsCalculator, compute_hold_time_days, compute_net_profit
from .models import AnnotatedWatch, PortfolioSummary

__all__ = [
    "MetricsCalculator",
    "compute_hold_time_days",
    "compute_net_profit",
    "AnnotatedWatch",
    "PortfolioSummary",
]
