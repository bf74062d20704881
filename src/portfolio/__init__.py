"""
Portfolio Analytics Engine

Modules:
- normalizer: Clean raw watch/contact records into arithmetic-safe contracts
- metrics: Per-watch net profit and hold time, portfolio summary
- monthly: Realized profit per calendar month
- goal: Progress toward the annual profit target
- leaderboard: Peer ranking by realized profit
- contact_metrics: Buy/sell relationship summary per contact
- report: Recompute every report from one record snapshot
"""

__version__ = "0.1.0"
