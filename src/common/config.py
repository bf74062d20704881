"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class GoalSettings(BaseModel):
    """Annual profit goal settings."""
    annual_target: float = Field(default=100_000, gt=0, description="Yearly net profit target (USD)")


class LeaderboardSettings(BaseModel):
    """Peer leaderboard settings."""
    top_n: int = Field(default=10, ge=1)
    season_format: str = "{year} Annual"


class ContactMetricsSettings(BaseModel):
    """Per-contact relationship metrics settings."""
    recent_window_days: int = Field(default=90, ge=0)


class Settings(BaseModel):
    """Top-level application settings."""
    goal: GoalSettings = Field(default_factory=GoalSettings)
    leaderboard: LeaderboardSettings = Field(default_factory=LeaderboardSettings)
    contacts: ContactMetricsSettings = Field(default_factory=ContactMetricsSettings)
    current_user_id: str = "me"

    @classmethod
    def load(cls, settings_path: str | Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults.

        Environment variables override values from the YAML file.
        """
        path = Path(settings_path) if settings_path else CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if path.exists():
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

        if target := os.getenv("ANNUAL_PROFIT_TARGET"):
            data.setdefault("goal", {})["annual_target"] = float(target)
        if top_n := os.getenv("LEADERBOARD_TOP_N"):
            data.setdefault("leaderboard", {})["top_n"] = int(top_n)
        if window := os.getenv("CONTACT_RECENT_WINDOW_DAYS"):
            data.setdefault("contacts", {})["recent_window_days"] = int(window)
        if user_id := os.getenv("CURRENT_USER_ID"):
            data["current_user_id"] = user_id

        return cls(**data)


# Singleton settings instance
settings = Settings.load()
