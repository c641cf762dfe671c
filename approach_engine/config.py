"""
Application configuration. Loads from environment variables.
Engine functions never read settings directly; the API layer passes values in.
"""

import os

from dotenv import load_dotenv

load_dotenv()
from functools import lru_cache


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    app_name: str = "Approach Engine"
    debug: bool = False
    log_level: str = "INFO"

    # Cooldown windows (days)
    duplicate_min_interval_days: int = 30
    freelance_limit_days: int = 90
    recent_approach_days: int = 90  # candidate recency window

    # Recommendation strings: "en" or "ja"
    recommendation_locale: str = "en"

    def __init__(self) -> None:
        self.app_name = os.getenv("APP_NAME", self.app_name)
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.log_level = os.getenv("LOG_LEVEL", self.log_level).upper()

        self.duplicate_min_interval_days = int(
            os.getenv("DUPLICATE_MIN_INTERVAL_DAYS", str(self.duplicate_min_interval_days))
        )
        self.freelance_limit_days = int(
            os.getenv("FREELANCE_LIMIT_DAYS", str(self.freelance_limit_days))
        )
        self.recent_approach_days = int(
            os.getenv("RECENT_APPROACH_DAYS", str(self.recent_approach_days))
        )

        self.recommendation_locale = os.getenv(
            "RECOMMENDATION_LOCALE", self.recommendation_locale
        ).strip().lower()
