"""Application configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    # App settings
    app_name: str = "MFFL League API"
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    frontend_url: str = os.getenv("FRONTEND_URL", "http://localhost:8081")

    # League
    sleeper_league_id: str = os.getenv("SLEEPER_LEAGUE_ID", "1180723525824606208")
    league_display_name: str = os.getenv("LEAGUE_DISPLAY_NAME", "MFFL")
    league_timezone: str = os.getenv("LEAGUE_TIMEZONE", "America/New_York")

    # Upstream providers
    sleeper_base_url: str = os.getenv("SLEEPER_BASE_URL", "https://api.sleeper.app/v1")
    espn_scoreboard_url: str = os.getenv(
        "ESPN_SCOREBOARD_URL",
        "https://site.api.espn.com/apis/site/v2/sports/football/nfl/scoreboard",
    )
    http_timeout: float = float(os.getenv("MFFL_HTTP_TIMEOUT", "10"))
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "30"))
    fetch_workers: int = int(os.getenv("MFFL_FETCH_WORKERS", "16"))

    # Cache freshness windows (seconds)
    ttl_sleeper: float = float(os.getenv("MFFL_TTL_SLEEPER", str(5 * 60)))
    ttl_scoreboard: float = float(os.getenv("MFFL_TTL_SCOREBOARD", str(5 * 60)))
    ttl_state: float = float(os.getenv("MFFL_TTL_STATE", str(2 * 60)))
    ttl_players: float = float(os.getenv("MFFL_TTL_PLAYERS", str(24 * 60 * 60)))

    # Local league content
    data_dir: Path = Path(os.getenv("MFFL_DATA_DIR", "data"))

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def cache_ttls(self) -> dict:
        return {
            "sleeper": self.ttl_sleeper,
            "scoreboard": self.ttl_scoreboard,
            "state": self.ttl_state,
            "players": self.ttl_players,
        }


settings = Settings()
