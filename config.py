"""
Configuration management for the League Dashboard backend
"""
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from models.division import Division


class LeagueConfig(BaseModel):
    """Connection settings for one division's ESPN league."""

    model_config = {"frozen": True}

    division: Division
    league_id: int
    season_id: int
    espn_s2: Optional[str] = None
    swid: Optional[str] = None

    @property
    def has_credentials(self) -> bool:
        """Both session cookies are required for private league access."""
        return bool(self.espn_s2 and self.swid)

    @property
    def cookies(self) -> dict:
        """Session cookies to send upstream, empty for anonymous access."""
        if not self.has_credentials:
            return {}
        return {'espn_s2': self.espn_s2, 'SWID': self.swid}


class DashboardConfig(BaseSettings):
    """Application configuration with environment variable support."""

    # League settings
    green_league_id: int
    white_league_id: int
    season_id: int = 2025

    # Session cookies (optional, private leagues only)
    g_espn_s2: Optional[str] = None
    g_swid: Optional[str] = None
    w_espn_s2: Optional[str] = None
    w_swid: Optional[str] = None

    # Ownership registry
    teams_file: str = "teams.json"

    # Upstream
    espn_base_url: str = "https://lm-api-reads.fantasy.espn.com/apis/v3/games/ffl"
    user_agent: str = "League-Dashboard/1.0"

    # HTTP server
    http_host: str = "0.0.0.0"
    http_port: int = 8080

    # Application settings
    log_level: str = "INFO"
    environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    def league_config(self, division: Division) -> LeagueConfig:
        """
        Build the league configuration for a division.

        Args:
            division: Division to configure

        Returns:
            LeagueConfig carrying that division's league id and cookies
        """
        division = Division(division)
        if division is Division.GREEN:
            return LeagueConfig(
                division=division,
                league_id=self.green_league_id,
                season_id=self.season_id,
                espn_s2=self.g_espn_s2 or None,
                swid=self.g_swid or None
            )
        return LeagueConfig(
            division=division,
            league_id=self.white_league_id,
            season_id=self.season_id,
            espn_s2=self.w_espn_s2 or None,
            swid=self.w_swid or None
        )


# Global configuration instance - lazily initialized to avoid import-time errors
_config = None

def get_config() -> DashboardConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = DashboardConfig()  # type: ignore
    return _config
