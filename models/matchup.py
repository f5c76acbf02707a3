"""
Matchup models

Compact scoreboard rows and the side-by-side starter detail for one matchup.
"""
from typing import List
from pydantic import Field

from models.base import DashboardBaseModel


class MatchupSummary(DashboardBaseModel):
    """Head-to-head score pair for the scoreboard."""

    home_team: str = Field(..., description="Home team name")
    home_team_id: int = Field(..., description="Home team ID")
    home_score: float = Field(..., description="Home team points")
    away_team: str = Field(..., description="Away team name")
    away_team_id: int = Field(..., description="Away team ID")
    away_score: float = Field(..., description="Away team points")

    def __str__(self):
        return f"{self.home_team} {self.home_score} - {self.away_score} {self.away_team}"


class MatchupPlayer(DashboardBaseModel):
    """A starter's actual and projected points."""

    name: str
    position: str = Field(..., description="Rostered slot")
    points: float = 0.0
    projected: float = 0.0


class MatchupDetail(DashboardBaseModel):
    """Both starting lineups of one matchup with owner history."""

    home_team: str
    home_team_id: int
    home_owner: str = ''
    home_championships: List[str] = Field(default_factory=list)
    home_score: float
    home_roster: List[MatchupPlayer] = Field(default_factory=list)

    away_team: str
    away_team_id: int
    away_owner: str = ''
    away_championships: List[str] = Field(default_factory=list)
    away_score: float
    away_roster: List[MatchupPlayer] = Field(default_factory=list)
