"""
Standings model for division teams

Represents a team's record joined with its ownership history.
"""
from typing import List
from pydantic import Field

from models.base import DashboardBaseModel
from models.matchup import MatchupSummary


class Standing(DashboardBaseModel):
    """One row of a division's standings table."""

    id: int = Field(..., description="ESPN team ID")
    name: str = Field(..., description="Team name")
    owner: str = Field('', description="Owner display name")
    championships: List[str] = Field(default_factory=list, description="Championship years")

    wins: int = Field(..., description="Total wins")
    losses: int = Field(..., description="Total losses")
    ties: int = Field(..., description="Total ties")
    points: float = Field(..., description="Total points scored")
    points_against: float = Field(..., description="Points scored against")

    def __str__(self):
        return f"{self.name} {self.wins}-{self.losses}-{self.ties} ({self.points:.2f})"


class LeagueOverview(DashboardBaseModel):
    """Standings and current-week scores for one division."""

    name: str = Field(..., description="League name")
    current_week: int = Field(..., description="Current matchup period")
    standings: List[Standing] = Field(default_factory=list)
    matchups: List[MatchupSummary] = Field(default_factory=list)
