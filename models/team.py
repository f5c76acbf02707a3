"""
Team model for ESPN fantasy teams

Represents a fantasy team and its cumulative record at a given week.
"""
from pydantic import Field

from models.base import DashboardBaseModel


class Team(DashboardBaseModel):
    """Team model representing a fantasy team within one division."""

    id: int = Field(..., description="ESPN team ID, unique within a league season")
    name: str = Field(..., description="Team display name")

    # Record
    wins: int = Field(0, description="Total wins")
    losses: int = Field(0, description="Total losses")
    ties: int = Field(0, description="Total ties")

    # Scoring
    total_points_scored: float = Field(0.0, description="Total points scored")
    points_against: float = Field(0.0, description="Regular season points against")

    @classmethod
    def from_api_data(cls, data: dict) -> 'Team':
        """
        Create Team instance from an mTeam response entry.

        Newer leagues carry a single 'name'; older ones split it into
        location and nickname. Record totals live under record.overall.
        """
        if not data:
            raise ValueError("Cannot create Team from empty data")

        name = data.get('name')
        if not name:
            name = f"{data.get('location', '')} {data.get('nickname', '')}".strip()

        overall = (data.get('record') or {}).get('overall') or {}
        points = data.get('points')
        if points is None:
            points = overall.get('pointsFor', 0.0)

        return cls(
            id=data['id'],
            name=name,
            wins=overall.get('wins', 0),
            losses=overall.get('losses', 0),
            ties=overall.get('ties', 0),
            total_points_scored=points,
            points_against=overall.get('pointsAgainst', 0.0)
        )

    @property
    def record(self) -> str:
        """Record as W-L or W-L-T string."""
        if self.ties:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"

    def __str__(self):
        return f"{self.name} ({self.record})"
