"""
League metadata model

Represents the league name and the current week pointers from ESPN.
"""
from pydantic import Field

from models.base import DashboardBaseModel


class LeagueInfo(DashboardBaseModel):
    """Current state of an ESPN league."""

    name: str = Field(..., description="League name")
    current_matchup_period_id: int = Field(..., description="Current head-to-head week")
    current_scoring_period_id: int = Field(..., description="Current stat scoring period")

    @classmethod
    def from_api_data(cls, data: dict) -> 'LeagueInfo':
        """
        Create LeagueInfo from an mSettings/mStatus league response.

        ESPN nests the name under settings and the matchup week under status,
        while the scoring period sits at the top level.
        """
        if not data:
            raise ValueError("Cannot create LeagueInfo from empty data")

        settings = data.get('settings') or {}
        status = data.get('status') or {}
        scoring_period = data.get('scoringPeriodId', status.get('latestScoringPeriod'))

        return cls(
            name=settings.get('name', ''),
            current_matchup_period_id=status['currentMatchupPeriod'],
            current_scoring_period_id=scoring_period
        )

    def __str__(self):
        return f"{self.name} (week {self.current_matchup_period_id})"
