"""
Boxscore models for weekly ESPN matchups

Represents one head-to-head matchup for a week along with both rosters.
"""
from typing import Dict, List, Optional
from pydantic import Field

from constants import (
    DEFAULT_POSITIONS,
    LINEUP_SLOTS,
    PRO_TEAMS,
    PROJECTED_STAT_SOURCE,
    NON_STARTER_SLOTS,
)
from models.base import DashboardBaseModel


class PlayerSlot(DashboardBaseModel):
    """A player occupying a lineup slot for one week."""

    full_name: str = Field(..., description="Player full name")
    default_position: str = Field('', description="Natural position (e.g., 'WR')")
    pro_team_abbreviation: str = Field('', description="NFL team abbreviation")
    rostered_position: str = Field(..., description="Lineup slot: starting position, Bench, or IR")
    total_points: Optional[float] = Field(None, description="Points scored this week")
    projected_point_breakdown: Optional[Dict[str, float]] = Field(
        None, description="Projected points by scoring category"
    )

    @property
    def is_starter(self) -> bool:
        """Starters are every slot except Bench and IR."""
        return self.rostered_position not in NON_STARTER_SLOTS

    @property
    def projected_points(self) -> float:
        """Sum of the projected breakdown, 0 when there is none."""
        if not self.projected_point_breakdown:
            return 0.0
        return sum(self.projected_point_breakdown.values())

    @classmethod
    def from_api_data(cls, data: dict, scoring_period_id: Optional[int] = None) -> 'PlayerSlot':
        """
        Create PlayerSlot from a rosterForCurrentScoringPeriod entry.

        Args:
            data: Roster entry with lineupSlotId and playerPoolEntry
            scoring_period_id: Week used to pick the projection stats entry

        Returns:
            PlayerSlot instance
        """
        if not data:
            raise ValueError("Cannot create PlayerSlot from empty data")

        pool_entry = data.get('playerPoolEntry') or {}
        player = pool_entry.get('player') or {}

        projected = None
        for stats in player.get('stats') or []:
            if stats.get('statSourceId') != PROJECTED_STAT_SOURCE:
                continue
            if scoring_period_id is not None and stats.get('scoringPeriodId') != scoring_period_id:
                continue
            projected = {str(k): v for k, v in (stats.get('appliedStats') or {}).items()}
            break

        slot_id = data.get('lineupSlotId')
        return cls(
            full_name=player.get('fullName', ''),
            default_position=DEFAULT_POSITIONS.get(player.get('defaultPositionId'), ''),
            pro_team_abbreviation=PRO_TEAMS.get(player.get('proTeamId'), ''),
            rostered_position=LINEUP_SLOTS.get(slot_id, str(slot_id)),
            total_points=pool_entry.get('appliedStatTotal'),
            projected_point_breakdown=projected
        )

    def __str__(self):
        return f"{self.full_name} ({self.rostered_position})"


class Boxscore(DashboardBaseModel):
    """Scored matchup between two teams for a single week."""

    home_team_id: int = Field(..., description="Home team ID")
    home_score: float = Field(0.0, description="Home team points")
    home_roster: List[PlayerSlot] = Field(default_factory=list, description="Home lineup")

    away_team_id: int = Field(..., description="Away team ID")
    away_score: float = Field(0.0, description="Away team points")
    away_roster: List[PlayerSlot] = Field(default_factory=list, description="Away lineup")

    @staticmethod
    def _side_score(side: dict) -> float:
        live = side.get('totalPointsLive')
        if live is not None:
            return live
        return side.get('totalPoints', 0.0)

    @staticmethod
    def _side_roster(side: dict, scoring_period_id: Optional[int]) -> List[PlayerSlot]:
        roster = side.get('rosterForCurrentScoringPeriod') or {}
        return [
            PlayerSlot.from_api_data(entry, scoring_period_id)
            for entry in roster.get('entries') or []
        ]

    @classmethod
    def from_api_data(cls, data: dict, scoring_period_id: Optional[int] = None) -> 'Boxscore':
        """
        Create Boxscore from an mScoreboard schedule entry.

        Expected format from API:
        {
            'matchupPeriodId': 7,
            'home': {'teamId': 1, 'totalPoints': 101.2, 'rosterForCurrentScoringPeriod': {...}},
            'away': {'teamId': 2, 'totalPoints': 98.7, 'rosterForCurrentScoringPeriod': {...}}
        }
        """
        if not data:
            raise ValueError("Cannot create Boxscore from empty data")

        home = data['home']
        away = data['away']
        return cls(
            home_team_id=home['teamId'],
            home_score=cls._side_score(home),
            home_roster=cls._side_roster(home, scoring_period_id),
            away_team_id=away['teamId'],
            away_score=cls._side_score(away),
            away_roster=cls._side_roster(away, scoring_period_id)
        )

    def involves(self, team_id: int) -> bool:
        """Check whether a team plays in this matchup."""
        return team_id in (self.home_team_id, self.away_team_id)

    def pairs(self, first_team_id: int, second_team_id: int) -> bool:
        """Check whether this matchup is between the two teams, in either order."""
        return {self.home_team_id, self.away_team_id} == {first_team_id, second_team_id}

    def roster_for(self, team_id: int) -> List[PlayerSlot]:
        """Lineup for one side of the matchup."""
        if team_id == self.home_team_id:
            return self.home_roster
        if team_id == self.away_team_id:
            return self.away_roster
        raise ValueError(f"Team {team_id} does not play in this matchup")

    def __str__(self):
        return f"{self.home_team_id} {self.home_score} - {self.away_score} {self.away_team_id}"
