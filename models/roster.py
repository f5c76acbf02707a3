"""
Roster models for a team's weekly lineup

Represents the formatted roster returned to the dashboard.
"""
from typing import List
from pydantic import Field

from models.base import DashboardBaseModel


class RosterPlayer(DashboardBaseModel):
    """A rostered player with starter/bench classification."""

    name: str = Field(..., description="Player full name")
    position: str = Field('', description="Natural position")
    pro_team: str = Field('', description="NFL team abbreviation")
    is_starter: bool = Field(..., description="True unless slotted on Bench or IR")
    slot_position: str = Field(..., description="Rostered slot")


class TeamRoster(DashboardBaseModel):
    """One team's lineup for the current week."""

    team_id: int = Field(..., description="ESPN team ID")
    team_name: str = Field(..., description="Team name")
    owner: str = ''
    championships: List[str] = Field(default_factory=list)
    roster: List[RosterPlayer] = Field(default_factory=list)
