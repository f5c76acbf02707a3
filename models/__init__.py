"""
Data models for the League Dashboard backend

Pydantic models for upstream ESPN data and the dashboard's response shapes.
"""

from models.base import DashboardBaseModel
from models.division import Division
from models.league import LeagueInfo
from models.team import Team
from models.boxscore import Boxscore, PlayerSlot
from models.ownership import OwnershipRecord
from models.matchup import MatchupSummary, MatchupPlayer, MatchupDetail
from models.standings import Standing, LeagueOverview
from models.roster import RosterPlayer, TeamRoster
from models.health import HealthStatus

__all__ = [
    'DashboardBaseModel',
    'Division',
    'LeagueInfo',
    'Team',
    'Boxscore',
    'PlayerSlot',
    'OwnershipRecord',
    'MatchupSummary',
    'MatchupPlayer',
    'MatchupDetail',
    'Standing',
    'LeagueOverview',
    'RosterPlayer',
    'TeamRoster',
    'HealthStatus',
]
