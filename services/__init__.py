"""
Business logic services for the League Dashboard backend

Ownership lookups, the data formatters and the dashboard query surface.
"""

from .ownership_registry import OwnershipRegistry
from .standings_service import build_standings
from .matchup_service import summarize_matchups, build_matchup_detail
from .roster_service import format_roster
from .dashboard_service import DashboardService

__all__ = [
    'OwnershipRegistry',
    'build_standings',
    'summarize_matchups', 'build_matchup_detail',
    'format_roster',
    'DashboardService',
]
