"""
Roster formatting for the League Dashboard backend

Extracts one team's weekly lineup from the boxscores.
"""
import logging
from typing import Optional, Sequence, Union

from constants import UNKNOWN_TEAM_NAME
from exceptions import TeamNotFoundError
from models.boxscore import Boxscore
from models.division import Division
from models.roster import RosterPlayer, TeamRoster
from models.team import Team
from services.ownership_registry import OwnershipRegistry
from utils.helpers import is_starting_slot, slot_priority

logger = logging.getLogger(f'{__name__}.RosterService')


def find_team_boxscore(boxscores: Sequence[Boxscore], team_id: int) -> Optional[Boxscore]:
    """Find the boxscore a team plays in, as home or away."""
    for box in boxscores:
        if box.involves(team_id):
            return box
    return None


def format_roster(
    team_id: int,
    boxscores: Sequence[Boxscore],
    teams: Sequence[Team],
    registry: OwnershipRegistry,
    division: Union[str, Division]
) -> TeamRoster:
    """
    Build a team's roster for the current week.

    Starters come first, then Bench and IR; each group is ordered by slot
    priority and otherwise keeps the provider's order.

    Args:
        team_id: Team to format
        boxscores: Current-week boxscores
        teams: Current-week teams
        registry: Ownership registry
        division: Division the team plays in

    Returns:
        TeamRoster for the team

    Raises:
        TeamNotFoundError: If the team has no boxscore this week
    """
    boxscore = find_team_boxscore(boxscores, team_id)
    if boxscore is None:
        logger.info(f"Team {team_id} not found in {division} boxscores")
        raise TeamNotFoundError("Team not found")

    roster = [
        RosterPlayer(
            name=player.full_name,
            position=player.default_position,
            pro_team=player.pro_team_abbreviation,
            is_starter=is_starting_slot(player.rostered_position),
            slot_position=player.rostered_position
        )
        for player in boxscore.roster_for(team_id)
    ]
    roster.sort(key=lambda p: (not p.is_starter, slot_priority(p.slot_position)))

    team = next((t for t in teams if t.id == team_id), None)
    ownership = registry.lookup(division, team_id)

    return TeamRoster(
        team_id=team_id,
        team_name=team.name if team else UNKNOWN_TEAM_NAME,
        owner=ownership.owner,
        championships=list(ownership.championships),
        roster=roster
    )
