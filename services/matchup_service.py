"""
Matchup formatting for the League Dashboard backend

Builds the weekly scoreboard and the side-by-side starter detail for a matchup.
"""
import logging
from typing import Dict, List, Optional, Sequence, Union

from constants import UNKNOWN_TEAM_NAME
from exceptions import MatchupNotFoundError
from models.boxscore import Boxscore, PlayerSlot
from models.division import Division
from models.matchup import MatchupDetail, MatchupPlayer, MatchupSummary
from models.team import Team
from services.ownership_registry import OwnershipRegistry
from utils.helpers import is_starting_slot, slot_priority

logger = logging.getLogger(f'{__name__}.MatchupService')


def team_names(teams: Sequence[Team]) -> Dict[int, str]:
    """Map team id to team name."""
    return {team.id: team.name for team in teams}


def summarize_matchups(boxscores: Sequence[Boxscore], teams: Sequence[Team]) -> List[MatchupSummary]:
    """
    Reduce a week's boxscores to score pairs, in provider order.

    Team ids missing from the team list are named "Unknown".
    """
    names = team_names(teams)
    return [
        MatchupSummary(
            home_team=names.get(box.home_team_id, UNKNOWN_TEAM_NAME),
            home_team_id=box.home_team_id,
            home_score=box.home_score,
            away_team=names.get(box.away_team_id, UNKNOWN_TEAM_NAME),
            away_team_id=box.away_team_id,
            away_score=box.away_score
        )
        for box in boxscores
    ]


def find_matchup(boxscores: Sequence[Boxscore], first_team_id: int, second_team_id: int) -> Optional[Boxscore]:
    """Find the boxscore between two teams regardless of home/away order."""
    for box in boxscores:
        if box.pairs(first_team_id, second_team_id):
            return box
    return None


def format_starters(roster: Sequence[PlayerSlot]) -> List[MatchupPlayer]:
    """Starting lineup ordered by slot, with actual and projected points."""
    starters = [
        MatchupPlayer(
            name=player.full_name,
            position=player.rostered_position,
            points=player.total_points or 0,
            projected=player.projected_points
        )
        for player in roster
        if is_starting_slot(player.rostered_position)
    ]
    starters.sort(key=lambda p: slot_priority(p.position))
    return starters


def build_matchup_detail(
    home_team_id: int,
    away_team_id: int,
    boxscores: Sequence[Boxscore],
    teams: Sequence[Team],
    registry: OwnershipRegistry,
    division: Union[str, Division]
) -> MatchupDetail:
    """
    Build the starter comparison for one matchup.

    The pair is matched in either order; the result keeps the provider's
    home/away assignment.

    Raises:
        MatchupNotFoundError: If no boxscore pairs the two teams
    """
    matchup = find_matchup(boxscores, home_team_id, away_team_id)
    if matchup is None:
        logger.info(f"No matchup between {home_team_id} and {away_team_id} in {division}")
        raise MatchupNotFoundError("Matchup not found")

    names = team_names(teams)
    home_owner = registry.lookup(division, matchup.home_team_id)
    away_owner = registry.lookup(division, matchup.away_team_id)

    return MatchupDetail(
        home_team=names.get(matchup.home_team_id, UNKNOWN_TEAM_NAME),
        home_team_id=matchup.home_team_id,
        home_owner=home_owner.owner,
        home_championships=list(home_owner.championships),
        home_score=matchup.home_score,
        home_roster=format_starters(matchup.home_roster),
        away_team=names.get(matchup.away_team_id, UNKNOWN_TEAM_NAME),
        away_team_id=matchup.away_team_id,
        away_owner=away_owner.owner,
        away_championships=list(away_owner.championships),
        away_score=matchup.away_score,
        away_roster=format_starters(matchup.away_roster)
    )
