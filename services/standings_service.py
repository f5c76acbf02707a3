"""
Standings builder for the League Dashboard backend

Joins a division's teams with the ownership registry and ranks them.
"""
import logging
from typing import List, Sequence, Union

from models.division import Division
from models.standings import Standing
from models.team import Team
from services.ownership_registry import OwnershipRegistry

logger = logging.getLogger(f'{__name__}.StandingsService')


def build_standings(
    teams: Sequence[Team],
    registry: OwnershipRegistry,
    division: Union[str, Division]
) -> List[Standing]:
    """
    Build ranked standings for one division.

    Every team produces a row; teams missing from the registry get an empty
    owner and no championships. Rows are ordered by wins, then points
    scored, both descending. The sort is stable, so teams tied on both keep
    the provider's order.

    Args:
        teams: Teams at the league's current week
        registry: Ownership registry
        division: Division the teams belong to

    Returns:
        List of Standing, best record first
    """
    standings = []
    for team in teams:
        ownership = registry.lookup(division, team.id)
        standings.append(Standing(
            id=team.id,
            name=team.name,
            owner=ownership.owner,
            championships=list(ownership.championships),
            wins=team.wins,
            losses=team.losses,
            ties=team.ties,
            points=team.total_points_scored,
            points_against=team.points_against
        ))

    standings.sort(key=lambda s: (s.wins, s.points), reverse=True)

    logger.debug(f"Built standings for {len(standings)} teams in {division}")
    return standings
