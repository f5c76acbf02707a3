"""
Dashboard service for the League Dashboard backend

The read-only query surface: validates input, fetches fresh league state
for a division and runs the formatters over it.
"""
import asyncio
import logging
from typing import Dict, List, Mapping, Tuple, Union

from api.client import LeagueClient
from exceptions import APIException
from models.boxscore import Boxscore
from models.division import Division
from models.health import HealthStatus
from models.league import LeagueInfo
from models.matchup import MatchupDetail
from models.roster import TeamRoster
from models.standings import LeagueOverview
from models.team import Team
from services.matchup_service import build_matchup_detail, summarize_matchups
from services.ownership_registry import OwnershipRegistry
from services.roster_service import format_roster
from services.standings_service import build_standings
from utils.helpers import parse_division, parse_team_id

logger = logging.getLogger(f'{__name__}.DashboardService')

WeekState = Tuple[LeagueInfo, List[Team], List[Boxscore]]


class DashboardService:
    """
    Service for dashboard queries.

    Features:
    - One league client per division, shared logic
    - Input validated before any upstream call
    - Independent upstream reads issued concurrently
    - No caching: every query reads fresh state
    """

    def __init__(self, clients: Mapping[str, LeagueClient], registry: OwnershipRegistry):
        """
        Initialize dashboard service.

        Args:
            clients: League client per division value
            registry: Ownership registry shared by all queries
        """
        self.clients = dict(clients)
        self.registry = registry
        logger.debug(f"DashboardService initialized for divisions: {', '.join(self.clients)}")

    def _client_for(self, division: Division) -> LeagueClient:
        return self.clients[division.value]

    async def _fetch_week_state(self, division: Division) -> WeekState:
        """
        Fetch league info, then the current week's teams and boxscores.

        Teams and boxscores depend only on the week pointers, so they are
        requested together.

        Raises:
            APIException: If any upstream call fails
        """
        client = self._client_for(division)
        try:
            info = await client.fetch_league_info()
            teams, boxscores = await asyncio.gather(
                client.fetch_teams(info.current_scoring_period_id),
                client.fetch_boxscores(info.current_matchup_period_id, info.current_scoring_period_id)
            )
        except APIException as e:
            logger.error(
                f"Upstream fetch failed for {division} league {client.league.league_id} "
                f"season {client.league.season_id}: {e}"
            )
            raise

        logger.debug(
            f"Fetched {division} week {info.current_matchup_period_id}: "
            f"{len(teams)} teams, {len(boxscores)} boxscores"
        )
        return info, teams, boxscores

    async def _league_overview(self, division: Division) -> LeagueOverview:
        info, teams, boxscores = await self._fetch_week_state(division)
        return LeagueOverview(
            name=info.name,
            current_week=info.current_matchup_period_id,
            standings=build_standings(teams, self.registry, division),
            matchups=summarize_matchups(boxscores, teams)
        )

    async def get_summary(self) -> Dict[str, LeagueOverview]:
        """
        Get standings and matchups for every division.

        Returns:
            Mapping of division value to its LeagueOverview

        Raises:
            APIException: If any division's fetch fails
        """
        divisions = list(Division)
        overviews = await asyncio.gather(*(self._league_overview(d) for d in divisions))
        logger.info(f"Built summary for {len(divisions)} divisions")
        return {division.value: overview for division, overview in zip(divisions, overviews)}

    async def get_league(self, division: Union[str, Division]) -> LeagueOverview:
        """
        Get standings and matchups for one division.

        Raises:
            ValidationException: For an invalid division token
            APIException: If the upstream fetch fails
        """
        division = parse_division(division)
        overview = await self._league_overview(division)
        logger.info(f"Built {division} league overview with {len(overview.standings)} teams")
        return overview

    async def get_roster(self, division: Union[str, Division], team_id: Union[str, int]) -> TeamRoster:
        """
        Get one team's formatted roster for the current week.

        Raises:
            ValidationException: For an invalid division or team id
            APIException: If the upstream fetch fails
            TeamNotFoundError: If the team has no boxscore this week
        """
        division = parse_division(division)
        team_id = parse_team_id(team_id)

        _, teams, boxscores = await self._fetch_week_state(division)
        return format_roster(team_id, boxscores, teams, self.registry, division)

    async def get_matchup_detail(
        self,
        division: Union[str, Division],
        home_team_id: Union[str, int],
        away_team_id: Union[str, int]
    ) -> MatchupDetail:
        """
        Get the starter comparison for a matchup between two teams.

        Raises:
            ValidationException: For an invalid division or team id
            APIException: If the upstream fetch fails
            MatchupNotFoundError: If the two teams do not play each other this week
        """
        division = parse_division(division)
        home_team_id = parse_team_id(home_team_id)
        away_team_id = parse_team_id(away_team_id)

        _, teams, boxscores = await self._fetch_week_state(division)
        return build_matchup_detail(home_team_id, away_team_id, boxscores, teams, self.registry, division)

    def health_check(self) -> HealthStatus:
        """Liveness signal with no upstream dependency."""
        return HealthStatus()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(divisions={list(self.clients)}, registry={self.registry!r})"
