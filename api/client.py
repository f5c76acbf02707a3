"""
ESPN league client for the League Dashboard backend

aiohttp-based client for the ESPN fantasy football read API. One instance
is constructed per division from that division's LeagueConfig.
"""
import aiohttp
import json
import logging
from typing import Optional, List, Dict, Any, Tuple

from config import LeagueConfig, get_config
from exceptions import APIException
from models.boxscore import Boxscore
from models.division import Division
from models.league import LeagueInfo
from models.team import Team

logger = logging.getLogger(f'{__name__}.LeagueClient')


class LeagueClient:
    """
    Async HTTP client for one ESPN fantasy football league.

    Features:
    - Lazily created session carrying the league's espn_s2/SWID cookies
    - Anonymous access when no credentials are configured
    - Every failure surfaced as APIException, no retries
    - Debug logging with response truncation
    """

    def __init__(self, league: LeagueConfig, base_url: Optional[str] = None, user_agent: Optional[str] = None):
        """
        Initialize league client.

        Args:
            league: Division league configuration
            base_url: Override ESPN API base URL from config
            user_agent: Override User-Agent header from config
        """
        if base_url is None or user_agent is None:
            config = get_config()
            base_url = base_url or config.espn_base_url
            user_agent = user_agent or config.user_agent

        self.league = league
        self.base_url = base_url.rstrip('/')
        self.user_agent = user_agent
        self._session: Optional[aiohttp.ClientSession] = None

        logger.debug(f"LeagueClient initialized for {league.division} league {league.league_id}")

    @property
    def headers(self) -> Dict[str, str]:
        """
        Default request headers.

        Session cookies go out as a literal Cookie header; a cookie jar would
        quote the braces in SWID.
        """
        headers = {
            'Accept': 'application/json',
            'User-Agent': self.user_agent
        }
        if self.league.cookies:
            headers['Cookie'] = '; '.join(f"{name}={value}" for name, value in self.league.cookies.items())
        return headers

    def _build_url(self, season_id: Optional[int] = None) -> str:
        """
        Build the league URL for a season.

        Args:
            season_id: Season year (defaults to the configured season)

        Returns:
            Complete league URL without query string
        """
        season = season_id or self.league.season_id
        return f"{self.base_url}/seasons/{season}/segments/0/leagues/{self.league.league_id}"

    def _add_params(self, url: str, params: Optional[List[Tuple[str, Any]]] = None) -> str:
        """
        Add query parameters to URL.

        Repeated keys are kept, ESPN expects one 'view' parameter per view.
        """
        if not params:
            return url

        param_str = "&".join(f"{key}={value}" for key, value in params)
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{param_str}"

    async def _ensure_session(self) -> None:
        """Ensure aiohttp session exists and is not closed."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers=self.headers,
                cookie_jar=aiohttp.DummyCookieJar()
            )
            logger.debug(
                f"Created new aiohttp session for {self.league.division} "
                f"({'authenticated' if self.league.has_credentials else 'anonymous'})"
            )

    async def get(
        self,
        params: Optional[List[Tuple[str, Any]]] = None,
        season_id: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Make GET request against the league endpoint.

        Args:
            params: Query parameters as (key, value) tuples
            season_id: Season override
            headers: Extra request headers (e.g., x-fantasy-filter)

        Returns:
            JSON response data

        Raises:
            APIException: For HTTP errors, network issues or non-JSON bodies
        """
        url = self._add_params(self._build_url(season_id), params)

        await self._ensure_session()

        try:
            logger.debug(f"GET: {self.league.division} params: {params}")

            async with self._session.get(url, headers=headers) as response:
                if response.status in (401, 403):
                    hint = "" if self.league.has_credentials else " (no credentials configured)"
                    logger.error(f"Authentication failed for {self.league.division} league: {url}{hint}")
                    if response.status == 401:
                        raise APIException(f"Authentication failed - check espn_s2/SWID cookies{hint}")
                    raise APIException(f"Access forbidden - league is private{hint}")
                elif response.status == 404:
                    logger.error(f"League not found: {url}")
                    raise APIException(f"League {self.league.league_id} not found for season {season_id or self.league.season_id}")
                elif response.status >= 400:
                    error_text = await response.text()
                    logger.error(f"API error {response.status}: {url} - {error_text}")
                    raise APIException(f"API request failed with status {response.status}: {error_text}")

                data = await response.json(content_type=None)

                # Truncate response for logging
                data_str = str(data)
                if len(data_str) > 1200:
                    log_data = data_str[:1200] + "..."
                else:
                    log_data = data_str
                logger.debug(f"Response: {log_data}")

                if not isinstance(data, dict):
                    raise APIException(f"Unexpected response format: {type(data).__name__}")

                return data

        except APIException:
            raise
        except aiohttp.ClientError as e:
            logger.error(f"HTTP client error for {url}: {e}")
            raise APIException(f"Network error: {e}")
        except Exception as e:
            logger.error(f"Unexpected error in GET {url}: {e}")
            raise APIException(f"API call failed: {e}")

    async def fetch_league_info(self, season_id: Optional[int] = None) -> LeagueInfo:
        """
        Get league name and current week pointers.

        Args:
            season_id: Season year (defaults to the configured season)

        Returns:
            LeagueInfo for the season

        Raises:
            APIException: For API errors or malformed data
        """
        data = await self.get(params=[('view', 'mSettings'), ('view', 'mStatus')], season_id=season_id)

        try:
            info = LeagueInfo.from_api_data(data)
        except Exception as e:
            logger.error(f"Error parsing league info for {self.league.division}: {e}")
            raise APIException(f"Failed to parse league info: {e}")

        logger.debug(f"Retrieved league info for {self.league.division}: {info}")
        return info

    async def fetch_teams(self, scoring_period_id: int, season_id: Optional[int] = None) -> List[Team]:
        """
        Get all teams with their records at a scoring period.

        Args:
            scoring_period_id: Week to read records at
            season_id: Season year (defaults to the configured season)

        Returns:
            List of Team in provider order

        Raises:
            APIException: For API errors or malformed data
        """
        data = await self.get(
            params=[('view', 'mTeam'), ('scoringPeriodId', scoring_period_id)],
            season_id=season_id
        )

        try:
            teams = [Team.from_api_data(item) for item in data.get('teams') or []]
        except Exception as e:
            logger.error(f"Error parsing teams for {self.league.division}: {e}")
            raise APIException(f"Failed to parse teams: {e}")

        logger.debug(f"Retrieved {len(teams)} teams for {self.league.division} at week {scoring_period_id}")
        return teams

    async def fetch_boxscores(
        self,
        matchup_period_id: int,
        scoring_period_id: int,
        season_id: Optional[int] = None
    ) -> List[Boxscore]:
        """
        Get every matchup of a week with both rosters.

        Args:
            matchup_period_id: Head-to-head week to return
            scoring_period_id: Scoring period the rosters and points refer to
            season_id: Season year (defaults to the configured season)

        Returns:
            List of Boxscore in provider order

        Raises:
            APIException: For API errors or malformed data
        """
        fantasy_filter = {'schedule': {'filterMatchupPeriodIds': {'value': [matchup_period_id]}}}
        data = await self.get(
            params=[('view', 'mMatchupScore'), ('view', 'mScoreboard'), ('scoringPeriodId', scoring_period_id)],
            season_id=season_id,
            headers={'x-fantasy-filter': json.dumps(fantasy_filter)}
        )

        boxscores = []
        try:
            for item in data.get('schedule') or []:
                if item.get('matchupPeriodId') != matchup_period_id:
                    continue
                if not item.get('away'):
                    # Bye week: no opponent, nothing to score
                    logger.debug(f"Skipping bye for team {item.get('home', {}).get('teamId')}")
                    continue
                boxscores.append(Boxscore.from_api_data(item, scoring_period_id))
        except Exception as e:
            logger.error(f"Error parsing boxscores for {self.league.division}: {e}")
            raise APIException(f"Failed to parse boxscores: {e}")

        logger.debug(f"Retrieved {len(boxscores)} boxscores for {self.league.division} week {matchup_period_id}")
        return boxscores

    async def close(self) -> None:
        """Close the HTTP session and clean up resources."""
        if self._session and not self._session.closed:
            await self._session.close()
            logger.debug(f"Closed aiohttp session for {self.league.division}")

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit with cleanup."""
        await self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(division='{self.league.division}', league_id={self.league.league_id})"


def build_league_clients(config=None) -> Dict[str, LeagueClient]:
    """
    Build one client per division from configuration.

    Divisions without a full credential pair are logged at startup and
    fall back to anonymous access.

    Returns:
        Mapping of division value to its LeagueClient
    """
    config = config or get_config()
    clients = {}
    for division in Division:
        league = config.league_config(division)
        if not league.has_credentials:
            if league.espn_s2 or league.swid:
                logger.warning(
                    f"Incomplete credentials for {division} league {league.league_id}: "
                    f"both espn_s2 and SWID are required, proceeding without credentials"
                )
            else:
                logger.warning(
                    f"No credentials for {division} league {league.league_id}, proceeding without "
                    f"credentials; private leagues will reject requests"
                )
        clients[division.value] = LeagueClient(league, base_url=config.espn_base_url, user_agent=config.user_agent)
    return clients


async def close_league_clients(clients: Dict[str, LeagueClient]) -> None:
    """Close every client session. Call during app shutdown."""
    for client in clients.values():
        await client.close()
