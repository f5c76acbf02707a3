"""
HTTP route tests using aiohttp's test server

The dashboard service runs against league client doubles, so these tests
cover routing, serialization and the error middleware end to end.
"""
import pytest
import pytest_asyncio
from unittest.mock import patch
from aiohttp import test_utils

from exceptions import APIException, ConfigurationException, MatchupNotFoundError, ValidationException
from models.division import Division
from services.dashboard_service import DashboardService
from services.ownership_registry import OwnershipRegistry
from tests.factories import LeagueClientFactory
from web import DASHBOARD_SERVICE, create_app
from web.middleware import status_for


@pytest.fixture
def league_clients():
    return {
        "green": LeagueClientFactory.double(Division.GREEN, "Green", matchup_period=9, scoring_period=9),
        "white": LeagueClientFactory.double(Division.WHITE, "White"),
    }


@pytest.fixture
def service(league_clients) -> DashboardService:
    registry = OwnershipRegistry.from_mapping({
        "green": {"1": {"owner": "Pat", "wins": ["2019", "", "2022"]}},
        "white": {},
    })
    return DashboardService(league_clients, registry)


@pytest_asyncio.fixture
async def http(service):
    """Test client bound to the dashboard application."""
    client = test_utils.TestClient(test_utils.TestServer(create_app(service)))
    await client.start_server()
    yield client
    await client.close()


class TestRoutes:
    """Test successful responses."""

    @pytest.mark.asyncio
    async def test_summary(self, http):
        response = await http.get('/api/summary')

        assert response.status == 200
        data = await response.json()
        assert set(data) == {"green", "white"}
        assert data["green"]["name"] == "Green"
        assert data["green"]["currentWeek"] == 9
        assert data["white"]["standings"][0]["id"] == 2

    @pytest.mark.asyncio
    async def test_league(self, http):
        response = await http.get('/api/league/green')

        assert response.status == 200
        data = await response.json()
        assert [row["id"] for row in data["standings"]] == [2, 1, 4, 3]
        assert data["standings"][1]["owner"] == "Pat"
        assert data["standings"][1]["championships"] == ["2019", "2022"]
        assert data["matchups"][0] == {
            "homeTeam": "Green One",
            "homeTeamId": 1,
            "homeScore": 110.0,
            "awayTeam": "Green Two",
            "awayTeamId": 2,
            "awayScore": 105.5,
        }

    @pytest.mark.asyncio
    async def test_roster(self, http):
        response = await http.get('/api/roster/green/1')

        assert response.status == 200
        data = await response.json()
        assert data["teamId"] == 1
        assert data["teamName"] == "Green One"
        assert data["roster"][0] == {
            "name": "Quarterback",
            "position": "QB",
            "proTeam": "KC",
            "isStarter": True,
            "slotPosition": "QB",
        }
        assert data["roster"][-1]["isStarter"] is False

    @pytest.mark.asyncio
    async def test_matchup_detail(self, http):
        response = await http.get('/api/matchup/green/2/1')

        assert response.status == 200
        data = await response.json()
        assert data["homeTeamId"] == 1
        assert data["homeOwner"] == "Pat"
        assert data["awayOwner"] == ""
        assert data["homeRoster"][0] == {"name": "Quarterback", "position": "QB", "points": 10.0, "projected": 18.5}
        assert [p["name"] for p in data["awayRoster"]] == ["Away Kicker"]

    @pytest.mark.asyncio
    async def test_health(self, http, league_clients):
        response = await http.get('/api/health')

        assert response.status == 200
        data = await response.json()
        assert data["status"] == "ok"
        assert "timestamp" in data
        league_clients["green"].fetch_league_info.assert_not_called()

    @pytest.mark.asyncio
    async def test_health_is_logged_like_other_routes(self, http):
        """Test that the health route gets request context and a traced operation."""
        with patch('utils.decorators.get_contextual_logger') as mock_get_logger:
            mock_logger = mock_get_logger.return_value
            mock_logger.start_operation.return_value = 'abc12345'

            response = await http.get('/api/health')

        assert response.status == 200
        mock_logger.start_operation.assert_called_once_with('health_route')
        mock_logger.end_operation.assert_called_once_with('abc12345', 'completed')


class TestErrorResponses:
    """Test the error middleware through the routes."""

    @pytest.mark.asyncio
    async def test_invalid_division(self, http, league_clients):
        response = await http.get('/api/league/blue')

        assert response.status == 400
        assert await response.json() == {"error": "Invalid division"}
        for client in league_clients.values():
            client.fetch_league_info.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_team_id(self, http):
        response = await http.get('/api/roster/white/abc')

        assert response.status == 400
        assert "Invalid team id" in (await response.json())["error"]

    @pytest.mark.asyncio
    async def test_team_not_found(self, http):
        response = await http.get('/api/roster/white/42')

        assert response.status == 404
        assert await response.json() == {"error": "Team not found"}

    @pytest.mark.asyncio
    async def test_matchup_not_found(self, http):
        response = await http.get('/api/matchup/white/1/3')

        assert response.status == 404
        assert await response.json() == {"error": "Matchup not found"}

    @pytest.mark.asyncio
    async def test_upstream_failure(self, http, league_clients):
        league_clients["white"].fetch_league_info.side_effect = APIException(
            "Access forbidden - league is private (no credentials configured)"
        )

        response = await http.get('/api/league/white')

        assert response.status == 500
        assert await response.json() == {
            "error": "Access forbidden - league is private (no credentials configured)"
        }

    @pytest.mark.asyncio
    async def test_unexpected_error(self, http, league_clients):
        league_clients["green"].fetch_teams.side_effect = RuntimeError("boom")

        response = await http.get('/api/summary')

        assert response.status == 500
        assert await response.json() == {"error": "boom"}

    @pytest.mark.asyncio
    async def test_unknown_route(self, http):
        response = await http.get('/api/standings')
        assert response.status == 404


class TestApplication:
    """Test application wiring."""

    def test_status_for(self):
        assert status_for(ValidationException("Invalid division")) == 400
        assert status_for(MatchupNotFoundError("Matchup not found")) == 404
        assert status_for(APIException("Network error")) == 500
        assert status_for(ConfigurationException("bad")) == 500

    def test_service_registered(self, service):
        app = create_app(service)
        assert app[DASHBOARD_SERVICE] is service

    @pytest.mark.asyncio
    async def test_cleanup_closes_clients(self, service, league_clients):
        client = test_utils.TestClient(test_utils.TestServer(create_app(service)))
        await client.start_server()
        await client.close()

        for league_client in league_clients.values():
            league_client.close.assert_awaited_once()
