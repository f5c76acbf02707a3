"""
HTTP routes for the League Dashboard backend

Thin aiohttp handlers over DashboardService; errors are mapped to responses
by the error middleware.
"""
from aiohttp import web

from services.dashboard_service import DashboardService
from utils.decorators import logged_route

DASHBOARD_SERVICE = web.AppKey("dashboard_service", DashboardService)

routes = web.RouteTableDef()


def _service(request: web.Request) -> DashboardService:
    return request.app[DASHBOARD_SERVICE]


@routes.get('/api/summary')
@logged_route("summary")
async def get_summary(request: web.Request) -> web.Response:
    """Both divisions' standings and matchups."""
    summary = await _service(request).get_summary()
    return web.json_response({division: overview.to_dict() for division, overview in summary.items()})


@routes.get('/api/league/{division}')
@logged_route("league")
async def get_league(request: web.Request) -> web.Response:
    """One division's standings and matchups."""
    overview = await _service(request).get_league(request.match_info['division'])
    return web.json_response(overview.to_dict())


@routes.get('/api/roster/{division}/{team_id}')
@logged_route("roster")
async def get_roster(request: web.Request) -> web.Response:
    """One team's roster for the current week."""
    roster = await _service(request).get_roster(
        request.match_info['division'],
        request.match_info['team_id']
    )
    return web.json_response(roster.to_dict())


@routes.get('/api/matchup/{division}/{home_team_id}/{away_team_id}')
@logged_route("matchup")
async def get_matchup_detail(request: web.Request) -> web.Response:
    """Starting lineups for the matchup between two teams."""
    detail = await _service(request).get_matchup_detail(
        request.match_info['division'],
        request.match_info['home_team_id'],
        request.match_info['away_team_id']
    )
    return web.json_response(detail.to_dict())


@routes.get('/api/health')
@logged_route("health")
async def health_check(request: web.Request) -> web.Response:
    """Liveness check."""
    return web.json_response(_service(request).health_check().to_dict())
