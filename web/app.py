"""
Application factory for the League Dashboard backend
"""
import logging

from aiohttp import web

from api.client import close_league_clients
from services.dashboard_service import DashboardService
from web.middleware import error_middleware
from web.routes import DASHBOARD_SERVICE, routes

logger = logging.getLogger(f'{__name__}.create_app')


def create_app(service: DashboardService) -> web.Application:
    """
    Build the aiohttp application around a dashboard service.

    League client sessions are closed when the application shuts down.

    Args:
        service: Fully wired DashboardService

    Returns:
        aiohttp Application ready for web.run_app or a test server
    """
    app = web.Application(middlewares=[error_middleware])
    app[DASHBOARD_SERVICE] = service
    app.add_routes(routes)

    async def _close_clients(app: web.Application) -> None:
        await close_league_clients(app[DASHBOARD_SERVICE].clients)
        logger.info("Closed league client sessions")

    app.on_cleanup.append(_close_clients)

    logger.debug(f"Created app with {len(app.router.routes())} routes")
    return app
