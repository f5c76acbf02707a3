"""
League Dashboard backend - Main Entry Point

Loads configuration and the ownership registry, builds one ESPN client per
division and serves the dashboard API with aiohttp.
"""
import logging
import os
from logging.handlers import RotatingFileHandler

from aiohttp import web

from api.client import build_league_clients
from config import get_config
from services.dashboard_service import DashboardService
from services.ownership_registry import OwnershipRegistry
from web import create_app


def setup_logging():
    """Configure hybrid logging: human-readable console + structured JSON files."""
    from utils.logging import JSONFormatter

    # Create logs directory if it doesn't exist
    os.makedirs('logs', exist_ok=True)

    config = get_config()
    level = getattr(logging, config.log_level.upper())

    # Console handler - detailed format for development debugging
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    ))

    # JSON file handler - structured logging for monitoring and analysis
    json_handler = RotatingFileHandler(
        'logs/dashboard.json',
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=5
    )
    json_handler.setFormatter(JSONFormatter())

    # Root logger so module loggers and aiohttp share the handlers
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if not root_logger.handlers:  # Avoid duplicate handlers
        root_logger.addHandler(console_handler)
        root_logger.addHandler(json_handler)

    return logging.getLogger('league_dashboard')


def build_service(config=None) -> DashboardService:
    """
    Wire the registry and league clients into a DashboardService.

    Raises:
        ConfigurationException: If the ownership file cannot be loaded
    """
    config = config or get_config()
    registry = OwnershipRegistry.from_file(config.teams_file)
    clients = build_league_clients(config)
    return DashboardService(clients, registry)


def main():
    """Main entry point."""
    logger = setup_logging()

    config = get_config()
    logger.info("Starting League Dashboard")
    logger.info(f"Environment: {config.environment}")
    logger.info(f"Season: {config.season_id}, green league: {config.green_league_id}, "
                f"white league: {config.white_league_id}")

    try:
        app = create_app(build_service(config))
        logger.info("API Endpoints: /api/summary, /api/league/{division}, /api/roster/{division}/{team_id}, "
                    "/api/matchup/{division}/{home_team_id}/{away_team_id}, /api/health")
        web.run_app(app, host=config.http_host, port=config.http_port, print=None)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
