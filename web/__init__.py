"""
Web layer for the League Dashboard backend

aiohttp application exposing the dashboard queries over HTTP.
"""
from .app import create_app
from .routes import DASHBOARD_SERVICE

__all__ = ['create_app', 'DASHBOARD_SERVICE']
