"""
API client layer for the League Dashboard backend

HTTP client for communicating with the ESPN fantasy football API.
"""
from .client import LeagueClient, build_league_clients, close_league_clients

__all__ = ['LeagueClient', 'build_league_clients', 'close_league_clients']
