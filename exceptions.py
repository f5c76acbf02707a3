"""
Custom exceptions for the League Dashboard backend

Every error a query can raise derives from DashboardException so the web
layer can map each family onto a single HTTP status.
"""


class DashboardException(Exception):
    """Base exception for all dashboard-related errors."""
    pass


class APIException(DashboardException):
    """Exception for upstream league API errors."""
    pass


class ValidationException(DashboardException):
    """Raised when query input (division, team id) is invalid."""
    pass


class ConfigurationException(DashboardException):
    """Raised when startup configuration is missing or unusable."""
    pass


class NotFoundError(DashboardException):
    """Raised when a requested entity is absent from freshly fetched data."""
    pass


class TeamNotFoundError(NotFoundError):
    """Raised when a requested team has no boxscore this week."""
    pass


class MatchupNotFoundError(NotFoundError):
    """Raised when no boxscore pairs the two requested teams."""
    pass
