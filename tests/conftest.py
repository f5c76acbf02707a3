"""
Pytest configuration and fixtures for League Dashboard tests.

This file provides test isolation and shared fixtures.
"""
import os
import pytest

# Ensure required configuration exists before any imports happen
os.environ.setdefault("GREEN_LEAGUE_ID", "111111")
os.environ.setdefault("WHITE_LEAGUE_ID", "222222")
os.environ.setdefault("SEASON_ID", "2025")


@pytest.fixture(autouse=True)
def reset_singleton_state():
    """
    Reset any singleton/global state between tests.

    This prevents test pollution from the config singleton and log context.
    """
    yield  # Run test

    try:
        import config as cfg
        cfg._config = None
    except (ImportError, AttributeError):
        pass

    from utils.logging import clear_context
    clear_context()
