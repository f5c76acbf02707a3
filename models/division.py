"""
Division model

The two independently configured leagues tracked by the dashboard.
"""
from enum import Enum


class Division(str, Enum):
    """League division token as it appears in routes and the ownership file."""
    GREEN = "green"
    WHITE = "white"

    def __str__(self):
        return self.value
