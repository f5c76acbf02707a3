"""
Ownership record model

Locally curated owner name and championship history for a team.
"""
from typing import List
from pydantic import Field, field_validator

from models.base import DashboardBaseModel


class OwnershipRecord(DashboardBaseModel):
    """Owner and championship years for one team in one division."""

    model_config = {**DashboardBaseModel.model_config, "frozen": True}

    owner: str = Field('', description="Owner display name")
    championships: List[str] = Field(default_factory=list, description="Championship years, oldest first")

    @field_validator("championships", mode="before")
    @classmethod
    def drop_placeholder_years(cls, v):
        """Remove empty-string placeholders while keeping order."""
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"championships must be a list of years, got {type(v).__name__}")
        return [str(year) for year in v if year is not None and year != '']

    @field_validator("owner", mode="before")
    @classmethod
    def default_owner(cls, v):
        """Treat a null owner as unknown."""
        return v or ''

    @classmethod
    def from_api_data(cls, data: dict) -> 'OwnershipRecord':
        """
        Create OwnershipRecord from a registry entry.

        The registry file stores championship years under 'wins':
        {'owner': 'Pat', 'wins': ['2019', '', '2022']}
        """
        if not data:
            return cls()
        return cls(owner=data.get('owner'), championships=data.get('wins'))

    def __str__(self):
        return f"{self.owner or '?'} ({len(self.championships)} titles)"
